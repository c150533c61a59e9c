"""Round-trip tests against a real PostgreSQL. Set TEST_DATABASE_URL to run them."""

from __future__ import annotations

import os
from datetime import datetime

import psycopg2
import pytest

from db.init_db import create_tables
from models.room import Room
from models.roommate import Roommate
from repositories.room_repo import RoomRepository
from repositories.roommate_repo import RoommateRepository

DATABASE_URL = os.getenv("TEST_DATABASE_URL")

pytestmark = pytest.mark.skipif(not DATABASE_URL, reason="TEST_DATABASE_URL not set")


@pytest.fixture
def url() -> str:
    create_tables(DATABASE_URL)
    conn = psycopg2.connect(DATABASE_URL)
    try:
        with conn.cursor() as cur:
            cur.execute("TRUNCATE Roommate, Room RESTART IDENTITY;")
        conn.commit()
    finally:
        conn.close()
    return DATABASE_URL


def _insert_roommate_without_room(url: str, first_name: str) -> int:
    conn = psycopg2.connect(url)
    try:
        with conn.cursor() as cur:
            cur.execute(
                "INSERT INTO Roommate (Firstname, Lastname, RentPortion, MoveInDate, RoomId) "
                "VALUES (%s, 'Solo', 100, %s, NULL) RETURNING Id;",
                (first_name, datetime(2023, 5, 1)),
            )
            new_id = cur.fetchone()[0]
        conn.commit()
        return new_id
    finally:
        conn.close()


def test_ocean_view_round_trip(url: str) -> None:
    room = Room(name="Ocean View", max_occupancy=2)
    RoomRepository(url).insert(room)
    roommate = Roommate("Jess", "Novak", 500, datetime(2024, 1, 15), room=room)

    repo = RoommateRepository(url)
    repo.insert(roommate)
    fetched = repo.get_by_id(roommate.id)

    assert fetched == roommate
    assert fetched.room.name == "Ocean View"


def test_get_by_id_missing_and_unassigned(url: str) -> None:
    repo = RoommateRepository(url)
    solo_id = _insert_roommate_without_room(url, "Alex")

    assert repo.get_by_id(solo_id + 1000) is None
    solo = repo.get_by_id(solo_id)
    assert solo.first_name == "Alex"
    assert solo.room is None


def test_get_all_returns_every_row_once(url: str) -> None:
    room = Room(name="Attic", max_occupancy=3)
    RoomRepository(url).insert(room)
    repo = RoommateRepository(url)
    ids = set()
    for name in ("A", "B", "C"):
        rm = Roommate(name, "X", 1, datetime(2024, 3, 1), room=room)
        repo.insert(rm)
        ids.add(rm.id)
    ids.add(_insert_roommate_without_room(url, "D"))

    all_rows = repo.get_all()

    assert sorted(r.id for r in all_rows) == sorted(ids)
    assert all(r.room is None for r in all_rows)


def test_insert_with_unknown_room_raises(url: str) -> None:
    rm = Roommate("Ghost", "Room", 1, datetime(2024, 3, 1), room=Room(id=12345, name="?", max_occupancy=0))

    with pytest.raises(psycopg2.IntegrityError):
        RoommateRepository(url).insert(rm)
    assert RoommateRepository(url).get_all() == []
