"""
main.py
-------
Command-line entry point for the Roommates data layer.

Responsibilities:
    - Initialize the database schema.
    - List, show and add rooms and roommates through the repositories.
"""

import argparse
from datetime import datetime
from typing import Sequence

from config import DATABASE_URL, LOG_LEVEL
from db.init_db import create_tables
from models.room import Room
from models.roommate import Roommate
from repositories.room_repo import RoomRepository
from repositories.roommate_repo import RoommateRepository
from utils.logger import get_logger, set_level

logger = get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Manage rooms and roommates")
    p.add_argument("--database-url", default=DATABASE_URL, help="PostgreSQL connection URL")
    p.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: %(default)s)",
    )
    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create the tables if missing")
    sub.add_parser("rooms", help="List all rooms")

    add_room = sub.add_parser("add-room", help="Add a room")
    add_room.add_argument("name")
    add_room.add_argument("max_occupancy", type=int)

    sub.add_parser("list", help="List all roommates")

    show = sub.add_parser("show", help="Show one roommate with their room")
    show.add_argument("id", type=int)

    add = sub.add_parser("add", help="Add a roommate to a room")
    add.add_argument("first_name")
    add.add_argument("last_name")
    add.add_argument("rent_portion", type=int)
    add.add_argument("room_id", type=int)
    add.add_argument(
        "--moved-in",
        type=datetime.fromisoformat,
        default=None,
        metavar="YYYY-MM-DD",
        help="Move-in date (default: now)",
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    """Run one CLI command and return the process exit code."""
    args = build_parser().parse_args(argv)
    set_level(args.log_level)

    if args.command == "init-db":
        create_tables(args.database_url)
        print("Database schema created.")

    elif args.command == "rooms":
        for room in RoomRepository(args.database_url).get_all():
            print(room)

    elif args.command == "add-room":
        room = Room(name=args.name, max_occupancy=args.max_occupancy)
        RoomRepository(args.database_url).insert(room)
        print(f"Added room #{room.id}")

    elif args.command == "list":
        for roommate in RoommateRepository(args.database_url).get_all():
            print(roommate)

    elif args.command == "show":
        roommate = RoommateRepository(args.database_url).get_by_id(args.id)
        if roommate is None:
            print(f"Roommate #{args.id} not found")
            return 1
        print(roommate)
        if roommate.room:
            print(f"  Room: {roommate.room}")

    elif args.command == "add":
        room = RoomRepository(args.database_url).get_by_id(args.room_id)
        if room is None:
            print(f"Room #{args.room_id} not found")
            return 1
        roommate = Roommate(
            first_name=args.first_name,
            last_name=args.last_name,
            rent_portion=args.rent_portion,
            moved_in_date=args.moved_in or datetime.now(),
            room=room,
        )
        RoommateRepository(args.database_url).insert(roommate)
        print(f"Added roommate #{roommate.id}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
