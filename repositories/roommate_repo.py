"""
repositories/roommate_repo.py
-----------------------------
Data access layer for roommates.
All SQL queries related to the `Roommate` table live here.
"""

from typing import Mapping, Optional

from psycopg2.extras import RealDictCursor

from models.room import Room
from models.roommate import Roommate
from repositories.base_repo import BaseRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class RoommateRepository(BaseRepository):
    """Repository for list/get/insert operations on the Roommate table."""

    # ── CREATE ────────────────────────────────────────────

    def insert(self, roommate: Roommate) -> None:
        """
        Insert a new roommate.

        The roommate must have a room assigned; its id is used as the
        foreign key. On success the storage-assigned id is written to
        `roommate.id`.

        Args:
            roommate: The Roommate domain object to persist.

        Raises:
            AttributeError: If `roommate.room` is None.
            ValueError: If the room has not been saved yet (no id).
            psycopg2.Error: If the insert fails (e.g. unknown RoomId).
        """
        room_id = roommate.room.id
        if room_id is None:
            raise ValueError(f"Room '{roommate.room.name}' has no id; insert the room first")
        sql = """
            INSERT INTO Roommate (Firstname, Lastname, RentPortion, MoveInDate, RoomId)
            VALUES (%s, %s, %s, %s, %s)
            RETURNING Id;
        """
        with self._connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute(sql, (
                        roommate.first_name, roommate.last_name,
                        roommate.rent_portion, roommate.moved_in_date, room_id,
                    ))
                    roommate.id = cur.fetchone()[0]
                conn.commit()
                logger.info(f"Added roommate #{roommate.id} in room #{room_id}")
            except Exception as e:
                conn.rollback()
                logger.error(f"Failed to add roommate {roommate.full_name}: {e}")
                raise

    # ── READ ──────────────────────────────────────────────

    def get_all(self) -> list[Roommate]:
        """
        Fetch every roommate, without their rooms.

        Returns:
            List of Roommate objects in the order the database returns them.
        """
        sql = "SELECT Id, Firstname, Lastname, RentPortion, MoveInDate AS MovedInDate FROM Roommate;"
        with self._connection() as conn:
            with conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute(sql)
                roommates = [self._row_to_roommate(r) for r in cur.fetchall()]
        logger.debug(f"Loaded {len(roommates)} roommates")
        return roommates

    def get_by_id(self, roommate_id: int) -> Optional[Roommate]:
        """
        Fetch a single roommate by ID together with their room, if any.

        Args:
            roommate_id: Primary key.

        Returns:
            A Roommate object or None if not found.
        """
        sql = """
            SELECT rm.Id, rm.Firstname, rm.Lastname, rm.RentPortion,
                   rm.MoveInDate AS MovedInDate,
                   r.Id AS RoomId, r.Name, r.MaxOccupancy
            FROM Roommate rm
            LEFT JOIN Room r ON rm.RoomId = r.Id
            WHERE rm.Id = %s;
        """
        with self._connection() as conn:
            with conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute(sql, (roommate_id,))
                row = cur.fetchone()
                return self._row_to_roommate(row) if row else None

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_roommate(row: Mapping) -> Roommate:
        """
        Convert a database row to a Roommate domain object.

        Keys are lower case because PostgreSQL folds unquoted identifiers.
        The room is only built when the query joined Room and found one.
        """
        room = None
        if row.get("roomid") is not None:
            room = Room(
                id=row["roomid"],
                name=row["name"],
                max_occupancy=row["maxoccupancy"],
            )
        return Roommate(
            id=row["id"],
            first_name=row["firstname"],
            last_name=row["lastname"],
            rent_portion=row["rentportion"],
            moved_in_date=row["movedindate"],
            room=room,
        )
