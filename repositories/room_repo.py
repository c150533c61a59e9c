"""
repositories/room_repo.py
-------------------------
Data access layer for rooms.
"""

from typing import Mapping, Optional

from psycopg2.extras import RealDictCursor

from models.room import Room
from repositories.base_repo import BaseRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class RoomRepository(BaseRepository):
    """Repository for list/get/insert operations on the Room table."""

    def insert(self, room: Room) -> None:
        """Insert a new room and write the assigned id back to `room.id`."""
        sql = "INSERT INTO Room (Name, MaxOccupancy) VALUES (%s, %s) RETURNING Id;"
        with self._connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute(sql, (room.name, room.max_occupancy))
                    room.id = cur.fetchone()[0]
                conn.commit()
                logger.info(f"Added room '{room.name}' #{room.id}")
            except Exception as e:
                conn.rollback()
                logger.error(f"Failed to add room '{room.name}': {e}")
                raise

    def get_all(self) -> list[Room]:
        sql = "SELECT Id, Name, MaxOccupancy FROM Room;"
        with self._connection() as conn:
            with conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute(sql)
                return [self._row_to_room(r) for r in cur.fetchall()]

    def get_by_id(self, room_id: int) -> Optional[Room]:
        """Fetch a single room by ID, or None if it does not exist."""
        sql = "SELECT Id, Name, MaxOccupancy FROM Room WHERE Id = %s;"
        with self._connection() as conn:
            with conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute(sql, (room_id,))
                row = cur.fetchone()
                return self._row_to_room(row) if row else None

    @staticmethod
    def _row_to_room(row: Mapping) -> Room:
        return Room(id=row["id"], name=row["name"], max_occupancy=row["maxoccupancy"])
