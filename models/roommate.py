"""
models/roommate.py
------------------
Domain model for roommates.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from models.room import Room


@dataclass
class Roommate:
    """
    Represents a person living in the house.

    Attributes:
        id: Database primary key (None until inserted).
        first_name: Given name.
        last_name: Family name.
        rent_portion: Share of the rent, stored as an opaque integer.
        moved_in_date: When the roommate moved in.
        room: The assigned room, or None when unassigned. This is a copy
            taken at read time, not a live link to the Room row.
    """
    first_name: str
    last_name: str
    rent_portion: int
    moved_in_date: datetime
    room: Optional[Room] = None
    id: Optional[int] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        room = self.room.name if self.room else "no room"
        return f"#{self.id} {self.full_name} | {self.rent_portion} | {self.moved_in_date:%Y-%m-%d} | {room}"
