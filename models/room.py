"""
models/room.py
--------------
Domain model for rooms.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Room:
    """
    Represents a physical room in the house.

    Attributes:
        id: Database primary key (None for new records).
        name: Display name of the room (e.g., 'Ocean View').
        max_occupancy: Maximum number of roommates the room holds.
    """
    name: str
    max_occupancy: int
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"#{self.id} {self.name} (max {self.max_occupancy})"
