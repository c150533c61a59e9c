"""
models/ - Domain Models
=======================
Plain dataclasses for the Room and Roommate tables.
"""

from models.room import Room
from models.roommate import Roommate

__all__ = ["Room", "Roommate"]
