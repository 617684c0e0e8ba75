"""
Room repository for room-specific data access operations.
"""

from sqlalchemy.orm import Session

from models import Room
from .base_repository import BaseRepository
from .sorting import SortMap


class RoomRepository(BaseRepository[Room]):
    """Repository for Room model operations."""

    sort_map = SortMap(
        {
            "number": Room.number,
            "room_type": Room.room_type,
            "capacity": Room.capacity,
            "price_per_night": Room.price_per_night,
        },
        default="number",
        tie_breaker=Room.id,
    )

    def __init__(self, db: Session):
        super().__init__(db, Room)
