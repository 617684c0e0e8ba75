"""
Room Response DTOs
"""

from decimal import Decimal
from pydantic import BaseModel, Field


class RoomDto(BaseModel):
    """Response DTO for room information."""

    id: int = Field(description="Room ID")
    number: str
    room_type: str
    capacity: int
    price_per_night: Decimal
