"""
Room Request DTOs
"""

from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional

from .resource_parameters import ResourceParameters


class RoomForCreateDto(BaseModel):
    """Payload for adding a room."""

    number: str = Field(min_length=1, max_length=20)
    room_type: str = Field(min_length=1, max_length=50)
    capacity: int = Field(ge=1)
    price_per_night: Decimal = Field(ge=0, max_digits=10, decimal_places=2)


class RoomForUpdateDto(RoomForCreateDto):
    """Payload for updating an existing room."""

    id: int = Field(description="ID of the room to update")


class RoomResourceParameters(ResourceParameters):
    """Filters accepted by the room list endpoint."""

    room_type: Optional[str] = Field(None, description="Exact room type")
    capacity: Optional[int] = Field(None, description="Exact capacity")
    capacity_greater_than: Optional[int] = Field(None, description="Capacity strictly above")
    price_per_night_less_than: Optional[Decimal] = Field(None, description="Nightly price strictly below")
    price_per_night_greater_than: Optional[Decimal] = Field(None, description="Nightly price strictly above")
