"""
Room-specific Specifications
"""

from models import Room
from dtos.request.room_request import RoomResourceParameters
from .specifications import (
    Specification,
    EqualsSpec,
    LessThanSpec,
    GreaterThanSpec,
    all_of,
    optional_spec,
)


def room_spec_from_parameters(params: RoomResourceParameters) -> Specification[Room]:
    """Build the filter for a room list request."""
    return all_of([
        optional_spec(EqualsSpec, Room.room_type, params.room_type),
        optional_spec(EqualsSpec, Room.capacity, params.capacity),
        optional_spec(GreaterThanSpec, Room.capacity, params.capacity_greater_than),
        optional_spec(LessThanSpec, Room.price_per_night, params.price_per_night_less_than),
        optional_spec(GreaterThanSpec, Room.price_per_night, params.price_per_night_greater_than),
    ])
