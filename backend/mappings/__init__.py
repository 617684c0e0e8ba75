"""
Mappings between entities and DTOs.

Every mapper is built on import; a misconfigured mapping raises
MappingConfigurationError as soon as this package is imported.
"""

from .base_mapper import Mapper
from .employee_mappings import employee_to_dto, create_dto_to_employee, update_dto_to_employee
from .guest_mappings import guest_to_dto, create_dto_to_guest, update_dto_to_guest
from .room_mappings import room_to_dto, create_dto_to_room, update_dto_to_room
from .booking_mappings import booking_to_dto, create_dto_to_booking, update_dto_to_booking

__all__ = [
    "Mapper",
    "employee_to_dto",
    "create_dto_to_employee",
    "update_dto_to_employee",
    "guest_to_dto",
    "create_dto_to_guest",
    "update_dto_to_guest",
    "room_to_dto",
    "create_dto_to_room",
    "update_dto_to_room",
    "booking_to_dto",
    "create_dto_to_booking",
    "update_dto_to_booking",
]
