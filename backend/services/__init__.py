"""
Service layer: one service per entity, all built on EntityService.
"""

from .interfaces import IEntityService
from .entity_service import EntityService
from .employee_service import EmployeeService
from .guest_service import GuestService
from .room_service import RoomService
from .booking_service import BookingService

__all__ = [
    "IEntityService",
    "EntityService",
    "EmployeeService",
    "GuestService",
    "RoomService",
    "BookingService",
]
