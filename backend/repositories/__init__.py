"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and provide a clean interface for data access operations.
"""

from .base_repository import BaseRepository
from .employee_repository import EmployeeRepository
from .guest_repository import GuestRepository
from .room_repository import RoomRepository
from .booking_repository import BookingRepository
from .pagination import PaginatedList, paginate

__all__ = [
    "BaseRepository",
    "EmployeeRepository",
    "GuestRepository",
    "RoomRepository",
    "BookingRepository",
    "PaginatedList",
    "paginate",
]
