"""
Response DTOs

DTOs for outgoing API responses. Read DTOs expose public and computed fields
only; PaginatedResponse wraps a page of them.
"""

from .pagination_response import PaginatedResponse
from .employee_response import EmployeeDto
from .guest_response import GuestDto
from .room_response import RoomDto
from .booking_response import BookingDto

__all__ = [
    "PaginatedResponse",
    "EmployeeDto",
    "GuestDto",
    "RoomDto",
    "BookingDto",
]
