"""
Request DTOs

DTOs for incoming API requests. These decouple the API from database models
and provide a clear contract for what data the API expects.

- *ForCreateDto: payload for creating an entity (no id)
- *ForUpdateDto: payload for updating an existing entity (id required)
- *ResourceParameters: filter, sort and page bundle for list requests
"""

from .resource_parameters import ResourceParameters
from .employee_request import EmployeeForCreateDto, EmployeeForUpdateDto, EmployeeResourceParameters
from .guest_request import GuestForCreateDto, GuestForUpdateDto, GuestResourceParameters
from .room_request import RoomForCreateDto, RoomForUpdateDto, RoomResourceParameters
from .booking_request import BookingForCreateDto, BookingForUpdateDto, BookingResourceParameters

__all__ = [
    "ResourceParameters",
    "EmployeeForCreateDto",
    "EmployeeForUpdateDto",
    "EmployeeResourceParameters",
    "GuestForCreateDto",
    "GuestForUpdateDto",
    "GuestResourceParameters",
    "RoomForCreateDto",
    "RoomForUpdateDto",
    "RoomResourceParameters",
    "BookingForCreateDto",
    "BookingForUpdateDto",
    "BookingResourceParameters",
]
