"""
Booking Response DTOs
"""

from datetime import date
from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional

from .employee_response import EmployeeDto
from .guest_response import GuestDto
from .room_response import RoomDto


class BookingDto(BaseModel):
    """
    Response DTO for booking information.

    Related guest, employee and room are included when they were loaded
    with the booking.
    """

    id: int = Field(description="Booking ID")
    guest_id: int
    employee_id: int
    room_id: int
    check_in_date: date
    check_out_date: date
    nights: int = Field(description="Number of nights between check-in and check-out")
    total_price: Decimal
    guest: Optional[GuestDto] = None
    employee: Optional[EmployeeDto] = None
    room: Optional[RoomDto] = None
