"""
Booking Request DTOs

Date ordering (check-out after check-in) is enforced by BookingService so that it
surfaces as InvalidArgumentError like every other argument problem.
"""

from datetime import date
from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional

from .resource_parameters import ResourceParameters


class BookingForCreateDto(BaseModel):
    """Payload for creating a booking."""

    guest_id: int
    employee_id: int
    room_id: int
    check_in_date: date
    check_out_date: date
    total_price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "guest_id": 1,
                "employee_id": 1,
                "room_id": 3,
                "check_in_date": "2026-05-01",
                "check_out_date": "2026-05-04",
                "total_price": "360.00"
            }
        }


class BookingForUpdateDto(BookingForCreateDto):
    """Payload for updating an existing booking."""

    id: int = Field(description="ID of the booking to update")


class BookingResourceParameters(ResourceParameters):
    """Filters accepted by the booking list endpoint."""

    guest_id: Optional[int] = Field(None, description="Exact guest ID")
    employee_id: Optional[int] = Field(None, description="Exact employee ID")
    room_id: Optional[int] = Field(None, description="Exact room ID")
    total_price: Optional[Decimal] = Field(None, description="Exact total price")
    total_price_less_than: Optional[Decimal] = Field(None, description="Total price strictly below")
    total_price_greater_than: Optional[Decimal] = Field(None, description="Total price strictly above")
    check_in_from: Optional[date] = Field(None, description="Check-in on or after this date")
    check_out_to: Optional[date] = Field(None, description="Check-out on or before this date")
