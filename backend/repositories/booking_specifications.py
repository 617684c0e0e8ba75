"""
Booking-specific Specifications
"""

from models import Booking
from dtos.request.booking_request import BookingResourceParameters
from .specifications import (
    Specification,
    EqualsSpec,
    LessThanSpec,
    GreaterThanSpec,
    AtLeastSpec,
    AtMostSpec,
    all_of,
    optional_spec,
)


def booking_spec_from_parameters(params: BookingResourceParameters) -> Specification[Booking]:
    """Build the filter for a booking list request."""
    return all_of([
        optional_spec(EqualsSpec, Booking.guest_id, params.guest_id),
        optional_spec(EqualsSpec, Booking.employee_id, params.employee_id),
        optional_spec(EqualsSpec, Booking.room_id, params.room_id),
        optional_spec(EqualsSpec, Booking.total_price, params.total_price),
        optional_spec(LessThanSpec, Booking.total_price, params.total_price_less_than),
        optional_spec(GreaterThanSpec, Booking.total_price, params.total_price_greater_than),
        optional_spec(AtLeastSpec, Booking.check_in_date, params.check_in_from),
        optional_spec(AtMostSpec, Booking.check_out_date, params.check_out_to),
    ])
