"""
Booking mappings.

Nested guest/employee/room DTOs are built from the booking's relationships,
which BookingRepository loads eagerly.
"""

from models import Booking
from dtos.request.booking_request import BookingForCreateDto, BookingForUpdateDto
from dtos.response.booking_response import BookingDto
from .base_mapper import Mapper
from .employee_mappings import employee_to_dto
from .guest_mappings import guest_to_dto
from .room_mappings import room_to_dto


def _nested(mapper: Mapper, attribute: str):
    def read(booking):
        related = getattr(booking, attribute)
        return mapper.map(related) if related is not None else None
    return read


def nights(booking) -> int:
    return (booking.check_out_date - booking.check_in_date).days


booking_to_dto = Mapper(
    Booking,
    BookingDto,
    computed={
        "nights": nights,
        "guest": _nested(guest_to_dto, "guest"),
        "employee": _nested(employee_to_dto, "employee"),
        "room": _nested(room_to_dto, "room"),
    },
)
create_dto_to_booking = Mapper(BookingForCreateDto, Booking)
update_dto_to_booking = Mapper(BookingForUpdateDto, Booking, ignore={"id"})
