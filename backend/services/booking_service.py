"""
Booking Service

Handles business logic for booking operations. Bookings reference a guest,
an employee and a room; the store enforces those references, and this
service rejects stays whose check-out is not after check-in.
"""

from models import Booking
from dtos.request.booking_request import (
    BookingForCreateDto,
    BookingForUpdateDto,
    BookingResourceParameters,
)
from dtos.response.booking_response import BookingDto
from exceptions import InvalidArgumentError
from mappings.booking_mappings import booking_to_dto, create_dto_to_booking, update_dto_to_booking
from repositories.booking_repository import BookingRepository
from repositories.booking_specifications import booking_spec_from_parameters
from .entity_service import EntityService


class BookingService(
    EntityService[BookingDto, BookingForCreateDto, BookingForUpdateDto, BookingResourceParameters]
):
    """Service for booking-related business logic."""

    entity_name = Booking.__name__
    repository_class = BookingRepository
    parameters_class = BookingResourceParameters
    read_mapper = booking_to_dto
    create_mapper = create_dto_to_booking
    update_mapper = update_dto_to_booking
    spec_builder = staticmethod(booking_spec_from_parameters)

    def validate(self, dto: BookingForCreateDto) -> None:
        """
        Check the stay dates.

        Raises:
            InvalidArgumentError: If check-out is on or before check-in
        """
        if dto.check_out_date <= dto.check_in_date:
            raise InvalidArgumentError(
                "check_out_date must be after check_in_date",
                invalid_fields={
                    "check_in_date": dto.check_in_date.isoformat(),
                    "check_out_date": dto.check_out_date.isoformat(),
                },
            )
