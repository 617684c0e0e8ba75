"""
Booking repository for booking-specific data access operations.

Reads load the guest, employee and room with the booking.
"""

from sqlalchemy.orm import Session, joinedload

from models import Booking
from .base_repository import BaseRepository
from .sorting import SortMap


class BookingRepository(BaseRepository[Booking]):
    """Repository for Booking model operations."""

    sort_map = SortMap(
        {
            "check_in_date": Booking.check_in_date,
            "check_out_date": Booking.check_out_date,
            "total_price": Booking.total_price,
        },
        default="check_in_date",
        tie_breaker=Booking.id,
    )

    eager_options = (
        joinedload(Booking.guest),
        joinedload(Booking.employee),
        joinedload(Booking.room),
    )

    def __init__(self, db: Session):
        super().__init__(db, Booking)
