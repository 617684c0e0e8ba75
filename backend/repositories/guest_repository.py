"""
Guest repository for guest-specific data access operations.
"""

from sqlalchemy.orm import Session

from models import Guest
from .base_repository import BaseRepository
from .sorting import SortMap


class GuestRepository(BaseRepository[Guest]):
    """Repository for Guest model operations."""

    sort_map = SortMap(
        {
            "first_name": Guest.first_name,
            "last_name": Guest.last_name,
        },
        default="first_name",
        tie_breaker=Guest.id,
    )

    def __init__(self, db: Session):
        super().__init__(db, Guest)
