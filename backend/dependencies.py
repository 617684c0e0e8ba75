"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating service instances bound to
the request's database session. Tests override ``get_db`` to swap the store.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from database import get_db
from services.employee_service import EmployeeService
from services.guest_service import GuestService
from services.room_service import RoomService
from services.booking_service import BookingService


def get_employee_service(db: Session = Depends(get_db)) -> EmployeeService:
    """
    Factory function for creating EmployeeService instances.

    Args:
        db: Database session (injected)

    Returns:
        EmployeeService bound to the request's session
    """
    return EmployeeService(db)


def get_guest_service(db: Session = Depends(get_db)) -> GuestService:
    """Factory function for creating GuestService instances."""
    return GuestService(db)


def get_room_service(db: Session = Depends(get_db)) -> RoomService:
    """Factory function for creating RoomService instances."""
    return RoomService(db)


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    """Factory function for creating BookingService instances."""
    return BookingService(db)
