"""
Employee repository for employee-specific data access operations.
"""

from sqlalchemy.orm import Session

from models import Employee
from .base_repository import BaseRepository
from .sorting import SortMap


class EmployeeRepository(BaseRepository[Employee]):
    """Repository for Employee model operations."""

    sort_map = SortMap(
        {
            "first_name": Employee.first_name,
            "last_name": Employee.last_name,
            "salary": Employee.salary,
            "position_id": Employee.position_id,
        },
        default="first_name",
        tie_breaker=Employee.id,
    )

    def __init__(self, db: Session):
        super().__init__(db, Employee)
