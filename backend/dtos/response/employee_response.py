"""
Employee Response DTOs
"""

from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional


class EmployeeDto(BaseModel):
    """Response DTO for employee information."""

    id: int = Field(description="Employee ID")
    first_name: str
    last_name: str
    full_name: str = Field(description="First and last name")
    phone_number: Optional[str] = None
    position_id: int
    salary: Decimal
