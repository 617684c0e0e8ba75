"""
Employee Request DTOs
"""

from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional

from .resource_parameters import ResourceParameters


class EmployeeForCreateDto(BaseModel):
    """Payload for registering a new employee."""

    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    phone_number: Optional[str] = Field(None, max_length=30)
    position_id: int = Field(description="Position the employee holds")
    salary: Decimal = Field(ge=0, max_digits=10, decimal_places=2)

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "first_name": "Ada",
                "last_name": "Novak",
                "phone_number": "+998901234567",
                "position_id": 2,
                "salary": "1500.00"
            }
        }


class EmployeeForUpdateDto(EmployeeForCreateDto):
    """Payload for updating an existing employee."""

    id: int = Field(description="ID of the employee to update")


class EmployeeResourceParameters(ResourceParameters):
    """Filters accepted by the employee list endpoint."""

    position_id: Optional[int] = Field(None, description="Exact position ID")
    salary: Optional[Decimal] = Field(None, description="Exact salary")
    salary_less_than: Optional[Decimal] = Field(None, description="Salary strictly below")
    salary_greater_than: Optional[Decimal] = Field(None, description="Salary strictly above")
