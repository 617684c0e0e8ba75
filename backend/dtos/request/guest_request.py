"""
Guest Request DTOs
"""

from pydantic import BaseModel, Field
from typing import Optional

from .resource_parameters import ResourceParameters


class GuestForCreateDto(BaseModel):
    """Payload for registering a new guest."""

    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    phone_number: str = Field(min_length=1, max_length=30)
    email: Optional[str] = Field(None, max_length=255)


class GuestForUpdateDto(GuestForCreateDto):
    """Payload for updating an existing guest."""

    id: int = Field(description="ID of the guest to update")


class GuestResourceParameters(ResourceParameters):
    """Filters accepted by the guest list endpoint."""

    search: Optional[str] = Field(None, description="Case-insensitive match on first or last name")
    phone_number: Optional[str] = Field(None, description="Exact phone number")
