"""
Guest Response DTOs
"""

from pydantic import BaseModel, Field
from typing import Optional


class GuestDto(BaseModel):
    """Response DTO for guest information."""

    id: int = Field(description="Guest ID")
    first_name: str
    last_name: str
    full_name: str = Field(description="First and last name")
    phone_number: str
    email: Optional[str] = None
