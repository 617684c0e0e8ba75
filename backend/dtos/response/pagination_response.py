"""
Paginated list envelope shared by all list endpoints.
"""

from pydantic import BaseModel, Field
from typing import Generic, List, TypeVar

T = TypeVar("T")


class PaginatedResponse(BaseModel, Generic[T]):
    """
    Response DTO for one page of results.

    Built from a repositories.pagination.PaginatedList with
    ``PaginatedResponse[EmployeeDto].model_validate(page)``.
    """

    items: List[T] = Field(description="Records on this page")
    total_count: int = Field(description="Records matching the filters across all pages")
    current_page: int = Field(description="1-based page number")
    page_size: int = Field(description="Maximum records per page")
    total_pages: int = Field(description="Number of pages for this page size")
    has_previous: bool
    has_next: bool

    class Config:
        """Pydantic configuration."""
        from_attributes = True
