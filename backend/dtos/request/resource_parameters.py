"""
Resource Parameters

Shared base for the filter/sort/page bundles accepted by list endpoints.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional

from constants import PaginationDefaults


class ResourceParameters(BaseModel):
    """
    Sort and page fields common to every list request.

    Page sizes above PaginationDefaults.MAX_PAGE_SIZE are clamped. Values below 1
    are left as-is here and rejected by the paginator.
    """

    order_by: Optional[str] = Field(None, description="Sort key; append 'desc' for descending order")
    page_number: int = Field(PaginationDefaults.PAGE_NUMBER, description="1-based page number")
    page_size: int = Field(PaginationDefaults.PAGE_SIZE, description="Records per page")

    @field_validator("page_size")
    @classmethod
    def clamp_page_size(cls, v):
        """Cap page size at the configured maximum."""
        if v > PaginationDefaults.MAX_PAGE_SIZE:
            return PaginationDefaults.MAX_PAGE_SIZE
        return v
