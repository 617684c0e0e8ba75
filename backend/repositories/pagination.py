"""
Pagination helpers.

``paginate`` runs two queries against a filtered, ordered Query: a COUNT without
ordering or eager loads, then an OFFSET/LIMIT fetch of the requested page.
"""

import math
from dataclasses import dataclass, field
from typing import Callable, Generic, List, TypeVar

from sqlalchemy.orm import Query

from exceptions import InvalidArgumentError

T = TypeVar('T')
U = TypeVar('U')


@dataclass(frozen=True)
class PaginatedList(Generic[T]):
    """
    One page of results plus the metadata needed to request the others.

    Attributes:
        items: Records on the current page, in sort order
        total_count: Number of records matching the filters, across all pages
        current_page: 1-based page number
        page_size: Maximum number of records per page
    """

    items: List[T] = field(default_factory=list)
    total_count: int = 0
    current_page: int = 1
    page_size: int = 10

    def __post_init__(self):
        validate_page_request(self.current_page, self.page_size)
        if self.total_count < 0:
            raise InvalidArgumentError("total_count cannot be negative")
        # Own copy of the items
        object.__setattr__(self, "items", list(self.items))

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def map(self, func: Callable[[T], U]) -> "PaginatedList[U]":
        """Return a new page with every item transformed and the same metadata."""
        return PaginatedList(
            items=[func(item) for item in self.items],
            total_count=self.total_count,
            current_page=self.current_page,
            page_size=self.page_size,
        )


def validate_page_request(page_number: int, page_size: int) -> None:
    """
    Reject page numbers and sizes below 1.

    Raises:
        InvalidArgumentError: If either value is below 1
    """
    invalid = {}
    if page_number is None or page_number < 1:
        invalid["page_number"] = page_number
    if page_size is None or page_size < 1:
        invalid["page_size"] = page_size
    if invalid:
        raise InvalidArgumentError(
            "page_number and page_size must be positive integers",
            invalid_fields=invalid,
        )


def paginate(query: Query, page_number: int, page_size: int) -> PaginatedList:
    """
    Fetch one page from a filtered, ordered query.

    Args:
        query: SQLAlchemy query with filters and ordering applied
        page_number: 1-based page number
        page_size: Records per page

    Returns:
        PaginatedList of model instances

    Raises:
        InvalidArgumentError: If the page parameters are below 1 or the page
            starts past the last record
    """
    validate_page_request(page_number, page_size)

    total_count = query.order_by(None).count()

    offset = (page_number - 1) * page_size
    if offset > total_count:
        raise InvalidArgumentError(
            f"Page {page_number} is out of range ({total_count} records, page size {page_size})",
            invalid_fields={"page_number": page_number},
        )

    items = query.offset(offset).limit(page_size).all() if total_count else []

    return PaginatedList(
        items=items,
        total_count=total_count,
        current_page=page_number,
        page_size=page_size,
    )
