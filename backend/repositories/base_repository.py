"""
Base repository: CRUD plus filtered, sorted, paginated reads.

Repositories flush but never commit; the service that owns the session decides
when a unit of work ends.
"""

from typing import Generic, TypeVar, Optional, Type, Sequence
from sqlalchemy.orm import Session, Query

from .specifications import Specification
from .sorting import SortMap
from .pagination import PaginatedList, paginate

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Data access for one mapped model.

    Subclasses declare ``sort_map`` (accepted sort keys) and may declare
    ``eager_options`` (loader options applied to reads).
    """

    sort_map: Optional[SortMap] = None
    eager_options: Sequence = ()

    def __init__(self, db: Session, model: Type[T]):
        self.db = db
        self.model = model

    def query(self) -> Query:
        """Base query for reads, with the repository's eager loads applied."""
        query = self.db.query(self.model)
        if self.eager_options:
            query = query.options(*self.eager_options)
        return query

    def create(self, obj: T) -> T:
        """Add a new record and flush so its id is assigned."""
        self.db.add(obj)
        self.db.flush()
        return obj

    def get_by_id(self, id: int) -> Optional[T]:
        return self.query().filter(self.model.id == id).first()

    def update(self, obj: T) -> T:
        """Flush pending changes of an already persistent record."""
        self.db.flush()
        return obj

    def delete(self, obj: T) -> None:
        self.db.delete(obj)
        self.db.flush()

    def delete_by_id(self, id: int) -> bool:
        """
        Delete a record by its ID.

        Returns:
            True if a row was deleted, False if none had this id
        """
        obj = self.db.get(self.model, id)
        if obj is None:
            return False
        self.delete(obj)
        return True

    def find_page(
        self,
        spec: Specification[T],
        order_by: Optional[str],
        page_number: int,
        page_size: int
    ) -> PaginatedList[T]:
        """
        Fetch one page of records matching a Specification.

        Args:
            spec: Filters to apply
            order_by: Sort key understood by ``sort_map``
            page_number: 1-based page number
            page_size: Records per page

        Returns:
            PaginatedList of model instances

        Raises:
            InvalidArgumentError: If the page parameters are invalid
        """
        return paginate(self._filtered(spec, order_by), page_number, page_size)

    def _filtered(self, spec: Specification[T], order_by: Optional[str]) -> Query:
        query = self.query().filter(spec.to_sql_filter())
        if self.sort_map is not None:
            query = query.order_by(*self.sort_map.order_clauses(order_by))
        else:
            query = query.order_by(self.model.id.asc())
        return query
