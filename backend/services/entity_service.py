"""
Entity Service

Generic implementation of IEntityService. A concrete service names its
repository, mappers and filter builder; everything else (filtering, sorting,
pagination, mapping, commit/rollback and error translation) lives here.
"""

from contextlib import contextmanager
from typing import Callable, Optional, Type

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from exceptions import EntityNotFoundError, InvalidArgumentError, PersistenceError
from mappings.base_mapper import Mapper
from repositories.base_repository import BaseRepository
from repositories.pagination import PaginatedList
from repositories.specifications import Specification
from utils.logging_utils import StructuredLogger
from .interfaces import IEntityService, C, D, P, U

logger = StructuredLogger(__name__)


class EntityService(IEntityService[D, C, U, P]):
    """
    Service for one entity type.

    Subclasses set:
        entity_name: Name used in messages and NotFound errors
        repository_class: BaseRepository subclass taking a Session
        parameters_class: Resource parameters model used when list() gets None
        read_mapper / create_mapper / update_mapper: Mapper instances
        spec_builder: Function turning resource parameters into a Specification
    """

    entity_name: str = "Entity"
    repository_class: Type[BaseRepository]
    parameters_class: type
    read_mapper: Mapper
    create_mapper: Mapper
    update_mapper: Mapper
    spec_builder: Callable[..., Specification]

    def __init__(self, db: Session):
        """
        Initialize the service.

        Args:
            db: Database session for this request

        Raises:
            InvalidArgumentError: If no session is given
        """
        if db is None:
            raise InvalidArgumentError(
                f"{type(self).__name__} requires a database session",
                invalid_fields={"db": None},
            )
        self.db = db
        self.repository = self.repository_class(db)

    @contextmanager
    def _persistence(self, operation: str, commit: bool = True):
        """
        Run a block against the store.

        Commits at the end when ``commit`` is set. Any error rolls the session
        back; SQLAlchemy errors are re-raised as PersistenceError.
        """
        try:
            yield
            if commit:
                self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            constraint_violation = isinstance(e, IntegrityError)
            detail = getattr(e, "orig", None) or e
            logger.error(
                f"{self.entity_name} {operation} failed: {detail}",
                extra={"entity": self.entity_name, "operation": operation},
                exc_info=True,
            )
            raise PersistenceError(
                operation,
                f"{self.entity_name} {operation} failed: {detail}",
                constraint_violation=constraint_violation,
            ) from e
        except Exception:
            self.db.rollback()
            raise

    def _require(self, dto, mapper: Mapper, operation: str) -> None:
        if not isinstance(dto, mapper.source):
            raise InvalidArgumentError(
                f"{self.entity_name} {operation} expects {mapper.source.__name__}, "
                f"got {type(dto).__name__}"
            )

    def validate(self, dto) -> None:
        """Hook for entity-specific checks on create/update payloads."""

    def _load(self, id: int):
        entity = self.repository.get_by_id(id)
        if entity is None:
            logger.warning(
                f"{self.entity_name} {id} not found",
                extra={"entity": self.entity_name, "entity_id": id},
            )
            raise EntityNotFoundError(self.entity_name, id)
        return entity

    def list(self, params: Optional[P] = None) -> PaginatedList[D]:
        if params is None:
            params = self.parameters_class()
        spec = self.spec_builder(params)

        with self._persistence("list", commit=False):
            page = self.repository.find_page(
                spec, params.order_by, params.page_number, params.page_size
            )
            return page.map(self.read_mapper.map)

    def get_by_id(self, id: int) -> D:
        with self._persistence("get", commit=False):
            return self.read_mapper.map(self._load(id))

    def create(self, dto: C) -> D:
        self._require(dto, self.create_mapper, "create")
        self.validate(dto)

        entity = self.create_mapper.map(dto)
        with self._persistence("create"):
            self.repository.create(entity)
            entity_id = entity.id

        logger.info(
            f"Created {self.entity_name} {entity_id}",
            extra={"entity": self.entity_name, "entity_id": entity_id},
        )
        return self.get_by_id(entity_id)

    def update(self, dto: U) -> None:
        self._require(dto, self.update_mapper, "update")

        with self._persistence("update"):
            entity = self._load(dto.id)
            self.validate(dto)
            self.update_mapper.apply(dto, entity)
            self.repository.update(entity)

        logger.info(
            f"Updated {self.entity_name} {dto.id}",
            extra={"entity": self.entity_name, "entity_id": dto.id},
        )

    def delete(self, id: int) -> None:
        with self._persistence("delete"):
            deleted = self.repository.delete_by_id(id)

        if deleted:
            logger.info(
                f"Deleted {self.entity_name} {id}",
                extra={"entity": self.entity_name, "entity_id": id},
            )
        else:
            logger.debug(
                f"Delete skipped, {self.entity_name} {id} does not exist",
                extra={"entity": self.entity_name, "entity_id": id},
            )
