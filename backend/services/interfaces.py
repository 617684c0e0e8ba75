"""
Service Interfaces

Abstract base classes for service layer following Dependency Inversion Principle.
This allows for dependency injection and easier testing/mocking.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from repositories.pagination import PaginatedList

D = TypeVar('D')  # Read DTO
C = TypeVar('C')  # Create DTO
U = TypeVar('U')  # Update DTO
P = TypeVar('P')  # Resource parameters


class IEntityService(ABC, Generic[D, C, U, P]):
    """
    CRUD operations over one entity type, expressed in DTOs.

    Every operation is a single request/response; writes are committed before
    they return or rolled back before they raise.
    """

    @abstractmethod
    def list(self, params: Optional[P] = None) -> PaginatedList[D]:
        """
        Filter, sort and paginate the entity collection.

        Args:
            params: Filter/sort/page bundle; defaults apply when None

        Returns:
            PaginatedList of read DTOs

        Raises:
            InvalidArgumentError: If the page parameters are invalid
            PersistenceError: If the store fails
        """
        pass

    @abstractmethod
    def get_by_id(self, id: int) -> D:
        """
        Fetch one entity.

        Raises:
            EntityNotFoundError: If no entity has this id
        """
        pass

    @abstractmethod
    def create(self, dto: C) -> D:
        """
        Persist a new entity and return it with its assigned id.

        Raises:
            InvalidArgumentError: If the payload is missing or invalid
            PersistenceError: If the store rejects the insert
        """
        pass

    @abstractmethod
    def update(self, dto: U) -> None:
        """
        Apply the payload to the existing entity with ``dto.id``.

        Raises:
            EntityNotFoundError: If no entity has this id
            InvalidArgumentError: If the payload is missing or invalid
            PersistenceError: If the store rejects the update
        """
        pass

    @abstractmethod
    def delete(self, id: int) -> None:
        """
        Remove the entity if it exists; deleting a missing id is a no-op.

        Raises:
            PersistenceError: If the store rejects the delete
        """
        pass
