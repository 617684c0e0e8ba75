"""
Specification Pattern Implementation

Resource parameters are compiled into a specification (one per present filter,
ANDed together) which the repositories turn into a SQLAlchemy filter.

Each specification can also check an already-loaded object in memory, which keeps
the SQL predicate and its meaning testable side by side.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, Optional, Tuple, TypeVar

from sqlalchemy import and_, or_, not_, func, true


T = TypeVar('T')


class Specification(ABC, Generic[T]):
    """
    One filter criterion over entities of type T.

    Combine with ``&``, ``|`` and ``~``.
    """

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        """
        Evaluate the criterion against a loaded object.

        Args:
            candidate: Entity instance

        Returns:
            True if the entity matches
        """

    @abstractmethod
    def to_sql_filter(self):
        """Return the equivalent SQLAlchemy boolean expression."""

    def __and__(self, other: "Specification[T]") -> "Specification[T]":
        if isinstance(self, MatchAllSpecification):
            return other
        if isinstance(other, MatchAllSpecification):
            return self
        return AndSpecification(self, other)

    def __or__(self, other: "Specification[T]") -> "Specification[T]":
        return OrSpecification(self, other)

    def __invert__(self) -> "Specification[T]":
        return NotSpecification(self)


class MatchAllSpecification(Specification[T]):
    """Specification satisfied by every candidate (no filters supplied)."""

    def is_satisfied_by(self, candidate: T) -> bool:
        return True

    def to_sql_filter(self):
        return true()


class CompositeSpecification(Specification[T]):
    """
    Several specifications joined by one boolean operator.

    Nested composites of the same kind are flattened, so ``a & b & c`` holds
    three parts and compiles to a single ``AND``.
    """

    def __init__(self, *parts: Specification[T]):
        flat = []
        for part in parts:
            if type(part) is type(self):
                flat.extend(part.parts)
            else:
                flat.append(part)
        self.parts: Tuple[Specification[T], ...] = tuple(flat)

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self.parts!r}"


class AndSpecification(CompositeSpecification[T]):
    def is_satisfied_by(self, candidate: T) -> bool:
        return all(part.is_satisfied_by(candidate) for part in self.parts)

    def to_sql_filter(self):
        return and_(*(part.to_sql_filter() for part in self.parts))


class OrSpecification(CompositeSpecification[T]):
    def is_satisfied_by(self, candidate: T) -> bool:
        return any(part.is_satisfied_by(candidate) for part in self.parts)

    def to_sql_filter(self):
        return or_(*(part.to_sql_filter() for part in self.parts))


class NotSpecification(Specification[T]):
    """Negation of a wrapped specification. ``~~spec`` gives back ``spec``."""

    def __init__(self, inner: Specification[T]):
        self.inner = inner

    def __invert__(self) -> Specification[T]:
        return self.inner

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.inner.is_satisfied_by(candidate)

    def to_sql_filter(self):
        return not_(self.inner.to_sql_filter())


class AttributeSpecification(Specification[T]):
    """
    Base for specifications comparing one mapped column against a value.

    Args:
        column: Mapped model attribute, e.g. ``Employee.salary``
        value: Value to compare against
    """

    def __init__(self, column, value: Any):
        self.column = column
        self.value = value

    def _candidate_value(self, candidate: T) -> Any:
        return getattr(candidate, self.column.key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.column.key}={self.value!r})"


class EqualsSpec(AttributeSpecification[T]):
    """column == value"""

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._candidate_value(candidate) == self.value

    def to_sql_filter(self):
        return self.column == self.value


class LessThanSpec(AttributeSpecification[T]):
    """column < value"""

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._candidate_value(candidate) < self.value

    def to_sql_filter(self):
        return self.column < self.value


class GreaterThanSpec(AttributeSpecification[T]):
    """column > value"""

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._candidate_value(candidate) > self.value

    def to_sql_filter(self):
        return self.column > self.value


class AtLeastSpec(AttributeSpecification[T]):
    """column >= value"""

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._candidate_value(candidate) >= self.value

    def to_sql_filter(self):
        return self.column >= self.value


class AtMostSpec(AttributeSpecification[T]):
    """column <= value"""

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._candidate_value(candidate) <= self.value

    def to_sql_filter(self):
        return self.column <= self.value


class ContainsTextSpec(AttributeSpecification[T]):
    """Case-insensitive substring match."""

    def is_satisfied_by(self, candidate: T) -> bool:
        text = self._candidate_value(candidate) or ""
        return self.value.lower() in text.lower()

    def to_sql_filter(self):
        return func.lower(self.column).contains(self.value.lower(), autoescape=True)


def all_of(specs: Iterable[Optional[Specification[T]]]) -> Specification[T]:
    """
    AND together the given specifications, skipping None entries.

    Returns MatchAllSpecification when nothing is left.
    """
    combined: Specification[T] = MatchAllSpecification()
    for spec in specs:
        if spec is not None:
            combined = combined & spec
    return combined


def optional_spec(spec_class, column, value: Any) -> Optional[Specification]:
    """Build ``spec_class(column, value)`` only when a filter value was supplied."""
    if value is None:
        return None
    return spec_class(column, value)
