"""
Explicit field-to-field mapping between entities and DTOs.

A Mapper is declared once per (source, target) pair. When it is constructed it
works out where every target field comes from and raises
MappingConfigurationError if a required target field has no source. Mapping
modules build their mappers at import time, so a missing field fails on import
rather than on the first request that happens to need it.

Both sides may be Pydantic models or SQLAlchemy mapped classes.
"""

from operator import attrgetter
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import inspect as sa_inspect

from exceptions import InvalidArgumentError, MappingConfigurationError

S = TypeVar('S')
T = TypeVar('T')


def describe_fields(shape: type) -> Tuple[List[str], set]:
    """
    List the fields of a Pydantic model or SQLAlchemy mapped class.

    Returns:
        Tuple of (field names in declaration order, names of required fields)

    A SQLAlchemy column is required when it is not nullable, has no default and
    is not the primary key. Relationships are never required.
    """
    if isinstance(shape, type) and issubclass(shape, BaseModel):
        fields = list(shape.model_fields)
        required = {name for name, info in shape.model_fields.items() if info.is_required()}
        return fields, required

    mapper = sa_inspect(shape)
    fields = []
    required = set()
    for prop in mapper.column_attrs:
        fields.append(prop.key)
        column = prop.columns[0]
        if column.primary_key or column.nullable:
            continue
        if column.default is not None or column.server_default is not None:
            continue
        required.add(prop.key)
    fields.extend(rel.key for rel in mapper.relationships)
    return fields, required


class Mapper(Generic[S, T]):
    """
    Pure transcription from ``source`` objects to ``target`` objects.

    Args:
        source: Class being read from
        target: Class being built or updated
        renames: Target field -> source field, for fields whose names differ
        computed: Target field -> function of the whole source object
        ignore: Target fields that are never written (e.g. ``id`` on update)

    Raises:
        MappingConfigurationError: If a required target field has no source,
            or a rename/computed entry names a field that does not exist
    """

    def __init__(
        self,
        source: Type[S],
        target: Type[T],
        renames: Optional[Dict[str, str]] = None,
        computed: Optional[Dict[str, Callable[[S], Any]]] = None,
        ignore: Iterable[str] = ()
    ):
        self.source = source
        self.target = target
        self.renames = dict(renames or {})
        self.computed = dict(computed or {})
        self.ignore = frozenset(ignore)
        self._plan = self._build_plan()

    def __repr__(self) -> str:
        return f"Mapper({self.source.__name__} -> {self.target.__name__})"

    @property
    def fields(self) -> List[str]:
        """Target fields written by this mapper."""
        return list(self._plan)

    def _build_plan(self) -> Dict[str, Callable[[S], Any]]:
        source_fields, _ = describe_fields(self.source)
        target_fields, required = describe_fields(self.target)

        unknown = [
            name for name in list(self.renames) + list(self.computed)
            if name not in target_fields
        ]
        unknown += [
            source_name for source_name in self.renames.values()
            if source_name not in source_fields
        ]
        if unknown:
            raise MappingConfigurationError(self.source.__name__, self.target.__name__, unknown)

        plan: Dict[str, Callable[[S], Any]] = {}
        missing = []
        for name in target_fields:
            if name in self.ignore:
                continue
            if name in self.computed:
                plan[name] = self.computed[name]
                continue
            source_name = self.renames.get(name, name)
            if source_name in source_fields:
                plan[name] = attrgetter(source_name)
            elif name in required:
                missing.append(name)

        if missing:
            raise MappingConfigurationError(self.source.__name__, self.target.__name__, missing)
        return plan

    def _values(self, obj: S) -> Dict[str, Any]:
        if obj is None:
            raise InvalidArgumentError(f"Cannot map None to {self.target.__name__}")
        return {name: getter(obj) for name, getter in self._plan.items()}

    def map(self, obj: S) -> T:
        """Build a new target object from ``obj``."""
        return self.target(**self._values(obj))

    def apply(self, obj: S, target_obj: T) -> T:
        """
        Copy mapped fields from ``obj`` onto an existing target object.

        Ignored fields (such as the primary key) are left untouched.
        """
        for name, value in self._values(obj).items():
            setattr(target_obj, name, value)
        return target_obj
