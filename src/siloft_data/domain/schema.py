"""Field schema: discovery and validation of a record's persistable fields.

A record type's fields are its class-level annotations, collected across the
MRO (base classes first) and resolved with ``typing.get_type_hints``. Every
field is validated when the schema is built; the first violation raises
:class:`SchemaError`. Schemas are immutable and cached per record type.
"""

from __future__ import annotations

import inspect
import logging
import operator
import typing
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Final, Iterator, Optional

from siloft_data.domain.errors import SchemaError
from siloft_data.domain.models.field_kind import (
    BUILTIN_KINDS,
    KIND_BASE_TYPES,
    FieldKind,
    Transient,
    Volatile,
)

logger = logging.getLogger(__name__)

# Module-level cache
_schema_cache: dict[type, "FieldSchema"] = {}


@dataclass(frozen=True)
class FieldDescriptor:
    """Name, kind and bound accessors of one persistable field."""

    name: str
    kind: FieldKind
    read: Callable[[Any], Any] = field(repr=False, compare=False)
    write: Callable[[Any, Any], None] = field(repr=False, compare=False)


class FieldSchema:
    """Ordered, validated set of field descriptors for one record type.

    Usage::

        schema = FieldSchema.for_type(Options)
        for descriptor in schema:
            print(descriptor.name, descriptor.kind, descriptor.read(options))
    """

    def __init__(self, record_type: type, descriptors: list[FieldDescriptor]) -> None:
        self._record_type = record_type
        self._descriptors = tuple(descriptors)
        self._by_name = {d.name: d for d in self._descriptors}

    @classmethod
    def for_type(cls, record_type: type) -> FieldSchema:
        """Return the (cached) schema of *record_type*.

        Raises:
            SchemaError: If any annotated field cannot be persisted.
        """
        schema = _schema_cache.get(record_type)
        if schema is None:
            schema = cls(record_type, _describe_fields(record_type))
            _schema_cache[record_type] = schema
            logger.debug(
                "Registered %s with fields %s", record_type.__qualname__, list(schema.names)
            )
        return schema

    # -- Queries -------------------------------------------------------------

    @property
    def record_type(self) -> type:
        return self._record_type

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._by_name)

    def get(self, name: str) -> Optional[FieldDescriptor]:
        return self._by_name.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __repr__(self) -> str:
        return f"FieldSchema({self._record_type.__qualname__}, {list(self.names)})"

    # -- Instances -----------------------------------------------------------

    def initialise(self, record: Any) -> None:
        """Give every field *record* does not hold yet its kind's zero value."""
        for descriptor in self._descriptors:
            if not hasattr(record, descriptor.name):
                descriptor.write(record, descriptor.kind.zero)


def clear_cache() -> None:
    """Clear the schema cache: useful for testing."""
    _schema_cache.clear()


# ---------------------------------------------------------------------------
# Field discovery
# ---------------------------------------------------------------------------


def _describe_fields(record_type: type) -> list[FieldDescriptor]:
    try:
        hints = typing.get_type_hints(record_type, include_extras=True)
        names = _declared_names(record_type)
    except NameError as exc:
        raise SchemaError(f"Field type cannot be resolved ({exc})") from exc

    descriptors = []
    for name in names:
        kind = _validate(name, hints[name])
        descriptors.append(
            FieldDescriptor(
                name=name,
                kind=kind,
                read=operator.attrgetter(name),
                write=_setter(name),
            )
        )
    return descriptors


def _declared_names(record_type: type) -> list[str]:
    """Annotated names in declaration order, base classes first."""
    names: list[str] = []
    for klass in reversed(record_type.__mro__):
        if klass is object:
            continue
        for name in inspect.get_annotations(klass):
            if name not in names:
                names.append(name)
    return names


def _setter(name: str) -> Callable[[Any, Any], None]:
    def write(record: Any, value: Any) -> None:
        setattr(record, name, value)

    return write


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _validate(name: str, hint: Any) -> FieldKind:
    """Apply the persistence rules to one field and return its kind."""
    if name.startswith("_"):
        raise SchemaError("Field should be public", name)

    metadata: list[Any] = []
    is_static = False
    is_final = False
    while True:
        origin = typing.get_origin(hint)
        if origin is typing.Annotated:
            metadata.extend(hint.__metadata__)
            hint = hint.__origin__
        elif origin is ClassVar or hint is ClassVar:
            is_static = True
            hint = _first_arg(hint)
        elif origin is Final or hint is Final:
            is_final = True
            hint = _first_arg(hint)
        else:
            break

    if is_static:
        raise SchemaError("Field should not be static", name)
    if any(m is Transient for m in metadata):
        raise SchemaError("Field should not be transient", name)
    if any(m is Volatile for m in metadata):
        raise SchemaError("Field should not be volatile", name)
    if is_final:
        raise SchemaError("Field should not be final", name)

    kind = _kind_of(hint, metadata)
    if kind is None:
        raise SchemaError("Field type not valid", name)
    return kind


def _first_arg(hint: Any) -> Any:
    args = typing.get_args(hint)
    return args[0] if args else None


def _kind_of(hint: Any, metadata: list[Any]) -> Optional[FieldKind]:
    kinds = [m for m in metadata if isinstance(m, FieldKind)]
    if len(kinds) > 1:
        return None
    if kinds:
        kind = kinds[0]
        return kind if hint is KIND_BASE_TYPES[kind] else None
    if isinstance(hint, type):
        return BUILTIN_KINDS.get(hint)
    return None
