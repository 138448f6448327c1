"""Domain errors: custom exceptions for siloft-data.

These exceptions are raised by the schema, codec and persistence layers and
caught by the controller or the presentation layer. File-system failures are
not wrapped: the built-in ``OSError`` family propagates unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from siloft_data.domain.models.field_kind import FieldKind


class SiloftDataError(Exception):
    """Base exception for all siloft-data errors."""


class SchemaError(SiloftDataError, TypeError):
    """Raised when a record type declares a field that cannot be persisted.

    Raised while the record is being constructed, so no usable instance
    exists afterwards.
    """

    def __init__(self, message: str, field_name: str | None = None) -> None:
        self.field_name = field_name
        if field_name is not None:
            message = f"{message}: {field_name!r}"
        super().__init__(message)


class DecodeError(SiloftDataError, ValueError):
    """Raised when stored text does not parse as the field's kind."""

    def __init__(self, text: str, kind: FieldKind, reason: str = "") -> None:
        self.text = text
        self.kind = kind
        detail = f" ({reason})" if reason else ""
        super().__init__(f"Cannot decode {text!r} as {kind.value}{detail}")


class FieldValueError(SiloftDataError, ValueError):
    """Raised when an in-memory field value does not fit its declared kind."""
