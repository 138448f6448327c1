"""Field kinds and the annotation vocabulary used to declare record fields.

A record declares its persistable fields as class-level annotations::

    class Options(UserData):
        width: int = 1024          # INT32
        ratio: Float32 = 1.5
        name: str = "Siloft"

Bare ``int`` maps to a 32-bit integer and bare ``float`` to a 64-bit float.
Narrower or wider kinds are requested with the aliases below.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated


class FieldKind(str, Enum):
    """Persistable value kinds."""

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    BOOL = "bool"
    STRING = "string"

    @property
    def is_integer(self) -> bool:
        return self in _INTEGER_BITS

    @property
    def is_float(self) -> bool:
        return self in (FieldKind.FLOAT32, FieldKind.FLOAT64)

    @property
    def bounds(self) -> tuple[int, int]:
        """Inclusive signed range of an integer kind."""
        bits = _INTEGER_BITS[self]
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1

    @property
    def zero(self) -> int | float | bool | str:
        """Value a field of this kind holds when it declares no default."""
        if self.is_integer:
            return 0
        if self.is_float:
            return 0.0
        if self is FieldKind.BOOL:
            return False
        return ""


_INTEGER_BITS: dict[FieldKind, int] = {
    FieldKind.INT8: 8,
    FieldKind.INT16: 16,
    FieldKind.INT32: 32,
    FieldKind.INT64: 64,
}

# Largest finite single-precision value.
FLOAT32_MAX: float = 3.4028234663852886e38


class _Marker:
    """Annotation metadata that disqualifies a field from persistence."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return self.name


# Use as ``Annotated[int, Transient]``: the field is never persisted and the
# record type is rejected.
Transient = _Marker("Transient")
Volatile = _Marker("Volatile")


# ---------------------------------------------------------------------------
# Annotation aliases
# ---------------------------------------------------------------------------

Int8 = Annotated[int, FieldKind.INT8]
Int16 = Annotated[int, FieldKind.INT16]
Int32 = Annotated[int, FieldKind.INT32]
Int64 = Annotated[int, FieldKind.INT64]
Float32 = Annotated[float, FieldKind.FLOAT32]
Float64 = Annotated[float, FieldKind.FLOAT64]

# Bare Python types accepted as annotations. ``bool`` must stay distinct
# from ``int`` even though it subclasses it.
BUILTIN_KINDS: dict[type, FieldKind] = {
    int: FieldKind.INT32,
    float: FieldKind.FLOAT64,
    bool: FieldKind.BOOL,
    str: FieldKind.STRING,
}

# Base type each kind must be declared with inside ``Annotated``.
KIND_BASE_TYPES: dict[FieldKind, type] = {
    FieldKind.INT8: int,
    FieldKind.INT16: int,
    FieldKind.INT32: int,
    FieldKind.INT64: int,
    FieldKind.FLOAT32: float,
    FieldKind.FLOAT64: float,
    FieldKind.BOOL: bool,
    FieldKind.STRING: str,
}
