"""Text codec: type-directed encoding of single field values.

``encode`` and ``decode`` are the only places that know how a value of a
given :class:`FieldKind` looks on disk:

  * integers are plain base-10 text, range-checked for their width
  * floats use Python's shortest round-tripping ``repr``
  * booleans are ``true`` / ``false``
  * strings are stored verbatim, except that a newline becomes the two
    characters ``\\n`` so every value fits on one line
"""

from __future__ import annotations

import math
import re
from typing import Union

from siloft_data.domain.errors import DecodeError, FieldValueError
from siloft_data.domain.models.field_kind import FLOAT32_MAX, FieldKind

Value = Union[int, float, bool, str]

_NEWLINE = "\n"
_ESCAPED_NEWLINE = "\\n"

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


# ---------------------------------------------------------------------------
# Value checks
# ---------------------------------------------------------------------------


def check_value(value: object, kind: FieldKind) -> Value:
    """Return *value* normalised for *kind*.

    Raises:
        FieldValueError: If *value* has the wrong type or does not fit the
            kind's range.
    """
    if kind.is_integer:
        if isinstance(value, bool) or not isinstance(value, int):
            raise FieldValueError(
                f"Expected an integer for {kind.value}, got {type(value).__name__}"
            )
        low, high = kind.bounds
        if not low <= value <= high:
            raise FieldValueError(f"{value} is out of range for {kind.value} [{low}, {high}]")
        return int(value)

    if kind.is_float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise FieldValueError(
                f"Expected a number for {kind.value}, got {type(value).__name__}"
            )
        try:
            number = float(value)
        except OverflowError as exc:
            raise FieldValueError(f"{value} is out of range for {kind.value}") from exc
        if kind is FieldKind.FLOAT32 and _exceeds_float32(number):
            raise FieldValueError(f"{value} is out of range for {kind.value}")
        return number

    if kind is FieldKind.BOOL:
        if not isinstance(value, bool):
            raise FieldValueError(f"Expected a bool, got {type(value).__name__}")
        return value

    if not isinstance(value, str):
        raise FieldValueError(f"Expected a str, got {type(value).__name__}")
    return str(value)


def _exceeds_float32(number: float) -> bool:
    return math.isfinite(number) and abs(number) > FLOAT32_MAX


# ---------------------------------------------------------------------------
# Encode / decode
# ---------------------------------------------------------------------------


def encode(value: object, kind: FieldKind) -> str:
    """Render *value* as the text stored after ``name=``.

    Raises:
        FieldValueError: If *value* does not fit *kind*.
    """
    checked = check_value(value, kind)
    if kind.is_integer:
        return str(checked)
    if kind.is_float:
        return repr(checked)
    if kind is FieldKind.BOOL:
        return "true" if checked else "false"
    return str(checked).replace(_NEWLINE, _ESCAPED_NEWLINE)


def decode(text: str, kind: FieldKind) -> Value:
    """Parse *text* as a value of *kind*.

    Raises:
        DecodeError: If *text* is not a valid representation for *kind*.
    """
    if kind.is_integer:
        if not _INTEGER_PATTERN.fullmatch(text):
            raise DecodeError(text, kind, "not an integer")
        number = int(text)
        low, high = kind.bounds
        if not low <= number <= high:
            raise DecodeError(text, kind, "out of range")
        return number

    if kind.is_float:
        stripped = text.strip()
        if not _FLOAT_PATTERN.fullmatch(stripped):
            raise DecodeError(text, kind, "not a number")
        real = float(stripped)
        if kind is FieldKind.FLOAT32 and _exceeds_float32(real):
            raise DecodeError(text, kind, "out of range")
        return real

    if kind is FieldKind.BOOL:
        lowered = text.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
        raise DecodeError(text, kind, "expected true or false")

    return text.replace(_ESCAPED_NEWLINE, _NEWLINE)
