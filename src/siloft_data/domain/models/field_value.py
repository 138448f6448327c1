"""Tagged field value: one persisted value together with its kind."""

from __future__ import annotations

from dataclasses import dataclass

from siloft_data.domain.codec import Value, check_value, encode
from siloft_data.domain.models.field_kind import FieldKind


@dataclass(frozen=True)
class FieldValue:
    """A value known to fit ``kind``.

    Construction checks the value and raises :class:`FieldValueError` when
    it does not fit. The value itself is kept as given, so an ``int`` default
    of a float field is restored as an ``int``.
    """

    kind: FieldKind
    value: Value

    def __post_init__(self) -> None:
        check_value(self.value, self.kind)

    def __str__(self) -> str:
        return encode(self.value, self.kind)
