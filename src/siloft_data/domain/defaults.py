"""Defaults store: the one-time snapshot used to restore factory values."""

from __future__ import annotations

import logging
from typing import Any, Optional

from siloft_data.domain.models.field_value import FieldValue
from siloft_data.domain.schema import FieldSchema

logger = logging.getLogger(__name__)


class DefaultsStore:
    """Snapshot of a record's field values, taken exactly once.

    The first :meth:`capture_if_absent` call reads every field through the
    schema's accessors; later calls do nothing, so the snapshot always holds
    the values the record had before its first load, save or reset.
    """

    def __init__(self, schema: FieldSchema) -> None:
        self._schema = schema
        self._snapshot: Optional[dict[str, FieldValue]] = None

    @property
    def is_captured(self) -> bool:
        return self._snapshot is not None

    def get(self, name: str) -> Optional[FieldValue]:
        """Return the captured default of *name*, if any."""
        if self._snapshot is None:
            return None
        return self._snapshot.get(name)

    def capture_if_absent(self, record: Any) -> None:
        if self._snapshot is not None:
            return
        self._snapshot = {
            d.name: FieldValue(d.kind, d.read(record)) for d in self._schema
        }
        logger.debug(
            "Captured defaults of %s: %s",
            self._schema.record_type.__qualname__,
            {name: str(value) for name, value in self._snapshot.items()},
        )

    def reset_to_defaults(self, record: Any) -> None:
        """Write every captured default back into *record*.

        Raises:
            RuntimeError: If no snapshot has been captured yet.
        """
        if self._snapshot is None:
            raise RuntimeError("Defaults have not been captured yet")
        for descriptor in self._schema:
            descriptor.write(record, self._snapshot[descriptor.name].value)
