"""Persistence controller: implements RecordStorePort with a flat text file.

The backing file is UTF-8 text with one ``name=value`` entry per line, in
field declaration order. Loading is tolerant: a line without ``=``, a name
that is not a field of the record, or a value that does not decode for the
field's kind is skipped and the field keeps its in-memory value. Only
file-system failures (``OSError``) reach the caller. Entries end at ``\\n``
only, so a ``\\r`` inside a string value survives a round trip; bytes that
are not valid UTF-8 are replaced rather than rejected.

One controller serves one record instance: it owns that record's default
snapshot and its loaded state.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Union

from siloft_data.domain.codec import decode, encode
from siloft_data.domain.defaults import DefaultsStore
from siloft_data.domain.errors import DecodeError
from siloft_data.domain.ports.record_store import RecordStorePort
from siloft_data.domain.schema import FieldSchema

logger = logging.getLogger(__name__)

_SEPARATOR = "="
_ENCODING = "utf-8"
_NEWLINE = "\n"


class PersistenceController(RecordStorePort):
    """Load, save and reset the fields of a record against *path*.

    Parameters
    ----------
    record_type : type
        Class of the records handled. Its schema is validated here, so an
        invalid type raises :class:`SchemaError` before any I/O is possible.
    path : str | Path
        Backing file.

    Usage::

        store = PersistenceController(Options, "~/settings/Options")
        options = Options()
        store.load(options)
        options.width += 1
        store.save(options)
    """

    def __init__(self, record_type: type, path: Union[str, Path]) -> None:
        self._schema = FieldSchema.for_type(record_type)
        self._path = Path(path).expanduser().absolute()
        self._defaults = DefaultsStore(self._schema)
        self._loaded = False

    # -- Public API ----------------------------------------------------------

    def load(self, record: Any) -> None:
        """Read the backing file into *record*, creating it when missing."""
        self._ensure_defaults(record)

        if not self._path.is_file():
            logger.debug("No data file at %s, writing defaults", self._path)
            self.save(record)

        applied = 0
        # Only "\n" ends an entry; undecodable bytes become U+FFFD.
        with self._path.open(
            "r", encoding=_ENCODING, errors="replace", newline=_NEWLINE
        ) as fh:
            for line in fh:
                if self._apply_line(record, _strip_line_end(line)):
                    applied += 1

        self._loaded = True
        logger.info("Loaded %d of %d fields from %s", applied, len(self._schema), self._path)

    def save(self, record: Any) -> None:
        """Write every field of *record* to the backing file."""
        self._ensure_defaults(record)

        # Render before opening the file so a bad value leaves it untouched.
        content = "".join(f"{line}\n" for line in self.render(record))

        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding=_ENCODING, newline=_NEWLINE) as fh:
            fh.write(content)
        logger.info("Saved %d fields to %s", len(self._schema), self._path)

    def reset(self, record: Any) -> None:
        """Restore *record*'s factory defaults. The file is not touched."""
        self._ensure_defaults(record)
        self._defaults.reset_to_defaults(record)
        logger.debug("Reset %s to defaults", self._schema.record_type.__qualname__)

    def render(self, record: Any) -> list[str]:
        """Return the ``name=value`` lines that :meth:`save` would write.

        Raises:
            FieldValueError: If a field holds a value that does not fit its
                kind.
        """
        return [
            f"{d.name}{_SEPARATOR}{encode(d.read(record), d.kind)}" for d in self._schema
        ]

    # -- Properties ----------------------------------------------------------

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def file_path(self) -> Path:
        return self._path

    @property
    def schema(self) -> FieldSchema:
        return self._schema

    @property
    def defaults(self) -> DefaultsStore:
        return self._defaults

    # -- Internals -----------------------------------------------------------

    def _ensure_defaults(self, record: Any) -> None:
        self._schema.initialise(record)
        self._defaults.capture_if_absent(record)

    def _apply_line(self, record: Any, line: str) -> bool:
        name, separator, text = line.partition(_SEPARATOR)
        if not separator:
            return False

        descriptor = self._schema.get(name)
        if descriptor is None:
            logger.debug("Skipping unknown field %r in %s", name, self._path)
            return False

        try:
            value = decode(text, descriptor.kind)
        except DecodeError as exc:
            logger.debug("Skipping field %r in %s: %s", name, self._path, exc)
            return False

        descriptor.write(record, value)
        return True


def _strip_line_end(line: str) -> str:
    """Drop the ``\\n`` (or a hand-edited ``\\r\\n``) ending *line*."""
    if line.endswith("\r\n"):
        return line[:-2]
    return line.removesuffix(_NEWLINE)
