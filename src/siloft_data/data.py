"""Self-persisting record base classes.

Subclass one of these and declare public, annotated fields with defaults::

    class Options(UserData):
        screen_width: int = 1024
        screen_height: int = 768
        username: str = "Siloft"

        def __init__(self) -> None:
            super().__init__("siloft", "siloft-data-example")

    options = Options()
    options.load()          # creates the file with the defaults if missing
    options.screen_width += 1
    options.save()

The file is named after the class and lives in the directory given to
:class:`Data`, or the platform directory chosen for :class:`UserData` /
:class:`ProgramData`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from siloft_data.config.models import DataScope, StoreLocation
from siloft_data.domain.errors import SchemaError
from siloft_data.domain.ports.path_resolver import PathResolverPort
from siloft_data.infrastructure.paths.platform_resolver import PlatformPathResolver
from siloft_data.infrastructure.persistence.persistence_controller import (
    PersistenceController,
)


class Data:
    """Record stored as ``<directory>/<class name>``.

    Raises:
        SchemaError: From the constructor, if any annotated field cannot be
            persisted or shadows one of the members below.
    """

    def __init__(self, directory: Union[str, Path]) -> None:
        store = PersistenceController(type(self), Path(directory) / type(self).__name__)
        for name in store.schema.names:
            if name in _RESERVED_NAMES:
                raise SchemaError("Field name is reserved", name)
        store.schema.initialise(self)
        self._store = store

    def load(self) -> None:
        """Load the fields from the data file, creating it when missing.

        Raises:
            OSError: If the file cannot be created or read.
        """
        self._store.load(self)

    def save(self) -> None:
        """Save the fields to the data file.

        Raises:
            OSError: If the file cannot be written.
        """
        self._store.save(self)

    def reset(self) -> None:
        """Set every field back to the value it had before the first
        load, save or reset."""
        self._store.reset(self)

    @property
    def is_loaded(self) -> bool:
        return self._store.is_loaded

    @property
    def file_path(self) -> Path:
        return self._store.file_path

    @property
    def file_directory(self) -> Path:
        return self._store.file_directory

    @property
    def data_store(self) -> PersistenceController:
        return self._store

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{d.name}={d.read(self)!r}" for d in self._store.schema
        )
        return f"{type(self).__name__}({fields})"


_RESERVED_NAMES = frozenset(name for name in dir(Data) if not name.startswith("_"))


class _LocatedData(Data):
    """Record stored under ``<platform dir>/<organisation>/<program>``."""

    # Unannotated: every class annotation is a persisted field.
    _scope = DataScope.USER

    def __init__(
        self,
        organisation: str,
        program: str,
        *,
        base_dir: Optional[Union[str, Path]] = None,
        resolver: Optional[PathResolverPort] = None,
    ) -> None:
        location = StoreLocation(
            organisation=organisation,
            program=program,
            scope=self._scope,
            base_dir=base_dir,
        )
        super().__init__((resolver or PlatformPathResolver()).resolve(location))


class UserData(_LocatedData):
    """Record stored in the per-user data directory of the current platform."""

    _scope = DataScope.USER


class ProgramData(_LocatedData):
    """Record stored in the machine-wide program data directory.

    Writing usually requires administrator rights.
    """

    _scope = DataScope.PROGRAM
