"""Record target loader.

Resolves ``module.path:ClassName`` or ``path/to/file.py:ClassName`` to a
record class, instantiates it without arguments and picks the store that
persists it.
"""

from __future__ import annotations

import importlib
import importlib.util
import sys
from pathlib import Path
from typing import Any, Optional

from siloft_data.data import Data
from siloft_data.domain.errors import SchemaError, SiloftDataError
from siloft_data.infrastructure.persistence.persistence_controller import (
    PersistenceController,
)


class RecordTargetError(SiloftDataError):
    """Raised when a CLI target cannot be turned into a record."""


def load_record_type(target: str) -> type:
    """Import the class named by *target*.

    Raises:
        RecordTargetError: If the target is malformed or cannot be imported.
    """
    module_name, separator, class_name = target.rpartition(":")
    if not separator or not module_name or not class_name:
        raise RecordTargetError(
            f"Invalid target {target!r}. Expected 'module:Class' or 'file.py:Class'."
        )

    if module_name.endswith(".py"):
        module = _load_python_module(Path(module_name).expanduser().resolve())
    else:
        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            raise RecordTargetError(f"Cannot import module {module_name!r}: {exc}") from exc

    record_type = getattr(module, class_name, None)
    if not isinstance(record_type, type):
        raise RecordTargetError(f"{module_name!r} has no class named {class_name!r}")
    return record_type


def open_record(target: str, file: Optional[Path] = None) -> tuple[Any, PersistenceController]:
    """Instantiate *target* and return it with its store.

    With *file*, a dedicated controller bound to that path is used, which
    also works for plain classes. Otherwise the record must be a
    :class:`Data` subclass and its own store is returned.
    """
    record_type = load_record_type(target)
    try:
        record = record_type()
    except SchemaError:
        raise
    except TypeError as exc:
        raise RecordTargetError(
            f"{record_type.__name__} must be constructible without arguments: {exc}"
        ) from exc

    if file is not None:
        return record, PersistenceController(record_type, file)
    if isinstance(record, Data):
        return record, record.data_store
    raise RecordTargetError(
        f"{record_type.__name__} does not persist itself. Provide --file."
    )


def _load_python_module(module_path: Path) -> Any:
    """Load Python module from file path."""
    if not module_path.is_file():
        raise RecordTargetError(f"Record module not found at {module_path}")
    module_name = f"siloft_data_target_{module_path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, str(module_path))
    if spec is None or spec.loader is None:
        raise RecordTargetError(f"Failed to load record module at {module_path}")
    module = importlib.util.module_from_spec(spec)
    # Registered so annotations of its classes resolve against its globals.
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module
