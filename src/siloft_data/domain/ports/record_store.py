"""Port (ABC) for record persistence.

Domain layer interface: infrastructure provides the concrete implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any


class RecordStorePort(ABC):
    """Abstract interface for loading / saving / resetting one record."""

    @abstractmethod
    def load(self, record: Any) -> None:
        """Overwrite *record*'s fields with the persisted values."""

    @abstractmethod
    def save(self, record: Any) -> None:
        """Persist every field of *record*."""

    @abstractmethod
    def reset(self, record: Any) -> None:
        """Restore *record*'s fields to their factory defaults."""

    @property
    @abstractmethod
    def is_loaded(self) -> bool:
        """Whether a load has completed."""

    @property
    @abstractmethod
    def file_path(self) -> Path:
        """Absolute path of the backing file."""

    @property
    def file_directory(self) -> Path:
        """Directory holding the backing file."""
        return self.file_path.parent
