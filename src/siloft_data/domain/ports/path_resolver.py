"""Port: Path resolver: locate the directory for a program's data files."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from siloft_data.config.models import StoreLocation


class PathResolverPort(ABC):
    """Contract for turning a store location into a directory."""

    @abstractmethod
    def resolve(self, location: StoreLocation) -> Path:
        """Return the absolute directory that holds *location*'s files."""
        ...
