"""Infrastructure layer: file-system and platform adapters."""

from siloft_data.infrastructure.paths.platform_resolver import PlatformPathResolver
from siloft_data.infrastructure.persistence.persistence_controller import PersistenceController

__all__ = [
    "PersistenceController",
    "PlatformPathResolver",
]
