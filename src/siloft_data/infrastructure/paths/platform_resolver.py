"""Platform path resolver: implements PathResolverPort with ``platformdirs``.

Resolves a :class:`StoreLocation` to ``<base>/<organisation>/<program>``:

  * user scope: the per-user data directory
    (``~/.local/share`` on Linux, ``%LOCALAPPDATA%`` on Windows,
    ``~/Library/Application Support`` on macOS)
  * program scope: the machine-wide configuration directory
    (``/etc/xdg`` on Linux, ``%PROGRAMDATA%`` on Windows,
    ``/Library/Application Support`` on macOS)
"""

from __future__ import annotations

from pathlib import Path

import platformdirs

from siloft_data.config.models import DataScope, StoreLocation
from siloft_data.domain.ports.path_resolver import PathResolverPort


class PlatformPathResolver(PathResolverPort):
    """Concrete implementation of :class:`PathResolverPort`."""

    def resolve(self, location: StoreLocation) -> Path:
        if location.base_dir is not None:
            base = Path(location.base_dir) / location.organisation
        elif location.scope is DataScope.PROGRAM:
            base = Path(platformdirs.site_config_dir(location.organisation, appauthor=False))
        else:
            base = Path(platformdirs.user_data_dir(location.organisation, appauthor=False))
        return (base / location.program).absolute()
