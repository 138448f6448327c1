"""Example records: per-user options and a machine-wide version counter."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from siloft_data.data import ProgramData, UserData

ORGANISATION = "siloft"
PROGRAM = "siloft-data-example"


class Options(UserData):
    """Screen and user options, stored per user."""

    screen_width: int = 1024
    screen_height: int = 768
    username: str = "Siloft"

    def __init__(self, base_dir: Optional[Union[str, Path]] = None) -> None:
        super().__init__(ORGANISATION, PROGRAM, base_dir=base_dir)


class AppVersion(ProgramData):
    """Installed program version, stored machine-wide."""

    version_major: int = 1
    version_minor: int = 0
    version_build: int = 0

    def __init__(self, base_dir: Optional[Union[str, Path]] = None) -> None:
        super().__init__(ORGANISATION, PROGRAM, base_dir=base_dir)

    @property
    def version(self) -> str:
        return f"{self.version_major}.{self.version_minor}.{self.version_build}"
