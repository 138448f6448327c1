"""Pydantic models describing where a program keeps its data files.

A ``StoreLocation`` names the organisation and program that own a set of
record files and whether they are per-user or machine-wide. The concrete
directory is chosen by a :class:`PathResolverPort` implementation.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DataScope(str, Enum):
    """Deployment context of a data file."""

    USER = "user"  # per-user data directory
    PROGRAM = "program"  # machine-wide program data directory


class StoreLocation(BaseModel):
    """Organisation / program pair plus scope for one family of data files."""

    model_config = ConfigDict(frozen=True)

    organisation: str = Field(
        min_length=1,
        description="Organisation directory name.",
    )
    program: str = Field(
        min_length=1,
        description="Program directory name, nested under the organisation.",
    )
    scope: DataScope = Field(
        default=DataScope.USER,
        description="User-scoped or machine-wide storage.",
    )
    base_dir: Optional[Path] = Field(
        default=None,
        description="Override the platform base directory (useful for testing).",
    )

    @field_validator("organisation", "program")
    @classmethod
    def _single_path_component(cls, value: str) -> str:
        if value in (".", "..") or "/" in value or "\\" in value:
            raise ValueError("must be a single directory name")
        return value
