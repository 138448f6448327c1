"""Tests for the self-persisting Data / UserData / ProgramData records."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, ClassVar, Final

import pytest
from pydantic import ValidationError

from siloft_data import (
    Data,
    DataScope,
    Float32,
    Int8,
    Int16,
    Int64,
    ProgramData,
    SchemaError,
    StoreLocation,
    Transient,
    UserData,
    Volatile,
)
from siloft_data.domain.ports.path_resolver import PathResolverPort


# ─── Record types ────────────────────────────────────────────────────────────


class Options(Data):
    a_byte: Int8 = 1
    a_short: Int16 = 2
    a_int: int = 3
    a_long: Int64 = 4
    a_float: Float32 = 1.2345
    a_double: float = 2.3456
    a_boolean: bool = True
    a_string: str = "Test"


class Screen(Data):
    width: int = 1024
    height: int = 768
    name: str = "Siloft"


class InvalidType(Data):
    a_bytes: bytes = b""


class InvalidPublic(Data):
    _a_byte: Int8 = 0


class InvalidStatic(Data):
    a_byte: ClassVar[Int8] = 0


class InvalidTransient(Data):
    a_byte: Annotated[Int8, Transient] = 0


class InvalidVolatile(Data):
    a_byte: Annotated[Int8, Volatile] = 0


class InvalidFinal(Data):
    a_byte: Final[Int8] = 0


class ReservedName(Data):
    is_loaded: bool = False


class Preferences(UserData):
    theme: str = "dark"

    def __init__(self, base_dir: Path) -> None:
        super().__init__("siloft", "unittest", base_dir=base_dir)


class Installation(ProgramData):
    build: Int64 = 1

    def __init__(self, base_dir: Path) -> None:
        super().__init__("siloft", "unittest", base_dir=base_dir)


class RecordingResolver(PathResolverPort):
    def __init__(self, root: Path) -> None:
        self.root = root
        self.locations: list[StoreLocation] = []

    def resolve(self, location: StoreLocation) -> Path:
        self.locations.append(location)
        return self.root / location.scope.value


# ═══════════════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════════════


class TestConstructor:
    """Tests for constructing records."""

    def test_valid_constructor(self, tmp_path: Path):
        options = Options(tmp_path)
        assert options.a_byte == 1
        assert options.a_short == 2
        assert options.a_int == 3
        assert options.a_long == 4
        assert options.a_float == 1.2345
        assert options.a_double == 2.3456
        assert options.a_boolean is True
        assert options.a_string == "Test"
        assert options.file_path == tmp_path / "Options"
        assert options.file_directory == tmp_path
        assert options.is_loaded is False

    def test_construction_does_no_io(self, tmp_path: Path):
        Options(tmp_path / "missing")
        assert not (tmp_path / "missing").exists()

    @pytest.mark.parametrize(
        "record_type, message",
        [
            (InvalidType, "Field type not valid"),
            (InvalidPublic, "Field should be public"),
            (InvalidStatic, "Field should not be static"),
            (InvalidTransient, "Field should not be transient"),
            (InvalidVolatile, "Field should not be volatile"),
            (InvalidFinal, "Field should not be final"),
            (ReservedName, "Field name is reserved"),
        ],
    )
    def test_invalid_constructor(self, tmp_path: Path, record_type, message):
        with pytest.raises(SchemaError, match=message):
            record_type(tmp_path)

    def test_repr_lists_fields(self, tmp_path: Path):
        assert repr(Screen(tmp_path)) == "Screen(width=1024, height=768, name='Siloft')"


# ═══════════════════════════════════════════════════════════════════════════════
# Defaults / load / save
# ═══════════════════════════════════════════════════════════════════════════════


class TestPersistence:
    """Load, save and reset through the record's own methods."""

    def test_defaults(self, tmp_path: Path):
        options = Options(tmp_path)
        options.load()
        assert (options.a_byte, options.a_string) == (1, "Test")

        options.a_byte = 0
        options.a_short = 0
        options.a_int = 0
        options.a_long = 0
        options.a_float = 0.0
        options.a_double = 0.0
        options.a_boolean = False
        options.a_string = ""

        options.reset()

        assert options.a_byte == 1
        assert options.a_short == 2
        assert options.a_int == 3
        assert options.a_long == 4
        assert options.a_float == 1.2345
        assert options.a_double == 2.3456
        assert options.a_boolean is True
        assert options.a_string == "Test"

    def test_loading_saving(self, tmp_path: Path):
        options1 = Options(tmp_path)
        options1.load()
        assert options1.is_loaded is True
        assert (tmp_path / "Options").is_file()

        options1.a_byte = 4
        options1.a_short = 3
        options1.a_int = 2
        options1.a_long = 1
        options1.a_float = 2.3456
        options1.a_double = 1.2345
        options1.a_boolean = False
        options1.a_string = "Tryout"
        options1.save()

        options2 = Options(tmp_path)
        options2.load()
        assert options2.a_byte == 4
        assert options2.a_short == 3
        assert options2.a_int == 2
        assert options2.a_long == 1
        assert options2.a_float == 2.3456
        assert options2.a_double == 1.2345
        assert options2.a_boolean is False
        assert options2.a_string == "Tryout"

    def test_loading_with_errors(self, tmp_path: Path):
        (tmp_path / "Options").write_text(
            "ignored\na_byte=\na_string=a=b\na_byte=s2", encoding="utf-8"
        )

        options = Options(tmp_path)
        options.load()

        assert options.a_byte == 1
        assert options.a_short == 2
        assert options.a_int == 3
        assert options.a_long == 4
        assert options.a_float == 1.2345
        assert options.a_double == 2.3456
        assert options.a_boolean is True
        assert options.a_string == "a=b"

    def test_screen_scenario(self, tmp_path: Path):
        screen = Screen(tmp_path)
        screen.save()
        assert (tmp_path / "Screen").read_text(encoding="utf-8").splitlines() == [
            "width=1024",
            "height=768",
            "name=Siloft",
        ]

        screen.width = 1025
        screen.save()

        other = Screen(tmp_path)
        other.load()
        assert (other.width, other.height, other.name) == (1025, 768, "Siloft")
        assert other.is_loaded is True

    def test_instances_keep_separate_state(self, tmp_path: Path):
        first = Screen(tmp_path)
        second = Screen(tmp_path)
        first.load()
        assert first.is_loaded is True
        assert second.is_loaded is False


# ═══════════════════════════════════════════════════════════════════════════════
# Located records
# ═══════════════════════════════════════════════════════════════════════════════


class TestLocatedData:
    """Tests for UserData / ProgramData path resolution."""

    def test_user_data_path_uses_organisation_and_program(self, tmp_path: Path):
        preferences = Preferences(tmp_path)
        assert preferences.file_path == tmp_path / "siloft" / "unittest" / "Preferences"

    def test_program_data_round_trip(self, tmp_path: Path):
        installation = Installation(tmp_path)
        installation.load()
        installation.build += 1
        installation.save()

        again = Installation(tmp_path)
        again.load()
        assert again.build == 2
        assert again.file_directory == tmp_path / "siloft" / "unittest"

    def test_scope_is_passed_to_resolver(self, tmp_path: Path):
        resolver = RecordingResolver(tmp_path)

        class Cache(UserData):
            size: int = 0

        class Licence(ProgramData):
            seats: int = 0

        cache = Cache("siloft", "unittest", resolver=resolver)
        licence = Licence("siloft", "unittest", resolver=resolver)

        assert [loc.scope for loc in resolver.locations] == [
            DataScope.USER,
            DataScope.PROGRAM,
        ]
        assert cache.file_path == tmp_path / "user" / "Cache"
        assert licence.file_path == tmp_path / "program" / "Licence"

    @pytest.mark.parametrize("organisation", ["", "a/b", "..", "a\\b"])
    def test_invalid_organisation(self, tmp_path: Path, organisation: str):
        with pytest.raises(ValidationError):
            UserData(organisation, "unittest", base_dir=tmp_path)
