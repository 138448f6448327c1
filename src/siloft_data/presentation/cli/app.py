"""Thin CLI wrapper: Typer commands over the persistence engine.

Records are addressed as ``module:Class`` (or ``file.py:Class``) and must be
constructible without arguments.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Callable, Optional

import typer
from pydantic import ValidationError

from siloft_data.domain.codec import decode
from siloft_data.domain.errors import SiloftDataError
from siloft_data.presentation.cli.formatters import (
    configure_logging,
    console,
    error_message,
    record_table,
    success_panel,
)
from siloft_data.presentation.cli.targets import RecordTargetError, open_record

app = typer.Typer(
    name="siloft-data",
    help="📁 Inspect and edit flat name=value record files",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

TargetArg = Annotated[
    str, typer.Argument(help="Record class as 'module:Class' or 'file.py:Class'")
]
FileOption = Annotated[
    Optional[Path],
    typer.Option("--file", "-f", help="Use this data file instead of the record's own"),
]


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
) -> None:
    """siloft-data command line."""
    if verbose:
        configure_logging()


def _run(action: Callable[[], Any]) -> Any:
    """Run *action*, turning expected failures into a red message and exit 1."""
    try:
        return action()
    except (SiloftDataError, OSError, ValidationError) as e:
        error_message(str(e))
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# siloft-data show
# ---------------------------------------------------------------------------


@app.command()
def show(target: TargetArg, file: FileOption = None) -> None:
    """Load a record and print its fields."""

    def action() -> None:
        record, store = open_record(target, file)
        store.load(record)
        record_table(record, store)

    _run(action)


# ---------------------------------------------------------------------------
# siloft-data set
# ---------------------------------------------------------------------------


@app.command("set")
def set_fields(
    target: TargetArg,
    assignments: Annotated[list[str], typer.Argument(help="name=value pairs")],
    file: FileOption = None,
) -> None:
    """Change one or more fields and save the record."""

    def action() -> None:
        record, store = open_record(target, file)

        # Decode everything first so a bad assignment leaves the file untouched.
        updates = []
        for assignment in assignments:
            name, separator, text = assignment.partition("=")
            if not separator:
                raise RecordTargetError(f"Expected name=value, got {assignment!r}")
            descriptor = store.schema.get(name)
            if descriptor is None:
                raise RecordTargetError(f"{type(record).__name__} has no field {name!r}")
            updates.append((descriptor, decode(text, descriptor.kind)))

        store.load(record)
        for descriptor, value in updates:
            descriptor.write(record, value)
        store.save(record)
        success_panel(
            "\n".join(f"{d.name} = {value!r}" for d, value in updates),
            title=f"✅ Saved {store.file_path}",
        )

    _run(action)


# ---------------------------------------------------------------------------
# siloft-data reset
# ---------------------------------------------------------------------------


@app.command()
def reset(target: TargetArg, file: FileOption = None) -> None:
    """Restore a record's factory defaults and save it."""

    def action() -> None:
        record, store = open_record(target, file)
        store.load(record)
        store.reset(record)
        store.save(record)
        success_panel(f"Defaults restored in {store.file_path}")

    _run(action)


# ---------------------------------------------------------------------------
# siloft-data path
# ---------------------------------------------------------------------------


@app.command()
def path(target: TargetArg, file: FileOption = None) -> None:
    """Print the path of a record's data file."""

    def action() -> None:
        _record, store = open_record(target, file)
        console.print(str(store.file_path), highlight=False, soft_wrap=True)

    _run(action)


# ---------------------------------------------------------------------------
# siloft-data demo
# ---------------------------------------------------------------------------


@app.command()
def demo(
    base_dir: Annotated[
        Optional[Path],
        typer.Option("--base-dir", "-d", help="Store the example files under this directory"),
    ] = None,
) -> None:
    """Load, bump and save the example AppVersion and Options records."""
    from siloft_data.examples.records import AppVersion, Options

    try:
        app_version = AppVersion(base_dir=base_dir)
        app_version.load()
        console.print(app_version.version)

        app_version.version_major += 1
        app_version.version_minor += 1
        app_version.version_build += 1
        app_version.save()
        console.print(app_version.version)
    except OSError as e:
        error_message(f"Failed loading/saving app version: {e}")

    try:
        options = Options(base_dir=base_dir)
        options.load()
        console.print(f"{options.screen_width}x{options.screen_height}")
        console.print(options.username, highlight=False)

        options.screen_width += 1
        options.screen_height += 1
        options.username += "0"
        options.save()
        console.print(f"{options.screen_width}x{options.screen_height}")
        console.print(options.username, highlight=False)
    except OSError as e:
        error_message(f"Failed loading/saving options: {e}")


if __name__ == "__main__":
    app()
