"""Rich formatting utilities for the CLI.

All Rich rendering (tables, panels, log handler) lives here so the command
module knows nothing about presentation details.
"""

from __future__ import annotations

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from siloft_data.domain.codec import encode
from siloft_data.infrastructure.persistence.persistence_controller import (
    PersistenceController,
)

console = Console()


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def configure_logging() -> None:
    """Route library logging through Rich at DEBUG level."""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "siloft-data") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {message}[/]", highlight=False)


# ---------------------------------------------------------------------------
# Record rendering
# ---------------------------------------------------------------------------


def record_table(record: Any, store: PersistenceController) -> None:
    """Print every field of *record* with its kind, value and default."""
    table = Table(
        title=f"📄 {type(record).__name__}",
        caption=str(store.file_path),
        show_header=True,
        border_style="blue",
    )
    table.add_column("Field", style="cyan")
    table.add_column("Kind", style="magenta")
    table.add_column("Value", style="green")
    table.add_column("Default")

    for descriptor in store.schema:
        value = encode(descriptor.read(record), descriptor.kind)
        default = store.defaults.get(descriptor.name)
        default_text = str(default) if default is not None else ""
        # Values that differ from their default are shown in bold.
        table.add_row(
            descriptor.name,
            descriptor.kind.value,
            Text(value, style="" if value == default_text else "bold"),
            Text(default_text),
        )

    console.print(table)
