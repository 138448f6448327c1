"""Typer command line for siloft-data."""

from siloft_data.presentation.cli.app import app

__all__ = ["app"]
