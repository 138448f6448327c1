"""Example records used by ``siloft-data demo``."""

from siloft_data.examples.records import AppVersion, Options

__all__ = ["AppVersion", "Options"]
