"""Allow ``python -m siloft_data``."""

from siloft_data.presentation.cli.app import app

app(prog_name="siloft-data")
