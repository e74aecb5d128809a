"""Allow running rmrf as ``python -m rmrf``."""

from rmrf.cli.main import app

app(prog_name="rmrf")
