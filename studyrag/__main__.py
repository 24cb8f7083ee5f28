"""Allow ``python -m studyrag``."""

from .adapters.inbound.cli import app

app()
