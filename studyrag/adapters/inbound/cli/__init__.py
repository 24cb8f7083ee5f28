"""Command line interface."""

from .commands import app

__all__ = ["app"]
