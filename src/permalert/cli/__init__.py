"""CLI module for permalert."""

from permalert.cli.main import app

__all__ = ["app"]
