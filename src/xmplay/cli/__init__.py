"""Command-line interface for xmplay."""

from xmplay.cli.main import app

__all__ = ["app"]
