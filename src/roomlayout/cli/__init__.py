"""Command-line interface for room layout documents."""

from roomlayout.cli.main import app

__all__ = ["app"]
