"""CLI command implementations for the roomlayout application.

This package contains subcommands for the roomlayout CLI, including:
- validate: Validate a saved room document
"""

from roomlayout.cli.commands.validate import (
    display_load_error,
    load_factory,
    validate_command,
)

__all__ = ["display_load_error", "load_factory", "validate_command"]
