"""Command-line interface for colornope."""

from __future__ import annotations

from .errors import EXIT_DISABLED, EXIT_OK, EXIT_USAGE
from .root import cli, create_app, main

__all__ = ["EXIT_DISABLED", "EXIT_OK", "EXIT_USAGE", "cli", "create_app", "main"]
