"""Central configuration and constants for ``colornope``."""

from __future__ import annotations

# Environment variables consulted by ``colornope.env``.
TERM_VAR = "TERM"
NO_COLOR_VAR = "NO_COLOR"
CLICOLOR_FORCE_VAR = "CLICOLOR_FORCE"

# A terminal declaring itself incapable of color. Compared by exact equality.
DUMB_TERM = "dumb"

# Command-line spellings recognised by ``force_from_args``.
COLOR_FLAG = "--color"
NO_COLOR_FLAG = "--no-color"
COLOR_FLAG_VALUES_ON = frozenset({"always", "yes", "force"})
COLOR_FLAG_VALUES_OFF = frozenset({"never", "no", "none"})
COLOR_FLAG_VALUES_AUTO = frozenset({"auto", "tty", "if-tty"})

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"


__all__ = [
    "CLICOLOR_FORCE_VAR",
    "COLOR_FLAG",
    "COLOR_FLAG_VALUES_AUTO",
    "COLOR_FLAG_VALUES_OFF",
    "COLOR_FLAG_VALUES_ON",
    "DUMB_TERM",
    "LOG_FORMAT",
    "NO_COLOR_FLAG",
    "NO_COLOR_VAR",
    "TERM_VAR",
]
