"""Centralised exception hierarchy for colornope."""

from __future__ import annotations


class ColornopeError(Exception):
    """Base class for all custom colornope exceptions."""


class ConflictingColorFlagsError(ColornopeError):
    """Both a force-on and a force-off color flag were given."""


__all__ = [
    "ColornopeError",
    "ConflictingColorFlagsError",
]
