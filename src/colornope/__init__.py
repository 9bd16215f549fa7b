"""Decide whether a stream should get colored output (NO_COLOR / CLIG)."""

from colornope._meta import __version__, logger
from colornope.decision import ColorDecision, EnvSignals, ForceOverride, Reason, Stream, TtyInfo

__all__ = [
    "ColorDecision",
    "EnvSignals",
    "ForceOverride",
    "Reason",
    "Stream",
    "TtyInfo",
    "__version__",
    "logger",
]
