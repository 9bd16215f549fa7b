"""Pure decision logic: should a stream get colored output?

Nothing in this module reads the environment. Callers collect the raw signals
(``TERM``, presence of ``NO_COLOR``, an explicit force flag and per-stream
TTY-ness) and pass them in as plain values; see ``colornope.env`` for a helper
that does this for the running process.

>>> decision = ColorDecision.new("xterm-256color", no_color_present=False)
>>> decision.enable_color_for(Stream.PRIMARY, is_tty=True)
True
>>> decision.enable_color_for(Stream.SECONDARY, is_tty=False)
False
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from colornope.config import DUMB_TERM

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class Stream(StrEnum):
    """Output channels a verdict applies to."""

    PRIMARY = "stdout"
    SECONDARY = "stderr"


class ForceOverride(StrEnum):
    """Explicit user instruction; ``AUTO`` means no instruction was given."""

    ON = "on"
    OFF = "off"
    AUTO = "auto"


class Reason(StrEnum):
    """The precedence rule that settled a verdict."""

    FORCED_OFF = "forced-off"
    FORCED_ON = "forced-on"
    DUMB_TERMINAL = "dumb-terminal"
    NO_COLOR = "no-color"
    NOT_A_TTY = "not-a-tty"
    DEFAULT = "default"

    @property
    def enabled(self) -> bool:
        return self in {Reason.FORCED_ON, Reason.DEFAULT}


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class EnvSignals:
    """Environment-derived facts, collected once by the caller.

    ``no_color_present`` reflects whether ``NO_COLOR`` is *set*; its content is
    irrelevant, an empty value still disables color.
    """

    term_value: str | None = None
    no_color_present: bool = False
    force: ForceOverride = ForceOverride.AUTO


@dataclass(frozen=True, slots=True)
class TtyInfo:
    """Whether each stream is attached to an interactive terminal."""

    stdout: bool = False
    stderr: bool = False

    def for_stream(self, stream: Stream) -> bool:
        return self.stdout if stream is Stream.PRIMARY else self.stderr


@dataclass(frozen=True, slots=True)
class ColorDecision:
    """Decides whether color should be enabled for a target stream.

    Precedence, first match wins:

    1. ``force == OFF``: disabled.
    2. ``force == ON``: enabled, even on a dumb terminal or a pipe.
    3. ``TERM`` is exactly ``"dumb"``: disabled.
    4. ``NO_COLOR`` is present: disabled.
    5. the stream is not a TTY: disabled.
    6. otherwise enabled.
    """

    signals: EnvSignals = EnvSignals()

    @classmethod
    def new(
        cls,
        term_value: str | None,
        no_color_present: bool,  # noqa: FBT001
        force: ForceOverride = ForceOverride.AUTO,
    ) -> ColorDecision:
        """Build a decision from raw signals without touching the environment."""
        return cls(EnvSignals(term_value=term_value, no_color_present=no_color_present, force=force))

    def reason_for(self, stream: Stream, is_tty: bool) -> Reason:  # noqa: ARG002, FBT001
        # the stream does not change the chain; only its TTY bit does
        s = self.signals
        if s.force is ForceOverride.OFF:
            return Reason.FORCED_OFF
        if s.force is ForceOverride.ON:
            return Reason.FORCED_ON
        if s.term_value == DUMB_TERM:
            return Reason.DUMB_TERMINAL
        if s.no_color_present:
            return Reason.NO_COLOR
        if not is_tty:
            return Reason.NOT_A_TTY
        return Reason.DEFAULT

    def enable_color_for(self, stream: Stream, is_tty: bool) -> bool:  # noqa: FBT001
        """Should color be enabled for *stream*?"""
        return self.reason_for(stream, is_tty=is_tty).enabled

    def verdicts(self, tty: TtyInfo) -> dict[Stream, bool]:
        """Verdicts for both streams, each using only its own TTY bit."""
        return {stream: self.enable_color_for(stream, is_tty=tty.for_stream(stream)) for stream in Stream}


__all__ = [
    "ColorDecision",
    "EnvSignals",
    "ForceOverride",
    "Reason",
    "Stream",
    "TtyInfo",
]
