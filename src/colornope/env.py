"""Collect color signals from the running process.

This is the only module that looks at ``os.environ``, ``sys.argv`` and the
standard streams. Every function takes the mapping/sequence/stream it reads as
an optional argument so callers (and tests) can supply their own.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

from colornope._meta import logger
from colornope.config import (
    CLICOLOR_FORCE_VAR,
    COLOR_FLAG,
    COLOR_FLAG_VALUES_AUTO,
    COLOR_FLAG_VALUES_OFF,
    COLOR_FLAG_VALUES_ON,
    NO_COLOR_FLAG,
    NO_COLOR_VAR,
    TERM_VAR,
)
from colornope.decision import ColorDecision, EnvSignals, ForceOverride, TtyInfo
from colornope.errors import ConflictingColorFlagsError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def _parse_flag(arg: str) -> ForceOverride | None:
    """Map one command-line argument to a force value, or None if unrelated."""
    if arg == NO_COLOR_FLAG:
        return ForceOverride.OFF
    if arg == COLOR_FLAG:
        return ForceOverride.ON
    prefix = f"{COLOR_FLAG}="
    if not arg.startswith(prefix):
        return None
    value = arg.removeprefix(prefix).strip().lower()
    if value in COLOR_FLAG_VALUES_ON:
        return ForceOverride.ON
    if value in COLOR_FLAG_VALUES_OFF:
        return ForceOverride.OFF
    if value in COLOR_FLAG_VALUES_AUTO:
        return ForceOverride.AUTO
    logger.warning("ignoring unrecognised %s value: %r", COLOR_FLAG, value)
    return None


def force_from_args(argv: Sequence[str] | None = None) -> ForceOverride:
    """Derive a force override from command-line arguments.

    ``argv`` defaults to ``sys.argv[1:]``. Parsing stops at ``--``. Giving both
    an enabling and a disabling spelling raises ``ConflictingColorFlagsError``.
    """
    args = sys.argv[1:] if argv is None else argv
    seen: set[ForceOverride] = set()
    for arg in args:
        if arg == "--":
            break
        parsed = _parse_flag(arg)
        if parsed is not None:
            seen.add(parsed)

    if {ForceOverride.ON, ForceOverride.OFF} <= seen:
        msg = f"cannot combine {COLOR_FLAG} and {NO_COLOR_FLAG}"
        raise ConflictingColorFlagsError(msg)
    if ForceOverride.OFF in seen:
        return ForceOverride.OFF
    if ForceOverride.ON in seen:
        return ForceOverride.ON
    return ForceOverride.AUTO


def force_from_env(environ: Mapping[str, str] | None = None) -> ForceOverride:
    """``CLICOLOR_FORCE`` set to anything but ``""`` or ``"0"`` forces color on."""
    env = os.environ if environ is None else environ
    value = env.get(CLICOLOR_FORCE_VAR)
    if value is not None and value not in {"", "0"}:
        return ForceOverride.ON
    return ForceOverride.AUTO


def signals_from_env(
    environ: Mapping[str, str] | None = None,
    argv: Sequence[str] | None = None,
) -> EnvSignals:
    """Read ``TERM``, ``NO_COLOR`` and the force flags into an ``EnvSignals``.

    Command-line flags take priority over ``CLICOLOR_FORCE``.
    """
    env = os.environ if environ is None else environ

    force = force_from_args(argv)
    if force is ForceOverride.AUTO:
        force = force_from_env(env)

    signals = EnvSignals(
        term_value=env.get(TERM_VAR),
        no_color_present=NO_COLOR_VAR in env,
        force=force,
    )
    logger.debug(
        "color signals: term=%r no_color=%s force=%s",
        signals.term_value,
        signals.no_color_present,
        signals.force.value,
    )
    return signals


def stream_is_tty(stream: object) -> bool:
    """Return True if *stream* is an interactive terminal.

    Objects without ``isatty`` and closed streams are treated as non-TTY.
    """
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (ValueError, OSError):
        return False


def tty_info_from_streams(stdout: object | None = None, stderr: object | None = None) -> TtyInfo:
    info = TtyInfo(
        stdout=stream_is_tty(sys.stdout if stdout is None else stdout),
        stderr=stream_is_tty(sys.stderr if stderr is None else stderr),
    )
    logger.debug("tty detection: stdout=%s stderr=%s", info.stdout, info.stderr)
    return info


def from_env(
    environ: Mapping[str, str] | None = None,
    argv: Sequence[str] | None = None,
) -> ColorDecision:
    """Convenience constructor reading the real environment and arguments."""
    return ColorDecision(signals_from_env(environ, argv))


__all__ = [
    "force_from_args",
    "force_from_env",
    "from_env",
    "signals_from_env",
    "stream_is_tty",
    "tty_info_from_streams",
]
