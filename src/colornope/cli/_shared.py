from __future__ import annotations

import logging
from enum import StrEnum

import typer

from colornope import logger
from colornope.config import COLOR_FLAG, LOG_FORMAT, NO_COLOR_FLAG
from colornope.decision import ColorDecision, Stream, TtyInfo
from colornope.env import from_env, tty_info_from_streams
from colornope.errors import ConflictingColorFlagsError
from colornope.render import Verdict


class OutputFormat(StrEnum):
    HUMAN = "human"
    JSON = "json"


def configure_logging(*, quiet: bool, verbose: bool) -> int:
    """Configure logging based on *quiet*/*verbose*; return the previous package level."""
    level = logging.ERROR if quiet else (logging.DEBUG if verbose else logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    previous = logger.level
    logger.setLevel(level)
    return previous


def resolve_decision(*, color: bool, no_color: bool) -> ColorDecision:
    """Build a decision from the real environment plus the parsed flags."""
    argv = [*([COLOR_FLAG] if color else []), *([NO_COLOR_FLAG] if no_color else [])]
    try:
        return from_env(argv=argv)
    except ConflictingColorFlagsError as exc:
        raise typer.BadParameter(str(exc), param_hint=f"'{COLOR_FLAG}' / '{NO_COLOR_FLAG}'") from exc


def resolve_tty(tty: bool | None) -> TtyInfo:  # noqa: FBT001
    """Detect TTY-ness, unless ``--tty/--no-tty`` pinned it for both streams."""
    if tty is None:
        return tty_info_from_streams()
    logger.debug("tty detection overridden: %s", tty)
    return TtyInfo(stdout=tty, stderr=tty)


def verdict_for(decision: ColorDecision, stream: Stream, tty: TtyInfo) -> Verdict:
    is_tty = tty.for_stream(stream)
    return Verdict(stream=stream, is_tty=is_tty, reason=decision.reason_for(stream, is_tty=is_tty))


__all__ = ["OutputFormat", "configure_logging", "resolve_decision", "resolve_tty", "verdict_for"]
