"""Text renderers for CLI verdicts."""

from __future__ import annotations

import json
from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from colornope.decision import Reason, Stream


@dataclass(frozen=True, slots=True)
class Verdict:
    stream: Stream
    is_tty: bool
    reason: Reason

    @property
    def enabled(self) -> bool:
        return self.reason.enabled

    def as_dict(self) -> dict[str, object]:
        return {
            "stream": self.stream.value,
            "tty": self.is_tty,
            "enabled": self.enabled,
            "reason": self.reason.value,
        }


def _style_enabled(enabled: bool) -> str:  # noqa: FBT001
    return "[green]enabled[/green]" if enabled else "[red]disabled[/red]"


def render_json(verdicts: Sequence[Verdict]) -> str:
    payload = [v.as_dict() for v in verdicts]
    return json.dumps(payload[0] if len(payload) == 1 else payload, indent=2)


def render_human(verdict: Verdict) -> str:
    return "enabled" if verdict.enabled else "disabled"


def render_table(verdicts: Sequence[Verdict], *, color: bool) -> str:
    """Render a Rich table of verdicts, styled only when *color* is set."""
    table = Table(title="Color", box=box.SIMPLE_HEAVY, header_style="bold")

    table.add_column("Stream")
    table.add_column("TTY")
    table.add_column("Color")
    table.add_column("Reason")

    for v in verdicts:
        table.add_row(v.stream.value, "yes" if v.is_tty else "no", _style_enabled(v.enabled), v.reason.value)

    buf = StringIO()
    # explicit no_color/color_system so rich's own NO_COLOR/TERM probing does not second-guess us
    console = Console(
        file=buf,
        force_terminal=color,
        no_color=not color,
        color_system="standard" if color else None,
        width=80,
    )
    console.print(table)
    return buf.getvalue().rstrip()


__all__ = ["Verdict", "render_human", "render_json", "render_table"]
