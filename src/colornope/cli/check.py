from __future__ import annotations

from typing import Annotated

import typer

from colornope import logger
from colornope.decision import Stream
from colornope.render import render_human, render_json

from ._shared import OutputFormat, resolve_decision, resolve_tty, verdict_for
from .errors import EXIT_DISABLED, EXIT_OK


def register(app: typer.Typer) -> None:
    @app.command("check")
    def check_cmd(
        stream: Annotated[
            Stream,
            typer.Option("--stream", case_sensitive=False, help="Stream to decide for: stdout or stderr."),
        ] = Stream.PRIMARY,
        color: Annotated[
            bool,
            typer.Option("--color", help="Force ANSI color output."),
        ] = False,
        no_color: Annotated[
            bool,
            typer.Option("--no-color", help="Disable ANSI color output."),
        ] = False,
        tty: Annotated[
            bool | None,
            typer.Option("--tty/--no-tty", help="Override TTY detection for the stream."),
        ] = None,
        output_format: Annotated[
            OutputFormat,
            typer.Option("--format", case_sensitive=False, help="Output format: human, json."),
        ] = OutputFormat.HUMAN,
    ) -> None:
        """Print whether color is enabled; exit 0 if enabled, 1 if not."""
        decision = resolve_decision(color=color, no_color=no_color)
        verdict = verdict_for(decision, stream, resolve_tty(tty))
        logger.info("%s: %s (%s)", stream.value, verdict.enabled, verdict.reason.value)

        if output_format is OutputFormat.JSON:
            typer.echo(render_json([verdict]))
        else:
            typer.echo(render_human(verdict))

        raise typer.Exit(code=EXIT_OK if verdict.enabled else EXIT_DISABLED)


__all__ = ["register"]
