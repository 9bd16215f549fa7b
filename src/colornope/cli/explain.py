from __future__ import annotations

from typing import Annotated

import typer

from colornope.decision import Stream
from colornope.render import render_json, render_table

from ._shared import OutputFormat, resolve_decision, resolve_tty, verdict_for
from .errors import EXIT_OK


def register(app: typer.Typer) -> None:
    @app.command("explain")
    def explain_cmd(
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
            typer.Option("--tty/--no-tty", help="Override TTY detection for both streams."),
        ] = None,
        output_format: Annotated[
            OutputFormat,
            typer.Option("--format", case_sensitive=False, help="Output format: human, json."),
        ] = OutputFormat.HUMAN,
    ) -> None:
        """Show the verdict and the deciding rule for both streams."""
        decision = resolve_decision(color=color, no_color=no_color)
        tty_info = resolve_tty(tty)
        verdicts = [verdict_for(decision, stream, tty_info) for stream in Stream]

        if output_format is OutputFormat.JSON:
            typer.echo(render_json(verdicts))
        else:
            # the table goes to stdout, so it is styled by the stdout verdict
            use_color = verdicts[0].enabled
            typer.echo(render_table(verdicts, color=use_color), color=use_color)

        raise typer.Exit(code=EXIT_OK)


__all__ = ["register"]
