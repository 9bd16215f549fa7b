from __future__ import annotations

from typing import Annotated

import typer
from typer.main import get_command

from colornope import __version__, logger
from colornope.cli import check, explain

from ._shared import configure_logging


def create_app() -> typer.Typer:
    app = typer.Typer(help="Decide whether output streams should be colored (NO_COLOR, TERM, TTY).")

    @app.callback(invoke_without_command=True)
    def _root(
        ctx: typer.Context,
        *,
        version: Annotated[
            bool,
            typer.Option("--version", help="Show version and exit"),
        ] = False,
        verbose: Annotated[
            bool,
            typer.Option("--verbose", "-v", help="Log collected signals."),
        ] = False,
        quiet: Annotated[
            bool,
            typer.Option("--quiet", "-q", help="Only log errors."),
        ] = False,
    ) -> None:
        if version:
            typer.echo(f"colornope {__version__}")
            raise typer.Exit
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit
        previous = configure_logging(quiet=quiet, verbose=verbose)
        ctx.call_on_close(lambda: logger.setLevel(previous))

    check.register(app)
    explain.register(app)

    return app


def main() -> None:
    app = create_app()
    get_command(app)()


# Click-compatible object for tooling that imports it
cli = get_command(create_app())

__all__ = ["cli", "create_app", "main"]
