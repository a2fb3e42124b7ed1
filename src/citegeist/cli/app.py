"""Typer application wiring for the citegeist CLI."""

from __future__ import annotations

from rich.traceback import Traceback
import typer

from ..version import get_version
from .commands import convert, dump, show
from .state import debug_enabled, emit_error, get_cli_state, set_cli_state


app = typer.Typer(
    help="Normalize BibLaTeX bibliographies into CBOR maps.",
    context_settings={"help_option_names": ["--help"]},
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.callback()
def _app_root(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Print the citegeist version and exit.",
        is_eager=True,
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug/--no-debug",
        help="Show full tracebacks when an unexpected error occurs.",
    ),
) -> None:
    if version:
        typer.echo(get_version())
        raise typer.Exit(code=0)

    ctx.obj = get_cli_state()
    set_cli_state(verbosity=verbose, debug=debug)


app.command(name="convert")(convert)
app.command(name="show")(show)
app.command(name="dump")(dump)


def main() -> None:
    """Entry point compatible with console scripts."""
    try:
        app()
    except typer.Exit:
        raise
    except KeyboardInterrupt as exc:
        if debug_enabled():
            raise
        emit_error("Operation cancelled by user.", exception=exc)
        raise typer.Exit(code=1) from exc
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - defensive catch-all
        state = get_cli_state()
        if state.show_tracebacks:
            tb = Traceback.from_exception(
                type(exc),
                exc,
                exc.__traceback__,
                show_locals=state.verbosity >= 2,
            )
            state.err_console.print(tb)
        else:
            emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


__all__ = ["app", "main"]
