"""Shared CLI state: verbosity, consoles and diagnostics rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from ..bibliography import BibliographyIssue
from ..exceptions import EntryError, exception_messages


@dataclass(slots=True)
class CLIState:
    """Shared state controlling CLI diagnostics."""

    verbosity: int = 0
    show_tracebacks: bool = False
    _console: Console | None = field(default=None, init=False, repr=False)
    _err_console: Console | None = field(default=None, init=False, repr=False)

    @property
    def console(self) -> Console:
        """Return a stdout console, rebuilt when `sys.stdout` is swapped."""
        if self._console is None or self._console.file is not sys.stdout:
            self._console = Console(file=sys.stdout)
        return self._console

    @property
    def err_console(self) -> Console:
        """Return a stderr console, rebuilt when `sys.stderr` is swapped."""
        if self._err_console is None or self._err_console.file is not sys.stderr:
            self._err_console = Console(file=sys.stderr, highlight=False)
        return self._err_console


_CLI_STATE = CLIState()


def get_cli_state() -> CLIState:
    return _CLI_STATE


def _configure_logging(verbosity: int) -> None:
    logger = logging.getLogger("citegeist")
    if verbosity <= 0:
        logger.setLevel(logging.WARNING)
        return
    logger.setLevel(logging.INFO if verbosity == 1 else logging.DEBUG)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=get_cli_state().err_console, show_path=False))


def set_cli_state(*, verbosity: int | None = None, debug: bool | None = None) -> None:
    """Apply the root options; `-v` routes package logs at INFO, `-vv` at DEBUG."""
    state = get_cli_state()
    if verbosity is not None:
        state.verbosity = max(0, verbosity)
        _configure_logging(state.verbosity)
    if debug is not None:
        state.show_tracebacks = debug


def describe_exception(exception: BaseException, verbosity: int) -> list[str]:
    """Return the diagnostic lines shown under a message at the given verbosity.

    `-v` adds the exception type and, for entry failures, the entry key and
    field. `-vv` also lists every underlying cause.
    """
    if verbosity < 1:
        return []
    lines = [f"type: {type(exception).__name__}"]
    if isinstance(exception, EntryError) and exception.entry_key is not None:
        lines.append(f"entry: {exception.entry_key}")
    field_name = getattr(exception, "field_name", None)
    if field_name:
        lines.append(f"field: {field_name}")
    if verbosity >= 2:
        causes = exception_messages(exception)[1:]
        if causes:
            lines.append("caused by:")
            lines.extend(f"  {cause}" for cause in causes)
    return lines


def render_message(
    level: str,
    message: str,
    *,
    exception: BaseException | None = None,
) -> None:
    """Print a labelled message to stderr with diagnostics for `exception`."""
    state = get_cli_state()
    style = "red" if level == "error" else "yellow"
    text = Text.assemble((f"{level}: ", f"bold {style}"), (message, style))
    if exception is not None:
        details = describe_exception(exception, state.verbosity)
        if details:
            text.append("\n" + "\n".join(details), style=style)
    state.err_console.print(text)


def emit_warning(message: str, *, exception: BaseException | None = None) -> None:
    render_message("warning", message, exception=exception)


def emit_error(message: str, *, exception: BaseException | None = None) -> None:
    render_message("error", message, exception=exception)


def emit_issue(issue: BibliographyIssue) -> None:
    """Report a non-fatal conversion issue as a warning."""
    emit_warning(f"{issue.key}: {issue.message}" if issue.key else issue.message)


def debug_enabled() -> bool:
    """Return whether full tracebacks should be displayed."""
    return get_cli_state().show_tracebacks


__all__ = [
    "CLIState",
    "debug_enabled",
    "describe_exception",
    "emit_error",
    "emit_issue",
    "emit_warning",
    "get_cli_state",
    "render_message",
    "set_cli_state",
]
