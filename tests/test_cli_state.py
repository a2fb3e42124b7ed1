import pytest

from citegeist.bibliography import BibliographyIssue
from citegeist.cli.state import describe_exception, emit_error, emit_issue, get_cli_state
from citegeist.exceptions import BibliographySyntaxError, NameDecodeError


@pytest.fixture(autouse=True)
def _quiet_state():
    yield
    get_cli_state().verbosity = 0


def _chained_syntax_error() -> BibliographySyntaxError:
    try:
        try:
            raise ValueError("unexpected end of input")
        except ValueError as exc:
            raise BibliographySyntaxError("failed to parse bibliography") from exc
    except BibliographySyntaxError as exc:
        return exc


def test_describe_exception_is_silent_by_default() -> None:
    error = NameDecodeError("author", "bad", entry_key="k")

    assert describe_exception(error, 0) == []


def test_describe_entry_error_names_entry_and_field() -> None:
    error = NameDecodeError("author", "bad", entry_key="k")

    assert describe_exception(error, 1) == ["type: NameDecodeError", "entry: k", "field: author"]


def test_describe_exception_lists_causes_at_higher_verbosity() -> None:
    error = _chained_syntax_error()

    assert describe_exception(error, 1) == ["type: BibliographySyntaxError"]
    assert describe_exception(error, 2) == [
        "type: BibliographySyntaxError",
        "caused by:",
        "  unexpected end of input",
    ]


def test_emit_error_prints_diagnostics_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    get_cli_state().verbosity = 2

    emit_error("conversion failed", exception=_chained_syntax_error())

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error: conversion failed" in captured.err
    assert "caused by:" in captured.err
    assert "unexpected end of input" in captured.err


def test_emit_issue_prefixes_entry_key(capsys: pytest.CaptureFixture[str]) -> None:
    emit_issue(BibliographyIssue("Duplicate entry replaces an earlier definition.", key="dup"))

    assert "warning: dup: Duplicate entry" in capsys.readouterr().err
