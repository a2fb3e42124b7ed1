"""Implementation of the `citegeist show` and `citegeist dump` commands."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from ...encoding import decode_bib_map
from ...exceptions import CitegeistError
from ..bibliography import print_bibliography_overview
from ..state import emit_error, get_cli_state
from ..utils import build_settings, load_bibliography


def show(
    bib_file: Path = typer.Argument(
        ...,
        metavar="BIBFILE",
        help="BibLaTeX file to inspect.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
    ),
    skip_invalid: bool = typer.Option(
        False,
        "--skip-invalid",
        help="Skip entries that fail to normalize instead of aborting.",
    ),
    empty_title: bool = typer.Option(
        False,
        "--empty-title",
        help="Store an empty title for entries that do not declare one.",
    ),
) -> None:
    """Print the normalized entries of a BibLaTeX file."""
    settings = build_settings(skip_invalid=skip_invalid, empty_title=empty_title)
    bib_map = load_bibliography(bib_file, settings)
    print_bibliography_overview(bib_map, console=get_cli_state().console)


def dump(
    cbor_file: Path = typer.Argument(
        ...,
        metavar="CBORFILE",
        help="CBOR map produced by `citegeist convert`.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
    ),
) -> None:
    """Decode a CBOR bibliography map and print it as JSON."""
    try:
        payload = decode_bib_map(cbor_file.read_bytes())
    except (OSError, CitegeistError) as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
