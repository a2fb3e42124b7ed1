"""Implementation of the `citegeist convert` command."""

from __future__ import annotations

from pathlib import Path

import typer

from ...encoding import encode_bib_map
from ...exceptions import CitegeistError
from ..state import emit_error
from ..utils import build_settings, load_bibliography


def convert(
    bib_file: Path = typer.Argument(
        ...,
        metavar="BIBFILE",
        help="BibLaTeX file to convert.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Destination of the CBOR map. Defaults to BIBFILE with a .cbor suffix.",
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
    workers: int = typer.Option(
        1,
        "--workers",
        "-j",
        min=1,
        help="Number of threads used to normalize entries.",
    ),
) -> None:
    """Convert a BibLaTeX file into a CBOR bibliography map."""
    settings = build_settings(skip_invalid=skip_invalid, empty_title=empty_title, workers=workers)
    bib_map = load_bibliography(bib_file, settings)

    try:
        data = encode_bib_map(bib_map)
    except CitegeistError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    target = output or bib_file.with_suffix(".cbor")
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
    except OSError as exc:
        emit_error(f"Failed to write '{target}': {exc}", exception=exc)
        raise typer.Exit(code=1) from exc

    typer.echo(f"Wrote {len(bib_map)} entries ({len(data)} bytes) to {target}")
