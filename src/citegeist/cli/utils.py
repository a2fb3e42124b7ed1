"""Auxiliary helpers used by CLI commands."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError
import typer

from ..bibliography import BibliographyMap
from ..config import NormalizerSettings
from ..exceptions import CitegeistError
from ..pipeline import convert_bibliography
from .state import debug_enabled, emit_error, emit_issue


def build_settings(
    *, skip_invalid: bool, empty_title: bool, workers: int = 1
) -> NormalizerSettings:
    """Translate command-line flags into normalizer settings."""
    try:
        return NormalizerSettings(
            on_entry_error="skip" if skip_invalid else "abort",
            missing_title="empty" if empty_title else "error",
            workers=workers,
        )
    except ValidationError as exc:
        emit_error(f"Invalid options: {exc.errors()[0]['msg']}", exception=exc)
        raise typer.Exit(code=1) from exc


def load_bibliography(path: Path, settings: NormalizerSettings) -> BibliographyMap:
    """Read and convert a bibliography file, reporting failures on stderr."""
    try:
        payload = path.read_bytes()
    except OSError as exc:
        emit_error(f"Failed to read '{path}': {exc}", exception=exc)
        raise typer.Exit(code=1) from exc

    try:
        bib_map = convert_bibliography(payload, settings)
    except CitegeistError as exc:
        if debug_enabled():
            raise
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    for issue in bib_map.issues:
        emit_issue(issue)
    return bib_map


__all__ = ["build_settings", "load_bibliography"]
