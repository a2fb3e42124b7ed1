"""Conversion pipeline from bibliography bytes to a collected map.

Stages
: `decode_bibliography` validates the payload and parses it with pybtex.
: `normalize_entries` turns every raw entry into a `NormalizedEntry`, either
  sequentially or on a thread pool. Results come back in source order in both
  cases.
: `BibliographyMap` collects the results; the last definition of a key wins.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from functools import partial
import logging

from .bibliography.collection import BibliographyMap
from .bibliography.normalize import NormalizedEntry, normalize_entry
from .bibliography.parsing import RawEntry, decode_bibliography
from .config import DEFAULT_SETTINGS, NormalizerSettings
from .exceptions import EntryError


logger = logging.getLogger(__name__)


def _normalize_or_error(
    entry: RawEntry, *, settings: NormalizerSettings
) -> NormalizedEntry | EntryError:
    try:
        return normalize_entry(entry, missing_title=settings.missing_title)
    except EntryError as exc:
        return exc


def normalize_entries(
    entries: Sequence[RawEntry],
    settings: NormalizerSettings = DEFAULT_SETTINGS,
) -> Iterator[NormalizedEntry | EntryError]:
    """Normalize entries, yielding each record or its error in source order."""
    worker = partial(_normalize_or_error, settings=settings)
    if settings.workers == 1 or len(entries) < 2:
        yield from map(worker, entries)
        return
    with ThreadPoolExecutor(max_workers=settings.workers) as executor:
        yield from executor.map(worker, entries)


def convert_bibliography(
    payload: bytes,
    settings: NormalizerSettings | None = None,
) -> BibliographyMap:
    """Decode, normalize and collect a bibliography payload.

    Raises:
        InputEncodingError, BibliographySyntaxError, EntryError
    """
    settings = settings or DEFAULT_SETTINGS
    entries = decode_bibliography(payload)
    bib_map = BibliographyMap()
    for result in normalize_entries(entries, settings):
        if isinstance(result, NormalizedEntry):
            bib_map.add(result)
            continue
        if settings.on_entry_error == "abort":
            raise result
        logger.debug("skipping entry %s: %s", result.entry_key, result)
        bib_map.report(f"Skipped entry: {result}", key=result.entry_key)
    logger.debug("collected %d of %d entries", len(bib_map), len(entries))
    return bib_map


__all__ = ["convert_bibliography", "normalize_entries"]
