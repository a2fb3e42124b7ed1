"""Decode raw bibliography payloads into entries."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import logging
from types import MappingProxyType

from pybtex.database import BibliographyData, Entry
from pybtex.database.input import bibtex
from pybtex.exceptions import PybtexError

from ..exceptions import BibliographySyntaxError, InputEncodingError


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RawEntry:
    """One parsed entry; field values are LaTeX strings."""

    entry_type: str
    key: str
    fields: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_pybtex(cls, key: str, entry: Entry) -> RawEntry:
        fields = {str(name).lower(): str(value) for name, value in entry.fields.items()}
        return cls(
            entry_type=str(entry.type).lower(),
            key=str(key),
            fields=MappingProxyType(fields),
        )


class _EntryLog(BibliographyData):
    """Bibliography data that keeps every entry, duplicated keys included."""

    def __init__(self) -> None:
        self.parsed: list[RawEntry] = []
        super().__init__()

    def add_entry(self, key, entry):  # type: ignore[override]
        self.parsed.append(RawEntry.from_pybtex(key, entry))


class EntryParser(bibtex.Parser):
    """BibTeX parser yielding raw entries in source order.

    Person fields are not split by the parser so that name lists keep their
    original text next to the decoded persons.
    """

    def __init__(self) -> None:
        super().__init__(person_fields=())
        self.data = _EntryLog()

    def parse_entries(self, text: str) -> list[RawEntry]:
        self.parse_string(text)
        return list(self.data.parsed)


def decode_payload(payload: bytes) -> str:
    """Return the payload as text, rejecting invalid UTF-8."""
    try:
        return bytes(payload).decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise InputEncodingError(f"invalid UTF-8 in bibliography: {exc}") from exc


def parse_bibliography(text: str) -> list[RawEntry]:
    """Parse BibLaTeX text into raw entries."""
    parser = EntryParser()
    try:
        entries = parser.parse_entries(text)
    except PybtexError as exc:
        raise BibliographySyntaxError(f"failed to parse bibliography: {exc}") from exc
    logger.debug("parsed %d bibliography entries", len(entries))
    return entries


def decode_bibliography(payload: bytes) -> list[RawEntry]:
    """Decode a UTF-8 payload and parse it into raw entries."""
    return parse_bibliography(decode_payload(payload))


__all__ = [
    "EntryParser",
    "RawEntry",
    "decode_bibliography",
    "decode_payload",
    "parse_bibliography",
]
