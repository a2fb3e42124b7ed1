"""Aggregation of normalized entries keyed by citation key."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from .issues import BibliographyIssue
from .normalize import NormalizedEntry


class BibliographyMap:
    """Map citation keys to normalized entries.

    A later entry replaces an earlier one with the same key. Iteration and
    export always follow lexicographic key order.
    """

    def __init__(self, entries: Iterable[NormalizedEntry] = ()) -> None:
        self._entries: dict[str, NormalizedEntry] = {}
        self._issues: list[BibliographyIssue] = []
        self.extend(entries)

    @property
    def issues(self) -> Sequence[BibliographyIssue]:
        """Return the issues recorded while collecting entries."""
        return tuple(self._issues)

    def add(self, entry: NormalizedEntry) -> None:
        if entry.entry_key in self._entries:
            self._issues.append(
                BibliographyIssue(
                    message="Duplicate entry replaces an earlier definition.",
                    key=entry.entry_key,
                )
            )
        self._entries[entry.entry_key] = entry

    def extend(self, entries: Iterable[NormalizedEntry]) -> None:
        for entry in entries:
            self.add(entry)

    def report(self, message: str, *, key: str | None = None) -> None:
        """Record an issue that did not prevent collection."""
        self._issues.append(BibliographyIssue(message=message, key=key))

    def find(self, key: str) -> NormalizedEntry | None:
        return self._entries.get(key)

    def __getitem__(self, key: str) -> NormalizedEntry:
        return self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def keys(self) -> list[str]:
        return sorted(self._entries)

    def values(self) -> list[NormalizedEntry]:
        return [self._entries[key] for key in self.keys()]

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Return a dictionary of plain records keyed by citation key."""
        return {key: self._entries[key].to_dict() for key in self.keys()}


__all__ = ["BibliographyMap"]
