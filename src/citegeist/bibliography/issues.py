"""Shared data structures for bibliography processing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class BibliographyIssue:
    """Represents a problem encountered while collecting bibliography entries."""

    message: str
    key: str | None = None
