"""Exception hierarchy for the bibliography conversion pipeline."""

from __future__ import annotations


class CitegeistError(RuntimeError):
    """Base exception for bibliography conversion failures."""


class InputEncodingError(CitegeistError):
    """Raised when the bibliography payload is not valid UTF-8 text."""


class BibliographySyntaxError(CitegeistError):
    """Raised when the BibLaTeX parser rejects the bibliography."""


class EntryError(CitegeistError):
    """Base class for failures scoped to a single bibliography entry."""

    def __init__(self, message: str, *, entry_key: str | None = None) -> None:
        if entry_key is not None:
            message = f"entry '{entry_key}': {message}"
        super().__init__(message)
        self.entry_key = entry_key


class NameDecodeError(EntryError):
    """Raised when a name-list field cannot be decoded into persons."""

    def __init__(
        self,
        field_name: str,
        cause: str,
        *,
        entry_key: str | None = None,
    ) -> None:
        super().__init__(
            f"cannot decode name list in field '{field_name}': {cause}",
            entry_key=entry_key,
        )
        self.field_name = field_name
        self.cause = cause


class MissingTitleError(EntryError):
    """Raised when an entry does not declare a title."""

    def __init__(self, entry_key: str) -> None:
        super().__init__("missing required field 'title'", entry_key=entry_key)


class ChunkFormatError(EntryError):
    """Raised when a field value cannot be rendered as text."""

    def __init__(
        self,
        field_name: str,
        cause: str,
        *,
        entry_key: str | None = None,
    ) -> None:
        super().__init__(
            f"cannot format field '{field_name}': {cause}",
            entry_key=entry_key,
        )
        self.field_name = field_name
        self.cause = cause


class OutputEncodingError(CitegeistError):
    """Raised when the normalized bibliography cannot be serialized."""


DecodeError = InputEncodingError
ParseError = BibliographySyntaxError
EncodeError = OutputEncodingError


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


__all__ = [
    "BibliographySyntaxError",
    "ChunkFormatError",
    "CitegeistError",
    "DecodeError",
    "EncodeError",
    "EntryError",
    "InputEncodingError",
    "MissingTitleError",
    "NameDecodeError",
    "OutputEncodingError",
    "ParseError",
    "exception_messages",
]
