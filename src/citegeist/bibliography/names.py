"""Name-list decoding for person fields."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict, dataclass

from pybtex.bibtex.utils import split_name_list, split_tex_string
from pybtex.database import Person
from pybtex.exceptions import PybtexError

from ..exceptions import ChunkFormatError, NameDecodeError
from .formatting import format_verbatim


NAME_LIST_FIELDS: frozenset[str] = frozenset(
    {
        "afterword",
        "annotator",
        "author",
        "bookauthor",
        "commentator",
        "editor",
        "editora",
        "editorb",
        "editorc",
        "foreword",
        "holder",
        "introduction",
        "shortauthor",
        "shorteditor",
        "translator",
    }
)

# "Family, Jr, Given" is the longest form BibTeX accepts.
_MAX_NAME_PARTS = 3
_CONNECTOR = "and"


@dataclass(frozen=True, slots=True)
class PersonRecord:
    """A decoded person name."""

    family: str = ""
    given: str = ""
    prefix: str = ""
    suffix: str = ""

    @classmethod
    def from_person(cls, person: Person, *, field_name: str) -> PersonRecord:
        return cls(
            family=_join_parts(person.last_names, field_name),
            given=_join_parts([*person.first_names, *person.middle_names], field_name),
            prefix=_join_parts(person.prelast_names, field_name),
            suffix=_join_parts(person.lineage_names, field_name),
        )

    def is_empty(self) -> bool:
        return not (self.family or self.given or self.prefix or self.suffix)

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def _join_parts(parts: Iterable[str], field_name: str) -> str:
    rendered = (format_verbatim(part, field_name=field_name) for part in parts)
    return " ".join(part for part in rendered if part)


def decode_name(name: str, *, field_name: str = "author") -> PersonRecord:
    """Decode a single BibTeX name into a `PersonRecord`."""
    if len(split_tex_string(name, ",")) > _MAX_NAME_PARTS:
        raise NameDecodeError(field_name, f"too many commas in {name!r}")
    words = split_tex_string(name)
    if words and _CONNECTOR in (words[0].lower(), words[-1].lower()):
        raise NameDecodeError(field_name, f"dangling 'and' in {name!r}")
    try:
        person = Person(name)
        record = PersonRecord.from_person(person, field_name=field_name)
    except PybtexError as exc:
        raise NameDecodeError(field_name, str(exc)) from exc
    except ChunkFormatError as exc:
        raise NameDecodeError(field_name, exc.cause) from exc
    if record.is_empty():
        raise NameDecodeError(field_name, f"empty name in {name!r}")
    return record


def decode_name_list(value: str, *, field_name: str = "author") -> list[PersonRecord]:
    """Split a name-list value on ``and`` and decode every name in order."""
    return [decode_name(name, field_name=field_name) for name in split_name_list(value)]


__all__ = [
    "NAME_LIST_FIELDS",
    "PersonRecord",
    "decode_name",
    "decode_name_list",
]
