"""Convert raw bibliography entries into normalized records.

Each entry is normalized on its own, so the work can be spread across threads.
The steps run in a fixed order:

1. whitelisted name-list fields are decoded into `PersonRecord` lists;
2. every field, the title included, is copied with the verbatim rendering,
   or kept character for character when it is one of `VERBATIM_FIELDS`;
3. the title is rendered in sentence case and written last, replacing the
   verbatim copy.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ..config import MissingTitlePolicy
from ..exceptions import ChunkFormatError, MissingTitleError, NameDecodeError
from .formatting import format_field, format_sentence
from .names import NAME_LIST_FIELDS, PersonRecord, decode_name_list
from .parsing import RawEntry


TITLE_FIELD = "title"


@dataclass(frozen=True, slots=True)
class NormalizedEntry:
    """Serializable view of a bibliography entry."""

    entry_type: str
    entry_key: str
    fields: Mapping[str, str] = field(default_factory=dict)
    parsed_names: Mapping[str, tuple[PersonRecord, ...]] = field(default_factory=dict)

    @property
    def title(self) -> str:
        return self.fields.get(TITLE_FIELD, "")

    def to_dict(self) -> dict[str, Any]:
        """Return plain nested dictionaries with keys in lexicographic order."""
        return {
            "entry_key": self.entry_key,
            "entry_type": self.entry_type,
            "fields": {name: self.fields[name] for name in sorted(self.fields)},
            "parsed_names": {
                name: [person.to_dict() for person in self.parsed_names[name]]
                for name in sorted(self.parsed_names)
            },
        }


def _decode_names(entry: RawEntry) -> dict[str, tuple[PersonRecord, ...]]:
    parsed: dict[str, tuple[PersonRecord, ...]] = {}
    for field_name in sorted(NAME_LIST_FIELDS):
        value = entry.fields.get(field_name)
        if value is None:
            continue
        try:
            parsed[field_name] = tuple(decode_name_list(value, field_name=field_name))
        except NameDecodeError as exc:
            raise NameDecodeError(field_name, exc.cause, entry_key=entry.key) from exc
    return parsed


def _copy_fields(entry: RawEntry) -> dict[str, str]:
    fields: dict[str, str] = {}
    for field_name, value in entry.fields.items():
        try:
            fields[field_name] = format_field(value, field_name=field_name)
        except ChunkFormatError as exc:
            raise ChunkFormatError(field_name, exc.cause, entry_key=entry.key) from exc
    return fields


def _format_title(entry: RawEntry, missing_title: MissingTitlePolicy) -> str:
    value = entry.fields.get(TITLE_FIELD)
    if value is None:
        if missing_title == "empty":
            return ""
        raise MissingTitleError(entry.key)
    try:
        return format_sentence(value, field_name=TITLE_FIELD)
    except ChunkFormatError as exc:
        raise ChunkFormatError(TITLE_FIELD, exc.cause, entry_key=entry.key) from exc


def normalize_entry(
    entry: RawEntry,
    *,
    missing_title: MissingTitlePolicy = "error",
) -> NormalizedEntry:
    """Build the normalized record for one raw entry.

    Raises:
        NameDecodeError: a name-list field does not hold names.
        MissingTitleError: the entry has no title and `missing_title` is "error".
        ChunkFormatError: a field value cannot be rendered as text.
    """
    parsed_names = _decode_names(entry)
    fields = _copy_fields(entry)
    fields[TITLE_FIELD] = _format_title(entry, missing_title)
    return NormalizedEntry(
        entry_type=entry.entry_type,
        entry_key=entry.key,
        fields=MappingProxyType(fields),
        parsed_names=MappingProxyType(parsed_names),
    )


__all__ = ["TITLE_FIELD", "NormalizedEntry", "normalize_entry"]
