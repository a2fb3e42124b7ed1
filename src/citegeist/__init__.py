"""Normalize BibLaTeX bibliographies into CBOR maps for document tools."""

from __future__ import annotations

from .bibliography import (
    NAME_LIST_FIELDS,
    BibliographyIssue,
    BibliographyMap,
    NormalizedEntry,
    PersonRecord,
    RawEntry,
    decode_bibliography,
    normalize_entry,
)
from .config import NormalizerSettings
from .encoding import decode_bib_map, encode_bib_map
from .exceptions import (
    BibliographySyntaxError,
    ChunkFormatError,
    CitegeistError,
    EntryError,
    InputEncodingError,
    MissingTitleError,
    NameDecodeError,
    OutputEncodingError,
)
from .pipeline import convert_bibliography
from .plugin import build_bib_map, get_bib_map
from .version import get_version


__version__ = get_version()

__all__ = [
    "NAME_LIST_FIELDS",
    "BibliographyIssue",
    "BibliographyMap",
    "BibliographySyntaxError",
    "ChunkFormatError",
    "CitegeistError",
    "EntryError",
    "InputEncodingError",
    "MissingTitleError",
    "NameDecodeError",
    "NormalizedEntry",
    "NormalizerSettings",
    "OutputEncodingError",
    "PersonRecord",
    "RawEntry",
    "__version__",
    "build_bib_map",
    "convert_bibliography",
    "decode_bib_map",
    "decode_bibliography",
    "encode_bib_map",
    "get_bib_map",
    "normalize_entry",
]
