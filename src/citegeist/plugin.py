"""Sandboxed entry point exchanging bytes with the host document tool.

The host hands over the raw contents of a `.bib` file and receives either the
CBOR-encoded bibliography map or a descriptive error string. The function
touches neither the filesystem nor the environment.
"""

from __future__ import annotations

from .config import NormalizerSettings
from .encoding import encode_bib_map
from .exceptions import CitegeistError
from .pipeline import convert_bibliography


def build_bib_map(payload: bytes, settings: NormalizerSettings | None = None) -> bytes:
    """Convert a bibliography payload to CBOR bytes, raising on failure."""
    return encode_bib_map(convert_bibliography(payload, settings))


def get_bib_map(payload: bytes) -> bytes | str:
    """Return the CBOR bibliography map, or an error message on failure."""
    try:
        return build_bib_map(payload)
    except CitegeistError as exc:
        return str(exc)


__all__ = ["build_bib_map", "get_bib_map"]
