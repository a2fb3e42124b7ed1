"""CBOR serialization of the collected bibliography."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import cbor2

from .bibliography.collection import BibliographyMap
from .exceptions import OutputEncodingError


def encode_bib_map(bib_map: BibliographyMap | Mapping[str, Any]) -> bytes:
    """Serialize a bibliography map to CBOR bytes.

    Map keys are written in the order of the payload, which `BibliographyMap`
    keeps lexicographic, so identical input yields identical bytes.
    """
    payload = bib_map.to_dict() if isinstance(bib_map, BibliographyMap) else bib_map
    try:
        return cbor2.dumps(payload)
    except (cbor2.CBOREncodeError, TypeError, ValueError) as exc:
        raise OutputEncodingError(f"failed to serialize result: {exc}") from exc


def decode_bib_map(data: bytes) -> dict[str, Any]:
    """Load a CBOR payload produced by `encode_bib_map`."""
    try:
        payload = cbor2.loads(data)
    except (cbor2.CBORDecodeError, ValueError) as exc:
        raise OutputEncodingError(f"failed to decode result: {exc}") from exc
    if not isinstance(payload, dict):
        raise OutputEncodingError(
            f"failed to decode result: expected a map, got {type(payload).__name__}"
        )
    return payload


__all__ = ["decode_bib_map", "encode_bib_map"]
