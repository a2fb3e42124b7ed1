import cbor2
import pytest

from citegeist.bibliography import BibliographyMap, RawEntry, normalize_entry
from citegeist.encoding import decode_bib_map, encode_bib_map
from citegeist.exceptions import EncodeError, OutputEncodingError


def _bib_map() -> BibliographyMap:
    return BibliographyMap(
        [
            normalize_entry(
                RawEntry(
                    entry_type="book",
                    key="knuth1984",
                    fields={"title": "The {TeX}book", "author": "Knuth, Donald E."},
                )
            ),
            normalize_entry(
                RawEntry(entry_type="misc", key="anon", fields={"title": "untitled note"})
            ),
        ]
    )


def _leaves(value):
    if isinstance(value, dict):
        for key, item in value.items():
            yield key
            yield from _leaves(item)
    elif isinstance(value, list):
        for item in value:
            yield from _leaves(item)
    else:
        yield value


def test_encoding_is_deterministic() -> None:
    assert encode_bib_map(_bib_map()) == encode_bib_map(_bib_map())


def test_encoded_map_decodes_to_plain_dict() -> None:
    bib_map = _bib_map()

    decoded = decode_bib_map(encode_bib_map(bib_map))

    assert decoded == bib_map.to_dict()
    assert list(decoded) == ["anon", "knuth1984"]
    assert decoded["knuth1984"]["parsed_names"]["author"] == [
        {"family": "Knuth", "given": "Donald E.", "prefix": "", "suffix": ""}
    ]


def test_every_key_and_leaf_is_a_string() -> None:
    decoded = cbor2.loads(encode_bib_map(_bib_map()))

    assert all(isinstance(leaf, str) for leaf in _leaves(decoded))


def test_unserializable_payload_raises_output_encoding_error() -> None:
    with pytest.raises(OutputEncodingError) as excinfo:
        encode_bib_map({"broken": object()})

    assert "failed to serialize result" in str(excinfo.value)
    assert EncodeError is OutputEncodingError


def test_decode_rejects_non_map_payload() -> None:
    with pytest.raises(OutputEncodingError):
        decode_bib_map(cbor2.dumps(["not", "a", "map"]))


def test_decode_rejects_truncated_payload() -> None:
    with pytest.raises(OutputEncodingError):
        decode_bib_map(encode_bib_map(_bib_map())[:-3])
