import textwrap

import cbor2
import pytest

from citegeist import build_bib_map, get_bib_map
from citegeist.exceptions import InputEncodingError


EXAMPLE = textwrap.dedent(
    """
    @article{smith2020,
        author = {Smith, John and Doe, Jane},
        title = {a study of things},
    }
    """
).encode("utf-8")


def test_get_bib_map_returns_cbor_map() -> None:
    result = get_bib_map(EXAMPLE)

    assert isinstance(result, bytes)
    payload = cbor2.loads(result)
    assert payload == {
        "smith2020": {
            "entry_key": "smith2020",
            "entry_type": "article",
            "fields": {
                "author": "Smith, John and Doe, Jane",
                "title": "A study of things.",
            },
            "parsed_names": {
                "author": [
                    {"family": "Smith", "given": "John", "prefix": "", "suffix": ""},
                    {"family": "Doe", "given": "Jane", "prefix": "", "suffix": ""},
                ]
            },
        }
    }


def test_get_bib_map_is_deterministic() -> None:
    assert get_bib_map(EXAMPLE) == get_bib_map(EXAMPLE)


def test_get_bib_map_reports_invalid_utf8_as_message() -> None:
    result = get_bib_map(b"@misc{x, title = {\xc3\x28}}")

    assert isinstance(result, str)
    assert result.startswith("invalid UTF-8 in bibliography")


def test_get_bib_map_reports_syntax_errors_as_message() -> None:
    result = get_bib_map(b"@article{open, title = {never closed")

    assert isinstance(result, str)
    assert result.startswith("failed to parse bibliography")


def test_get_bib_map_reports_name_errors_with_entry_and_field() -> None:
    result = get_bib_map(b"@book{prose, title = {T}, author = {a, b, c, d}}")

    assert isinstance(result, str)
    assert "prose" in result
    assert "author" in result


def test_build_bib_map_raises_instead_of_returning_messages() -> None:
    with pytest.raises(InputEncodingError):
        build_bib_map(b"\xff")


def test_get_bib_map_keeps_url_and_doi_literal() -> None:
    result = get_bib_map(
        b"@misc{web, title={Page}, url={https://example.org/~jdoe/a%20b}, doi={10.1000/100%25}}"
    )

    fields = cbor2.loads(result)["web"]["fields"]
    assert fields["url"] == "https://example.org/~jdoe/a%20b"
    assert fields["doi"] == "10.1000/100%25"
