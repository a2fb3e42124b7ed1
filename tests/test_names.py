from dataclasses import FrozenInstanceError

import pytest

from citegeist.bibliography import NAME_LIST_FIELDS, PersonRecord, decode_name, decode_name_list
from citegeist.exceptions import NameDecodeError


def test_whitelist_holds_the_known_name_fields() -> None:
    assert isinstance(NAME_LIST_FIELDS, frozenset)
    assert len(NAME_LIST_FIELDS) == 15
    assert {"author", "editor", "editora", "translator", "holder"} <= NAME_LIST_FIELDS
    assert "title" not in NAME_LIST_FIELDS


def test_decode_name_list_preserves_order() -> None:
    people = decode_name_list("Smith, John and Doe, Jane")

    assert people == [
        PersonRecord(family="Smith", given="John"),
        PersonRecord(family="Doe", given="Jane"),
    ]


def test_decode_name_with_prefix() -> None:
    person = decode_name("Ludwig van Beethoven")

    assert person.given == "Ludwig"
    assert person.prefix == "van"
    assert person.family == "Beethoven"
    assert person.suffix == ""


def test_decode_name_with_suffix() -> None:
    person = decode_name("Smith, Jr., John")

    assert person == PersonRecord(family="Smith", given="John", suffix="Jr.")


def test_middle_names_join_given_name() -> None:
    person = decode_name("John Quincy Adams")

    assert person.given == "John Quincy"
    assert person.family == "Adams"


def test_braced_corporate_author_is_a_single_family_name() -> None:
    people = decode_name_list("{Barnes and Noble} and Doe, Jane")

    assert len(people) == 2
    assert people[0].family == "Barnes and Noble"
    assert people[0].given == ""


def test_person_record_serializes_four_string_keys() -> None:
    payload = decode_name("Doe, Jane").to_dict()

    assert payload == {"family": "Doe", "given": "Jane", "prefix": "", "suffix": ""}


def test_person_record_is_immutable() -> None:
    person = PersonRecord(family="Doe")

    with pytest.raises(FrozenInstanceError):
        person.family = "Roe"  # type: ignore[misc]


def test_too_many_commas_is_not_a_name() -> None:
    with pytest.raises(NameDecodeError) as excinfo:
        decode_name_list("Smith, John, Jr., Extra", field_name="editor")

    assert excinfo.value.field_name == "editor"
    assert "too many commas" in str(excinfo.value)


@pytest.mark.parametrize("value", ["and Doe, Jane", "Doe, Jane and and Roe, Rick"])
def test_dangling_connector_is_not_a_name(value: str) -> None:
    with pytest.raises(NameDecodeError):
        decode_name_list(value)


def test_trailing_connector_is_reported() -> None:
    with pytest.raises(NameDecodeError) as excinfo:
        decode_name_list("Doe, Jane and", field_name="editor")

    assert excinfo.value.field_name == "editor"
    assert "dangling 'and'" in str(excinfo.value)


def test_names_starting_with_and_are_accepted() -> None:
    assert decode_name_list("Anderson, Jane") == [PersonRecord(family="Anderson", given="Jane")]
