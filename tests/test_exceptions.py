from citegeist.exceptions import (
    BibliographySyntaxError,
    ChunkFormatError,
    CitegeistError,
    EntryError,
    MissingTitleError,
    NameDecodeError,
    exception_messages,
)


def test_entry_errors_share_the_hierarchy() -> None:
    for error in (
        NameDecodeError("author", "bad", entry_key="k"),
        MissingTitleError("k"),
        ChunkFormatError("note", "bad", entry_key="k"),
    ):
        assert isinstance(error, EntryError)
        assert isinstance(error, CitegeistError)
        assert error.entry_key == "k"
        assert str(error).startswith("entry 'k': ")


def test_entry_error_without_key_has_plain_message() -> None:
    error = NameDecodeError("editor", "too many commas")

    assert error.entry_key is None
    assert str(error) == "cannot decode name list in field 'editor': too many commas"


def test_exception_messages_follow_cause_chain() -> None:
    try:
        try:
            raise ValueError("root cause")
        except ValueError as exc:
            raise BibliographySyntaxError("failed to parse bibliography") from exc
    except BibliographySyntaxError as exc:
        error = exc

    assert exception_messages(error) == ["failed to parse bibliography", "root cause"]
