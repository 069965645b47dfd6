"""Unit tests for EditCommand. In-memory address book, listing passed in directly."""

import pytest

from addressbook.application import AddressBook, DeleteCommand, EditCommand
from addressbook.application.messages import (
    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
    MESSAGE_PERSON_NOT_IN_ADDRESSBOOK,
)
from addressbook.domain import Address, Email, IllegalValueError, Name, Person, Phone, Tag
from addressbook.infrastructure import UniquePersonList


def _person(name: str, phone: str, tags: tuple[str, ...] = ()) -> Person:
    return Person(
        name=Name(name),
        phone=Phone(phone),
        email=Email(f"{name.split()[0].lower()}@example.com"),
        address=Address("Blk 30 Geylang Street 29, #06-40"),
        tags=tuple(Tag(t) for t in tags),
    )


def _book(size: int = 3) -> AddressBook:
    samples = [
        _person("Alice Pauline", "85355255", ("friends",)),
        _person("Benson Meier", "98765432", ("owesMoney", "friends")),
        _person("Carl Kurz", "95352563"),
    ]
    return AddressBook(UniquePersonList(samples[:size]))


def _execute(book: AddressBook, command: EditCommand):
    return command.execute(book, tuple(book.all_persons()))


def test_edit_all_fields_none_leaves_person_unchanged() -> None:
    book = _book()
    before = book.all_persons()[1]
    result = _execute(book, EditCommand(2))
    after = book.all_persons()[1]
    assert result.feedback_to_user == EditCommand.MESSAGE_SUCCESS.format(before)
    assert after == before
    assert after.tags == before.tags
    assert after.phone.is_private == before.phone.is_private


def test_edit_changes_only_given_fields() -> None:
    book = _book()
    before = book.all_persons()[0]
    result = _execute(book, EditCommand(1, phone="91234567", email="ap@example.com"))
    after = book.all_persons()[0]
    assert after.name == before.name
    assert after.address == before.address
    assert after.tags == before.tags
    assert after.phone.value == "91234567"
    assert after.email.value == "ap@example.com"
    assert result.feedback_to_user == f"Edited person to: {after}"
    assert result.relevant_persons is None


def test_edit_keeps_position_in_list() -> None:
    book = _book()
    _execute(book, EditCommand(2, name="Benson Mayer"))
    names = [p.name.full_name for p in book.all_persons()]
    assert names == ["Alice Pauline", "Benson Mayer", "Carl Kurz"]


@pytest.mark.parametrize("size", [0, 1, 2, 3])
def test_edit_out_of_range_index_is_invalid_for_any_list_size(size: int) -> None:
    book = _book(size)
    before = book.all_persons()
    for index in (0, -1, size + 1, size + 10):
        result = _execute(book, EditCommand(index, name="Nobody"))
        assert result.feedback_to_user == MESSAGE_INVALID_PERSON_DISPLAYED_INDEX
    assert book.all_persons() == before


def test_edit_to_match_other_person_reports_duplicate() -> None:
    book = _book()
    carl = book.all_persons()[2]
    result = _execute(
        book,
        EditCommand(
            1,
            name=carl.name.full_name,
            phone=carl.phone.value,
            email=carl.email.value,
            address=carl.address.value,
        ),
    )
    assert result.feedback_to_user == EditCommand.MESSAGE_DUPLICATE_PERSON
    assert book.all_persons()[0].name.full_name == "Alice Pauline"


def test_edit_tags_fully_replaces_tag_set() -> None:
    book = _book()
    _execute(book, EditCommand(2, tags=["colleagues"]))
    assert book.all_persons()[1].tags == (Tag("colleagues"),)


def test_edit_with_empty_tag_collection_removes_all_tags() -> None:
    book = _book()
    _execute(book, EditCommand(1, tags=[]))
    assert book.all_persons()[0].tags == ()


def test_edit_new_tags_join_master_tag_list() -> None:
    book = _book()
    _execute(book, EditCommand(3, tags=["gym"]))
    assert Tag("gym") in book.tags


def test_edit_private_flags() -> None:
    book = _book()
    _execute(book, EditCommand(1, phone="85355255", is_phone_private=True))
    alice = book.all_persons()[0]
    assert alice.phone.is_private
    assert "Phone: (private) 85355255" in alice.as_text_show_all()
    assert "85355255" not in alice.as_text_hide_private()


def test_edit_through_stale_listing_reports_not_found() -> None:
    book = _book()
    listing = tuple(book.all_persons())
    DeleteCommand(1).execute(book, listing)
    result = EditCommand(1, name="Ghost").execute(book, listing)
    assert result.feedback_to_user == MESSAGE_PERSON_NOT_IN_ADDRESSBOOK
    assert len(book.all_persons()) == 2


def test_edit_invalid_values_rejected_on_construction() -> None:
    with pytest.raises(IllegalValueError):
        EditCommand(1, phone="not-a-phone")
    with pytest.raises(IllegalValueError):
        EditCommand(1, tags=["two words"])
    with pytest.raises(IllegalValueError):
        EditCommand(1, name="$$$")
