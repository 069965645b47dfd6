"""Tests for the domain value objects and Person rendering."""

import pytest

from addressbook.domain import Address, Email, IllegalValueError, Name, Person, Phone, Tag
from addressbook.domain.entities import NAME_CONSTRAINTS, PHONE_CONSTRAINTS


def _person(phone_private: bool = False, email_private: bool = False) -> Person:
    return Person(
        name=Name("John Doe"),
        phone=Phone("98765432", phone_private),
        email=Email("johnd@gmail.com", email_private),
        address=Address("311, Clementi Ave 2"),
        tags=(Tag("friends"), Tag("owesMoney")),
    )


def test_name_is_stripped_and_split_into_words():
    name = Name("  John  Doe ")
    assert name.full_name == "John  Doe"
    assert name.words == ["John", "Doe"]


@pytest.mark.parametrize("raw", ["", "   ", "John@Doe", "John_Doe", None])
def test_invalid_name_rejected(raw):
    with pytest.raises(IllegalValueError) as exc:
        Name(raw)
    assert str(exc.value) == NAME_CONSTRAINTS


def test_phone_accepts_digits_and_leading_plus():
    assert Phone("98765432").value == "98765432"
    assert Phone(" +6591234567 ").value == "+6591234567"


@pytest.mark.parametrize("raw", ["", "9876-5432", "abc", "+", "12 34"])
def test_invalid_phone_rejected(raw):
    with pytest.raises(IllegalValueError) as exc:
        Phone(raw)
    assert str(exc.value) == PHONE_CONSTRAINTS


def test_private_flag_not_part_of_equality():
    assert Phone("123", is_private=True) == Phone("123")
    assert Email("a@b.com", is_private=True) == Email("a@b.com")
    assert Address("Here", is_private=True) == Address("Here")


def test_email_and_address_validation():
    assert Email("first.last@example.com").value == "first.last@example.com"
    with pytest.raises(IllegalValueError):
        Email("no-at-sign")
    with pytest.raises(IllegalValueError):
        Email("two@@example.com")
    assert Address("#02-25, any $ format").value == "#02-25, any $ format"
    with pytest.raises(IllegalValueError):
        Address("   ")


def test_tag_validation_and_rendering():
    assert str(Tag("friends")) == "[friends]"
    assert Tag("friends") == Tag(" friends ")
    with pytest.raises(IllegalValueError):
        Tag("best friend")
    with pytest.raises(IllegalValueError):
        Tag("")


def test_person_equality_ignores_tags():
    person = _person()
    same_without_tags = Person(person.name, person.phone, person.email, person.address)
    assert person == same_without_tags
    assert hash(person) == hash(same_without_tags)


def test_person_collapses_duplicate_tags_keeping_order():
    person = Person(
        Name("Amy"),
        Phone("1"),
        Email("a@b.c"),
        Address("x"),
        tags=(Tag("b"), Tag("a"), Tag("b")),
    )
    assert person.tags == (Tag("b"), Tag("a"))


def test_show_all_marks_private_details():
    assert _person(phone_private=True).as_text_show_all() == (
        "John Doe Phone: (private) 98765432 Email: johnd@gmail.com "
        "Address: 311, Clementi Ave 2 Tags: [friends][owesMoney]"
    )


def test_hide_private_omits_private_details():
    person = _person(phone_private=True, email_private=True)
    assert person.as_text_hide_private() == (
        "John Doe Address: 311, Clementi Ave 2 Tags: [friends][owesMoney]"
    )
    assert str(person) == person.as_text_show_all()
