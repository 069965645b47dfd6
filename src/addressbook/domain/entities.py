"""Domain entities: Person and its validated value objects (Name, Phone, Email, Address, Tag)."""

import re
from dataclasses import dataclass, field

NAME_CONSTRAINTS = "Person names should be spaces or alphanumeric characters"
PHONE_CONSTRAINTS = "Person phone numbers should only contain numbers, optionally prefixed with '+'"
EMAIL_CONSTRAINTS = "Person emails should be 2 alphanumeric/period strings separated by '@'"
ADDRESS_CONSTRAINTS = "Person addresses can be in any format, but cannot be blank"
TAG_CONSTRAINTS = "Tags names should be alphanumeric"

_NAME_PATTERN = re.compile(r"[^\W_]+(?: +[^\W_]+)*")
_PHONE_PATTERN = re.compile(r"\+?\d+")
_EMAIL_PATTERN = re.compile(r"[\w.]+@[\w.]+")
_TAG_PATTERN = re.compile(r"[^\W_]+")

# Prefix shown before a private detail in the show-all rendering.
PRIVATE_MARKER = "(private) "


class IllegalValueError(ValueError):
    """A raw value does not satisfy the constraints of the field it was given to."""


def _clean(raw: str | None) -> str:
    return (raw or "").strip()


@dataclass(frozen=True)
class Name:
    """A person's full name."""

    full_name: str

    def __post_init__(self):
        name = _clean(self.full_name)
        if not _NAME_PATTERN.fullmatch(name):
            raise IllegalValueError(NAME_CONSTRAINTS)
        object.__setattr__(self, "full_name", name)

    @property
    def words(self) -> list[str]:
        return self.full_name.split()

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class Phone:
    """A phone number. The private flag does not take part in equality."""

    value: str
    is_private: bool = field(default=False, compare=False)

    def __post_init__(self):
        value = _clean(self.value)
        if not _PHONE_PATTERN.fullmatch(value):
            raise IllegalValueError(PHONE_CONSTRAINTS)
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    value: str
    is_private: bool = field(default=False, compare=False)

    def __post_init__(self):
        value = _clean(self.value)
        if not _EMAIL_PATTERN.fullmatch(value):
            raise IllegalValueError(EMAIL_CONSTRAINTS)
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    value: str
    is_private: bool = field(default=False, compare=False)

    def __post_init__(self):
        value = _clean(self.value)
        if not value:
            raise IllegalValueError(ADDRESS_CONSTRAINTS)
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Tag:
    """A short label attached to a person. Tags are equal when their names are equal."""

    name: str

    def __post_init__(self):
        name = _clean(self.name)
        if not _TAG_PATTERN.fullmatch(name):
            raise IllegalValueError(TAG_CONSTRAINTS)
        object.__setattr__(self, "name", name)

    def __str__(self) -> str:
        return f"[{self.name}]"


@dataclass(frozen=True)
class Person:
    """
    Represents a contact in the address book.
    A Person is immutable: edits build a new Person and replace the old one.
    Identity is the (name, phone, email, address) tuple; tags are not compared.
    """

    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: tuple[Tag, ...] = field(default=(), compare=False)

    def __post_init__(self):
        # Duplicate tags collapse, first occurrence keeps its position.
        object.__setattr__(self, "tags", tuple(dict.fromkeys(self.tags)))

    def _tags_text(self) -> str:
        return "".join(str(tag) for tag in self.tags)

    def as_text_show_all(self) -> str:
        """Full rendering, private details included and marked."""
        parts = [self.name.full_name]
        for label, detail in (
            ("Phone", self.phone),
            ("Email", self.email),
            ("Address", self.address),
        ):
            marker = PRIVATE_MARKER if detail.is_private else ""
            parts.append(f"{label}: {marker}{detail.value}")
        parts.append(f"Tags: {self._tags_text()}")
        return " ".join(parts)

    def as_text_hide_private(self) -> str:
        """Rendering for listings: private details are left out entirely."""
        parts = [self.name.full_name]
        for label, detail in (
            ("Phone", self.phone),
            ("Email", self.email),
            ("Address", self.address),
        ):
            if not detail.is_private:
                parts.append(f"{label}: {detail.value}")
        parts.append(f"Tags: {self._tags_text()}")
        return " ".join(parts)

    def __str__(self) -> str:
        return self.as_text_show_all()
