"""
Address book core: clean-architecture layout.

- domain: Person and its validated value objects. No outer dependencies.
- application: AddressBook state, commands, parser, ports (PersonRepository).
- infrastructure: adapters (UniquePersonList, phone normalization).
"""

from addressbook.application import (
    AddressBook,
    Command,
    CommandResult,
    DuplicatePersonError,
    EditCommand,
    Parser,
    PersonNotFoundError,
    PersonRepository,
)
from addressbook.domain import Address, Email, IllegalValueError, Name, Person, Phone, Tag
from addressbook.infrastructure import UniquePersonList

__all__ = [
    "Address",
    "AddressBook",
    "Command",
    "CommandResult",
    "DuplicatePersonError",
    "EditCommand",
    "Email",
    "IllegalValueError",
    "Name",
    "Parser",
    "Person",
    "PersonNotFoundError",
    "PersonRepository",
    "Phone",
    "Tag",
    "UniquePersonList",
]
