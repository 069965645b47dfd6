"""Application layer: address book state, commands, parser and ports. Depends only on domain."""

from addressbook.application.address_book import AddressBook, UniqueTagList
from addressbook.application.commands import (
    AddCommand,
    ClearCommand,
    Command,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    IncorrectCommand,
    ListCommand,
    ViewAllCommand,
    ViewCommand,
)
from addressbook.application.dto import CommandResult
from addressbook.application.parser import Parser
from addressbook.application.ports import (
    DuplicatePersonError,
    PersonNotFoundError,
    PersonRepository,
)

__all__ = [
    "AddCommand",
    "AddressBook",
    "ClearCommand",
    "Command",
    "CommandResult",
    "DeleteCommand",
    "DuplicatePersonError",
    "EditCommand",
    "ExitCommand",
    "FindCommand",
    "HelpCommand",
    "IncorrectCommand",
    "ListCommand",
    "Parser",
    "PersonNotFoundError",
    "PersonRepository",
    "UniqueTagList",
    "ViewAllCommand",
    "ViewCommand",
]
