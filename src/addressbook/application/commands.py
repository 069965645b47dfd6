"""
Commands: one class per user-invoked operation on the address book.

Every command follows the same shape: validate its arguments when built,
locate the target by display index, build or mutate, then map failures to
a CommandResult message. Expected failures never escape execute().
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from addressbook.application.address_book import AddressBook
from addressbook.application.dto import CommandResult
from addressbook.application.messages import (
    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
    MESSAGE_PERSON_NOT_IN_ADDRESSBOOK,
    MESSAGE_PERSONS_LISTED_OVERVIEW,
)
from addressbook.application.ports import DuplicatePersonError, PersonNotFoundError
from addressbook.domain import Address, Email, Name, Person, Phone, Tag

logger = logging.getLogger(__name__)

# Display indexes shown to the user start at 1.
DISPLAYED_INDEX_OFFSET = 1


class Command(ABC):
    """Base class for all commands. Index-based commands pass target_index."""

    COMMAND_WORD = ""
    MESSAGE_USAGE = ""

    def __init__(self, target_index: int | None = None) -> None:
        self.target_index = target_index

    @abstractmethod
    def execute(
        self, address_book: AddressBook, relevant_persons: Sequence[Person]
    ) -> CommandResult:
        """Run against the address book and the listing the user last saw."""

    def _target_person(self, relevant_persons: Sequence[Person]) -> Person:
        """Return the person at target_index in the last listing. Raises IndexError if out of range."""
        if self.target_index is None:
            raise IndexError("no target index")
        position = self.target_index - DISPLAYED_INDEX_OFFSET
        if not 0 <= position < len(relevant_persons):
            raise IndexError(self.target_index)
        return relevant_persons[position]


def _build_tags(raw_tags: Iterable[str]) -> tuple[Tag, ...]:
    return tuple(Tag(name) for name in raw_tags)


class AddCommand(Command):
    COMMAND_WORD = "add"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds a person to the address book. "
        "Contact details can be marked private by prepending 'p' to the prefix.\n\t"
        "Parameters: NAME [p]p/PHONE [p]e/EMAIL [p]a/ADDRESS  [t/TAG]...\n\t"
        f"Example: {COMMAND_WORD} John Doe p/98765432 e/johnd@gmail.com "
        "a/311, Clementi Ave 2, #02-25 t/friends t/owesMoney"
    )
    MESSAGE_SUCCESS = "New person added: {}"
    MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book"

    def __init__(
        self,
        name: str,
        phone: str,
        is_phone_private: bool,
        email: str,
        is_email_private: bool,
        address: str,
        is_address_private: bool,
        tags: Iterable[str] = (),
    ) -> None:
        """Build the person to add from raw values. Raises IllegalValueError if any is invalid."""
        super().__init__()
        self.to_add = Person(
            name=Name(name),
            phone=Phone(phone, is_phone_private),
            email=Email(email, is_email_private),
            address=Address(address, is_address_private),
            tags=_build_tags(tags),
        )

    def execute(self, address_book, relevant_persons):
        try:
            address_book.add_person(self.to_add)
        except DuplicatePersonError:
            logger.warning("Rejected duplicate add: %s", self.to_add.name)
            return CommandResult(self.MESSAGE_DUPLICATE_PERSON)
        logger.info("Added person: %s", self.to_add.name)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.to_add))


class EditCommand(Command):
    """Edits the person at a display index. Fields left as None keep their current value."""

    COMMAND_WORD = "edit"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}:\n"
        "Edits the person identified by the index number used in the last person listing. "
        "Contact details can be marked private by prepending 'p' to the prefix.\n\t"
        "Details that are not provided are not changed.\n\t"
        "Parameters: INDEX [NAME] [[p]p/PHONE] [[p]e/EMAIL] [[p]a/ADDRESS]  [[t/TAG]...]\n\t"
        f"Example: {COMMAND_WORD} 1 John Doe p/98765432 e/johnd@gmail.com "
        "a/311, Clementi Ave 2, #02-25 t/friends t/owesMoney"
    )
    MESSAGE_SUCCESS = "Edited person to: {}"
    MESSAGE_DUPLICATE_PERSON = "The edited person already exists in the address book"

    def __init__(
        self,
        target_index: int,
        name: str | None = None,
        phone: str | None = None,
        is_phone_private: bool = False,
        email: str | None = None,
        is_email_private: bool = False,
        address: str | None = None,
        is_address_private: bool = False,
        tags: Iterable[str] | None = None,
    ) -> None:
        """
        Validate the new values up front. A None value means "keep the existing one";
        a tag collection, when given, replaces the person's tags entirely.

        Raises:
            IllegalValueError: If a value that is not None is invalid
        """
        super().__init__(target_index)
        self.new_name = Name(name) if name is not None else None
        self.new_phone = Phone(phone, is_phone_private) if phone is not None else None
        self.new_email = Email(email, is_email_private) if email is not None else None
        self.new_address = (
            Address(address, is_address_private) if address is not None else None
        )
        self.new_tags = _build_tags(tags) if tags is not None else None

    def _merge(self, target: Person) -> Person:
        return Person(
            name=self.new_name if self.new_name is not None else target.name,
            phone=self.new_phone if self.new_phone is not None else target.phone,
            email=self.new_email if self.new_email is not None else target.email,
            address=self.new_address if self.new_address is not None else target.address,
            tags=self.new_tags if self.new_tags is not None else target.tags,
        )

    def execute(self, address_book, relevant_persons):
        try:
            target = self._target_person(relevant_persons)
            replacement = self._merge(target)
            address_book.replace_person(target, replacement)
        except IndexError:
            logger.warning("Edit rejected: invalid index %s", self.target_index)
            return CommandResult(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
        except DuplicatePersonError:
            logger.warning("Edit rejected: duplicate of an existing person")
            return CommandResult(self.MESSAGE_DUPLICATE_PERSON)
        except PersonNotFoundError:
            logger.warning("Edit rejected: person at index %s no longer in book", self.target_index)
            return CommandResult(MESSAGE_PERSON_NOT_IN_ADDRESSBOOK)
        logger.info("Edited person at index %s", self.target_index)
        return CommandResult(self.MESSAGE_SUCCESS.format(replacement))


class DeleteCommand(Command):
    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Deletes the person identified by the index number used "
        "in the last person listing.\n\t"
        "Parameters: INDEX\n\t"
        f"Example: {COMMAND_WORD} 1"
    )
    MESSAGE_SUCCESS = "Deleted Person: {}"

    def execute(self, address_book, relevant_persons):
        try:
            target = self._target_person(relevant_persons)
            address_book.remove_person(target)
        except IndexError:
            return CommandResult(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
        except PersonNotFoundError:
            return CommandResult(MESSAGE_PERSON_NOT_IN_ADDRESSBOOK)
        logger.info("Deleted person: %s", target.name)
        return CommandResult(self.MESSAGE_SUCCESS.format(target))


class FindCommand(Command):
    """Finds persons whose name contains any of the keywords as a whole word (case-sensitive)."""

    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Finds all persons whose names contain any of "
        "the specified keywords and displays them as a list with index numbers.\n\t"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n\t"
        f"Example: {COMMAND_WORD} alice bob charlie"
    )

    def __init__(self, keywords: Iterable[str]) -> None:
        super().__init__()
        self.keywords = frozenset(keywords)

    def execute(self, address_book, relevant_persons):
        found = tuple(
            person
            for person in address_book.all_persons()
            if not self.keywords.isdisjoint(person.name.words)
        )
        return CommandResult(
            MESSAGE_PERSONS_LISTED_OVERVIEW.format(len(found)), relevant_persons=found
        )


class ListCommand(Command):
    COMMAND_WORD = "list"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Displays all persons in the address book as a list with index numbers.\n\t"
        f"Example: {COMMAND_WORD}"
    )

    def execute(self, address_book, relevant_persons):
        persons = tuple(address_book.all_persons())
        return CommandResult(
            MESSAGE_PERSONS_LISTED_OVERVIEW.format(len(persons)), relevant_persons=persons
        )


class ViewCommand(Command):
    """Shows the non-private details of the person at a display index."""

    COMMAND_WORD = "view"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Shows the non-private details of the person "
        "identified by the index number in the last shown person listing.\n\t"
        "Parameters: INDEX\n\t"
        f"Example: {COMMAND_WORD} 1"
    )
    MESSAGE_VIEW_PERSON_DETAILS = "Viewing person: {}"

    def _render(self, person: Person) -> str:
        return person.as_text_hide_private()

    def execute(self, address_book, relevant_persons):
        try:
            target = self._target_person(relevant_persons)
        except IndexError:
            return CommandResult(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
        if not address_book.contains_person(target):
            return CommandResult(MESSAGE_PERSON_NOT_IN_ADDRESSBOOK)
        return CommandResult(self.MESSAGE_VIEW_PERSON_DETAILS.format(self._render(target)))


class ViewAllCommand(ViewCommand):
    """Shows every detail, private ones included."""

    COMMAND_WORD = "viewall"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Views all details of the person identified "
        "by the index number in the last shown person listing.\n\t"
        "Parameters: INDEX\n\t"
        f"Example: {COMMAND_WORD} 1"
    )

    def _render(self, person: Person) -> str:
        return person.as_text_show_all()


class ClearCommand(Command):
    COMMAND_WORD = "clear"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Clears address book permanently.\n\t"
        f"Example: {COMMAND_WORD}"
    )
    MESSAGE_SUCCESS = "Address book has been cleared!"

    def execute(self, address_book, relevant_persons):
        address_book.clear()
        logger.info("Address book cleared")
        return CommandResult(self.MESSAGE_SUCCESS)


class ExitCommand(Command):
    COMMAND_WORD = "exit"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Exits the program.\n\t"
        f"Example: {COMMAND_WORD}"
    )
    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting Address Book as requested ..."

    def execute(self, address_book, relevant_persons):
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, is_exit=True)


class HelpCommand(Command):
    COMMAND_WORD = "help"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Shows program usage instructions.\n\t"
        f"Example: {COMMAND_WORD}"
    )

    def execute(self, address_book, relevant_persons):
        return CommandResult(all_usages())


class IncorrectCommand(Command):
    """Stands in for input that could not be parsed; executing it only reports why."""

    def __init__(self, feedback_to_user: str) -> None:
        super().__init__()
        self.feedback_to_user = feedback_to_user

    def execute(self, address_book, relevant_persons):
        return CommandResult(self.feedback_to_user)


# Command word -> class, in the order help lists them.
COMMANDS: dict[str, type[Command]] = {
    cls.COMMAND_WORD: cls
    for cls in (
        AddCommand,
        DeleteCommand,
        EditCommand,
        ClearCommand,
        FindCommand,
        ListCommand,
        ViewCommand,
        ViewAllCommand,
        HelpCommand,
        ExitCommand,
    )
}


def all_usages() -> str:
    return "\n".join(cls.MESSAGE_USAGE for cls in COMMANDS.values())
