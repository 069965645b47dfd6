"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from addressbook.domain import Person


class DuplicatePersonError(ValueError):
    """The operation would leave two equal persons in the repository."""


class PersonNotFoundError(KeyError):
    """The person to remove or replace is not in the repository."""


class PersonRepository(Protocol):
    """Holds the address book's persons in display order, without duplicates."""

    def contains(self, person: Person) -> bool:
        """Return True if an equal person is stored."""
        ...

    def add(self, person: Person) -> None:
        """Append a person. Raises DuplicatePersonError if an equal one exists."""
        ...

    def remove(self, person: Person) -> None:
        """Remove the equal person. Raises PersonNotFoundError if absent."""
        ...

    def replace(self, target: Person, replacement: Person) -> None:
        """Swap target for replacement in place.

        Raises PersonNotFoundError if target is absent, DuplicatePersonError if
        replacement equals some other stored person.
        """
        ...

    def clear(self) -> None:
        ...

    def list_all(self) -> list[Person]:
        """Return all persons in insertion order."""
        ...
