"""Result type returned by every command."""

from dataclasses import dataclass

from addressbook.domain import Person


@dataclass(frozen=True)
class CommandResult:
    """Feedback for the user, plus the persons to display when the command produced a listing.

    relevant_persons is None when the command leaves the current listing as it was.
    """

    feedback_to_user: str
    relevant_persons: tuple[Person, ...] | None = None
    is_exit: bool = False
