"""
Command-line address book: an interactive prompt, or a single command from argv.
Run: python -m addressbook [COMMAND ...] (from repo root, with .env or env vars set).
"""

import logging
import os
import sys
from collections.abc import Callable
from pathlib import Path

from dotenv import load_dotenv

from addressbook.application import AddressBook, CommandResult, Parser
from addressbook.application.messages import MESSAGE_GOODBYE, MESSAGE_WELCOME
from addressbook.domain import Person
from addressbook.infrastructure import UniquePersonList

logger = logging.getLogger(__name__)

# Repo root: from src/addressbook/cli.py go up to repo root.
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent

PROMPT = "addressbook> "


def load_settings() -> dict[str, str | None]:
    """Load .env (repo root first, then cwd) and read the settings this CLI uses."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break
    region = os.environ.get("ADDRESSBOOK_PHONE_REGION", "").strip().upper() or None
    level = os.environ.get("ADDRESSBOOK_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
    return {"phone_region": region, "log_level": level}


def configure_logging(level: str) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, level, logging.WARNING),
        stream=sys.stderr,
    )


def format_listing(persons: tuple[Person, ...]) -> str:
    """Numbered listing with display indexes starting at 1. Private details are hidden."""
    return "\n".join(
        f"{i}. {person.as_text_hide_private()}" for i, person in enumerate(persons, start=1)
    )


class AddressBookCLI:
    """Keeps the address book and the last shown listing between commands."""

    def __init__(
        self,
        address_book: AddressBook,
        parser: Parser | None = None,
        output: Callable[[str], None] = print,
    ) -> None:
        self.address_book = address_book
        self.parser = parser or Parser()
        self._output = output
        self.last_shown_list: tuple[Person, ...] = tuple(address_book.all_persons())

    def execute(self, user_input: str) -> CommandResult:
        """Parse and run one line, print its feedback, and remember any listing it shows."""
        command = self.parser.parse_command(user_input)
        result = command.execute(self.address_book, self.last_shown_list)
        self._output(result.feedback_to_user)
        if result.relevant_persons is not None:
            self.last_shown_list = result.relevant_persons
            if result.relevant_persons:
                self._output(format_listing(result.relevant_persons))
        return result

    def run_interactive(self, read_line: Callable[[str], str] = input) -> int:
        self._output(MESSAGE_WELCOME)
        while True:
            user_input = ""
            try:
                user_input = read_line(PROMPT).strip()
                if not user_input:
                    continue
                result = self.execute(user_input)
                if result.is_exit:
                    break
            except (EOFError, KeyboardInterrupt):
                self._output("")
                break
            except Exception as e:
                logger.exception("Unexpected error while running %r", user_input)
                self._output(f"Unexpected error: {e}")
        self._output(MESSAGE_GOODBYE)
        return 0

    def run_command(self, argv: list[str]) -> int:
        """Run the command formed by argv once. Returns the process exit code."""
        self.execute(" ".join(argv))
        return 0


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()
    configure_logging(settings["log_level"])
    argv = sys.argv[1:] if argv is None else argv
    repository = UniquePersonList(phone_region=settings["phone_region"])
    cli = AddressBookCLI(AddressBook(repository))
    logger.info("Address book started (phone region: %s)", settings["phone_region"])
    if argv:
        return cli.run_command(argv)
    return cli.run_interactive()
