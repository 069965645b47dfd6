"""Turns a line of user input into a Command. Bad input becomes an IncorrectCommand, never an exception."""

import logging
import re

from addressbook.application.commands import (
    COMMANDS,
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
    all_usages,
)
from addressbook.application.messages import (
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_UNKNOWN_COMMAND,
)
from addressbook.domain import IllegalValueError

logger = logging.getLogger(__name__)

_BASIC_COMMAND_FORMAT = re.compile(r"(?P<word>\S+)(?P<arguments>.*)", re.DOTALL)

# A prefix only counts at the start of a whitespace-delimited token.
# A leading 'p' on a detail prefix (pp/, pe/, pa/) marks the detail private.
_PREFIX = re.compile(r"(?:^|(?<=\s))(pp|pe|pa|p|e|a|t)/")

_PREFIX_FIELDS = {
    "p": ("phone", False),
    "pp": ("phone", True),
    "e": ("email", False),
    "pe": ("email", True),
    "a": ("address", False),
    "pa": ("address", True),
}


class ParseError(ValueError):
    """Arguments do not fit the command's format."""


def _split_fields(arguments: str) -> tuple[str, dict[str, tuple[str, bool]], list[str] | None]:
    """Split arguments into (leading text, {field: (value, is_private)}, tags).

    tags is None when no t/ prefix was given. A detail field given twice is a ParseError.
    """
    parts = _PREFIX.split(arguments)
    leading = parts[0].strip()
    fields: dict[str, tuple[str, bool]] = {}
    tags: list[str] | None = None
    for prefix, value in zip(parts[1::2], parts[2::2]):
        value = value.strip()
        if prefix == "t":
            tags = (tags or []) + [value]
            continue
        field_name, is_private = _PREFIX_FIELDS[prefix]
        if field_name in fields:
            raise ParseError(f"{field_name} given more than once")
        fields[field_name] = (value, is_private)
    return leading, fields, tags


def _invalid_format(usage: str) -> IncorrectCommand:
    return IncorrectCommand(MESSAGE_INVALID_COMMAND_FORMAT.format(usage))


class Parser:
    """Parses user input into commands."""

    def parse_command(self, user_input: str) -> Command:
        match = _BASIC_COMMAND_FORMAT.fullmatch((user_input or "").strip())
        if not match:
            return _invalid_format(HelpCommand.MESSAGE_USAGE)

        command_word = match.group("word").lower()
        arguments = match.group("arguments").strip()
        logger.debug("Parsing command %r with arguments %r", command_word, arguments)

        if command_word == AddCommand.COMMAND_WORD:
            return self._prepare_add(arguments)
        if command_word == EditCommand.COMMAND_WORD:
            return self._prepare_edit(arguments)
        if command_word in (
            DeleteCommand.COMMAND_WORD,
            ViewCommand.COMMAND_WORD,
            ViewAllCommand.COMMAND_WORD,
        ):
            return self._prepare_indexed(COMMANDS[command_word], arguments)
        if command_word == FindCommand.COMMAND_WORD:
            return self._prepare_find(arguments)
        if command_word in (
            ListCommand.COMMAND_WORD,
            ClearCommand.COMMAND_WORD,
            HelpCommand.COMMAND_WORD,
            ExitCommand.COMMAND_WORD,
        ):
            return COMMANDS[command_word]()
        return IncorrectCommand(f"{MESSAGE_UNKNOWN_COMMAND}\n{all_usages()}")

    def _prepare_add(self, arguments: str) -> Command:
        try:
            name, fields, tags = _split_fields(arguments)
        except ParseError:
            return _invalid_format(AddCommand.MESSAGE_USAGE)
        if not name or not {"phone", "email", "address"} <= fields.keys():
            return _invalid_format(AddCommand.MESSAGE_USAGE)
        phone, is_phone_private = fields["phone"]
        email, is_email_private = fields["email"]
        address, is_address_private = fields["address"]
        try:
            return AddCommand(
                name,
                phone,
                is_phone_private,
                email,
                is_email_private,
                address,
                is_address_private,
                tags or (),
            )
        except IllegalValueError as e:
            return IncorrectCommand(str(e))

    def _prepare_edit(self, arguments: str) -> Command:
        index_text, rest = (arguments.split(None, 1) + ["", ""])[:2]
        try:
            target_index = self._parse_index(index_text)
            name, fields, tags = _split_fields(rest)
        except ParseError:
            return _invalid_format(EditCommand.MESSAGE_USAGE)
        phone, is_phone_private = fields.get("phone", (None, False))
        email, is_email_private = fields.get("email", (None, False))
        address, is_address_private = fields.get("address", (None, False))
        try:
            return EditCommand(
                target_index,
                name=name or None,
                phone=phone,
                is_phone_private=is_phone_private,
                email=email,
                is_email_private=is_email_private,
                address=address,
                is_address_private=is_address_private,
                tags=tags,
            )
        except IllegalValueError as e:
            return IncorrectCommand(str(e))

    def _prepare_indexed(self, command_class: type[Command], arguments: str) -> Command:
        try:
            return command_class(self._parse_index(arguments))
        except ParseError:
            return _invalid_format(command_class.MESSAGE_USAGE)

    def _prepare_find(self, arguments: str) -> Command:
        keywords = arguments.split()
        if not keywords:
            return _invalid_format(FindCommand.MESSAGE_USAGE)
        return FindCommand(keywords)

    @staticmethod
    def _parse_index(text: str) -> int:
        text = text.strip()
        if not re.fullmatch(r"-?\d+", text):
            raise ParseError(f"not an index: {text!r}")
        return int(text)
