"""Turns a raw line of user input into a Command.

The grammar is keyword first. The line is split once on the first space
into ``(keyword, remainder)`` and the keyword picks the sub-grammar used
for the remainder. Every split takes the first occurrence only, so
``deadline a /by b /by 01/01/2024`` yields description ``a`` and date
text ``b /by 01/01/2024``, which is then rejected as an invalid date.
"""

from typing import Callable, Dict, Tuple

from .commands import (
    ByeCommand,
    Command,
    DeadlineCommand,
    DeleteCommand,
    EventCommand,
    FindCommand,
    ListCommand,
    MarkCommand,
    TodoCommand,
    UnmarkCommand,
    UpdateCommand,
)
from .errors import CommandNotRecognizedError, InvalidIndexError, MalformedArgumentsError
from .utils.datetime import parse_date, parse_datetime


DATE_SPECIFIER = "/by"
DATETIME_SPECIFIER = "/at"

USAGE: Dict[str, str] = {
    "todo": "todo <description>",
    "deadline": f"deadline <description> {DATE_SPECIFIER} <dd/mm/yyyy>",
    "event": f"event <description> {DATETIME_SPECIFIER} <dd/mm/yyyy HHmm>",
    "mark": "mark <task number>",
    "unmark": "unmark <task number>",
    "delete": "delete <task number>",
    "find": "find <keyword>",
    "update": "update <task number> <new description>",
    "list": "list",
    "bye": "bye",
}


def split_keyword(line: str) -> Tuple[str, str]:
    """Split a line into its keyword and the stripped remainder."""
    parts = line.strip().split(" ", 1)
    keyword = parts[0]
    remainder = parts[1].strip() if len(parts) > 1 else ""
    return keyword, remainder


def parse_index(text: str, keyword: str) -> int:
    """Convert a 1-based task number into a 0-based index."""
    text = text.strip()
    if not text:
        raise MalformedArgumentsError(keyword, USAGE.get(keyword))
    # plain digits only: int() would also accept "+3", "1_0" or "-2"
    if not text.isdigit():
        raise InvalidIndexError(text)
    try:
        number = int(text)
    except ValueError:
        raise InvalidIndexError(text) from None
    if number < 1:
        raise InvalidIndexError(text)
    return number - 1


def _has_line_break(text: str) -> bool:
    return "\n" in text or "\r" in text


def _require(text: str, keyword: str) -> str:
    if not text or _has_line_break(text):
        raise MalformedArgumentsError(keyword, USAGE[keyword])
    return text


def _split_on_marker(remainder: str, marker: str, keyword: str) -> Tuple[str, str]:
    description, found, when = remainder.partition(marker)
    description = description.strip()
    when = when.strip()
    if not found or not description or not when or _has_line_break(description):
        raise MalformedArgumentsError(keyword, USAGE[keyword])
    return description, when


def _parse_todo(remainder: str) -> Command:
    return TodoCommand(_require(remainder, "todo"))


def _parse_deadline(remainder: str) -> Command:
    description, date_text = _split_on_marker(remainder, DATE_SPECIFIER, "deadline")
    return DeadlineCommand(description, parse_date(date_text))


def _parse_event(remainder: str) -> Command:
    description, datetime_text = _split_on_marker(remainder, DATETIME_SPECIFIER, "event")
    return EventCommand(description, parse_datetime(datetime_text))


def _parse_update(remainder: str) -> Command:
    parts = remainder.split(" ", 1)
    index = parse_index(parts[0], "update")
    description = parts[1].strip() if len(parts) > 1 else ""
    return UpdateCommand(index, _require(description, "update"))


def _parse_find(remainder: str) -> Command:
    return FindCommand(_require(remainder, "find"))


_PARSERS: Dict[str, Callable[[str], Command]] = {
    "bye": lambda _: ByeCommand(),
    "list": lambda _: ListCommand(),
    "mark": lambda rest: MarkCommand(parse_index(rest, "mark")),
    "unmark": lambda rest: UnmarkCommand(parse_index(rest, "unmark")),
    "delete": lambda rest: DeleteCommand(parse_index(rest, "delete")),
    "find": _parse_find,
    "todo": _parse_todo,
    "deadline": _parse_deadline,
    "event": _parse_event,
    "update": _parse_update,
}

KEYWORDS = tuple(_PARSERS)


def parse_command(line: str) -> Command:
    """Parse one line of input into a Command.

    Raises:
        CommandNotRecognizedError: Unknown keyword.
        MalformedArgumentsError: Required argument missing or empty.
        InvalidIndexError: Task number is not a positive whole number.
        InvalidDateFormatError: Date or datetime does not match its pattern.
    """
    keyword, remainder = split_keyword(line)
    parser = _PARSERS.get(keyword)
    if parser is None:
        raise CommandNotRecognizedError(keyword)
    return parser(remainder)
