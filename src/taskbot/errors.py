"""Error taxonomy for taskbot.

Every error a user can trigger derives from ``TaskbotError`` so the session
loop can report it and keep reading input.
"""

from typing import List, Optional


class TaskbotError(Exception):
    """Base class for recoverable taskbot errors."""

    def __init__(self, message: str, suggestions: Optional[List[str]] = None):
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(message)


class CommandNotRecognizedError(TaskbotError):
    """The first word of the input is not a known command keyword."""

    def __init__(self, keyword: str):
        self.keyword = keyword
        super().__init__(
            "I'm sorry, but I don't know what that means :(",
            ["Known commands: todo, deadline, event, list, mark, unmark, "
             "delete, find, update, bye"],
        )


class MalformedArgumentsError(TaskbotError):
    """A required argument is missing or empty."""

    def __init__(self, keyword: str, usage: Optional[str] = None):
        self.keyword = keyword
        self.usage = usage
        super().__init__(
            "Wrong command parameters!",
            [f"Usage: {usage}"] if usage else None,
        )


class InvalidIndexError(TaskbotError):
    """An index argument is not a positive whole number."""

    def __init__(self, value: str):
        self.value = value
        super().__init__("Invalid task index", ["Use the task number shown by 'list'"])


class TaskIndexError(TaskbotError, IndexError):
    """A numeric index lies outside the current task list."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__("Invalid task number.")


class InvalidDateFormatError(TaskbotError, ValueError):
    """A date or datetime argument does not match the expected pattern."""

    def __init__(self, message: str, expected: str, value: str):
        self.expected = expected
        self.value = value
        super().__init__(message)


class TaskValidationError(TaskbotError, ValueError):
    """A semantic rule on a task was violated."""

    def __init__(self, message: str, field_name: str = "description"):
        self.field_name = field_name
        super().__init__(message)


class StorageCorruptError(TaskbotError):
    """A line of the data file could not be turned back into a task."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)


class StorageWriteError(TaskbotError):
    """The data file could not be written."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(
            f"Could not save your tasks to {path}: {reason}",
            ["Check that the data file location is writable"],
        )
