"""taskbot - a line-oriented task manager for the terminal."""

__version__ = "0.1.0"

from .task import Task, Todo, Deadline, Event, TaskType
from .task_list import TaskList
from .parser import parse_command
from .storage import StorageAdapter, FileStorage, TaskRecordFormat
from .session import Session
from .errors import (
    TaskbotError,
    CommandNotRecognizedError,
    MalformedArgumentsError,
    InvalidIndexError,
    TaskIndexError,
    InvalidDateFormatError,
    TaskValidationError,
    StorageCorruptError,
    StorageWriteError,
)

__all__ = [
    "Task",
    "Todo",
    "Deadline",
    "Event",
    "TaskType",
    "TaskList",
    "parse_command",
    "StorageAdapter",
    "FileStorage",
    "TaskRecordFormat",
    "Session",
    "TaskbotError",
    "CommandNotRecognizedError",
    "MalformedArgumentsError",
    "InvalidIndexError",
    "TaskIndexError",
    "InvalidDateFormatError",
    "TaskValidationError",
    "StorageCorruptError",
    "StorageWriteError",
    "__version__",
]
