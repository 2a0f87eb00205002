"""Task data model for taskbot."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from .errors import TaskValidationError
from .utils.datetime import (
    format_date_to_print,
    format_date_to_store,
    format_datetime_to_print,
    format_datetime_to_store,
)


RECORD_SEPARATOR = " | "


def _validate_description(text: str, empty_message: str):
    if not text or not text.strip():
        raise TaskValidationError(empty_message)
    # one task per record line
    if "\n" in text or "\r" in text:
        raise TaskValidationError("A task description cannot span several lines.")


class TaskType(Enum):
    """Closed set of task variants, keyed by their record tag."""
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


class DoneMarker(Enum):
    """Completion markers written to the data file."""
    DONE = "O"
    NOT_DONE = "X"

    @classmethod
    def for_state(cls, is_done: bool) -> "DoneMarker":
        return cls.DONE if is_done else cls.NOT_DONE


@dataclass
class Task(ABC):
    """Common behaviour shared by every task variant.

    Concrete variants declare ``is_done`` after their own fields so the
    temporal field can stay a required positional argument.
    """

    description: str

    task_type = None  # bound by each variant

    def __post_init__(self):
        _validate_description(self.description, "The description of a task cannot be empty.")

    def mark_done(self):
        """Mark the task as done."""
        self.is_done = True

    def mark_undone(self):
        """Mark the task as not done."""
        self.is_done = False

    def update_description(self, new_text: str):
        """Replace the description in place."""
        _validate_description(new_text, "The new description cannot be empty.")
        self.description = new_text

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def to_display_string(self) -> str:
        """Human readable line, e.g. ``[T][X] read book``."""
        return f"[{self.task_type.value}][{self.status_icon}] {self.description}{self._display_suffix()}"

    def to_record_string(self) -> str:
        """Data file line, e.g. ``T | O | read book``."""
        fields = [
            self.task_type.value,
            DoneMarker.for_state(self.is_done).value,
            self.description,
        ]
        fields.extend(self._record_extra_fields())
        return RECORD_SEPARATOR.join(fields)

    @abstractmethod
    def _display_suffix(self) -> str:
        ...

    @abstractmethod
    def _record_extra_fields(self) -> list:
        ...

    def __str__(self) -> str:
        return self.to_display_string()


@dataclass
class Todo(Task):
    """A task without any date attached."""

    is_done: bool = False

    task_type = TaskType.TODO

    def _display_suffix(self) -> str:
        return ""

    def _record_extra_fields(self) -> list:
        return []


@dataclass
class Deadline(Task):
    """A task that has to be done by a given date."""

    due_date: date
    is_done: bool = False

    task_type = TaskType.DEADLINE

    def _display_suffix(self) -> str:
        return f" (by: {format_date_to_print(self.due_date)})"

    def _record_extra_fields(self) -> list:
        return [format_date_to_store(self.due_date)]


@dataclass
class Event(Task):
    """A task that happens at a given date and time."""

    due_datetime: datetime
    is_done: bool = False

    task_type = TaskType.EVENT

    def _display_suffix(self) -> str:
        return f" (at: {format_datetime_to_print(self.due_datetime)})"

    def _record_extra_fields(self) -> list:
        return [format_datetime_to_store(self.due_datetime)]
