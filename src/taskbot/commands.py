"""Executable commands produced by the parser.

Each command is a small frozen dataclass with a single ``execute`` method.
Preconditions are checked before anything is mutated or written, so a
failing command leaves both the list and the data file untouched.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime

from . import ui
from .storage import StorageAdapter
from .task import Deadline, Event, Task, Todo
from .task_list import TaskList

logger = logging.getLogger(__name__)


class Command(ABC):
    """A parsed line of user input, executed exactly once."""

    @abstractmethod
    def execute(self, task_list: TaskList, storage: StorageAdapter) -> str:
        """Run the command and return the message to display."""

    @property
    def is_exit(self) -> bool:
        return False


class _AddCommand(Command):
    """Shared behaviour of commands that append a new task."""

    @abstractmethod
    def build_task(self) -> Task:
        """Create the task this command adds."""

    def execute(self, task_list: TaskList, storage: StorageAdapter) -> str:
        task = self.build_task()
        storage.append_to_file(task)
        task_list.add(task)
        logger.debug(f"Added {task.task_type.name.lower()} task #{task_list.size()}")
        return ui.format_add_task(task, task_list.size())


@dataclass(frozen=True)
class TodoCommand(_AddCommand):
    description: str

    def build_task(self) -> Task:
        return Todo(self.description)


@dataclass(frozen=True)
class DeadlineCommand(_AddCommand):
    description: str
    due_date: date

    def build_task(self) -> Task:
        return Deadline(self.description, self.due_date)


@dataclass(frozen=True)
class EventCommand(_AddCommand):
    description: str
    due_datetime: datetime

    def build_task(self) -> Task:
        return Event(self.description, self.due_datetime)


@dataclass(frozen=True)
class ListCommand(Command):

    def execute(self, task_list: TaskList, storage: StorageAdapter) -> str:
        return ui.format_task_list(task_list)


@dataclass(frozen=True)
class MarkCommand(Command):
    index: int

    def execute(self, task_list: TaskList, storage: StorageAdapter) -> str:
        task = task_list.get(self.index)
        task.mark_done()
        storage.overwrite_file(task_list.tasks)
        return ui.format_mark_task(task)


@dataclass(frozen=True)
class UnmarkCommand(Command):
    index: int

    def execute(self, task_list: TaskList, storage: StorageAdapter) -> str:
        task = task_list.get(self.index)
        task.mark_undone()
        storage.overwrite_file(task_list.tasks)
        return ui.format_unmark_task(task)


@dataclass(frozen=True)
class DeleteCommand(Command):
    index: int

    def execute(self, task_list: TaskList, storage: StorageAdapter) -> str:
        task = task_list.delete(self.index)
        storage.overwrite_file(task_list.tasks)
        return ui.format_delete_task(task, task_list.size())


@dataclass(frozen=True)
class FindCommand(Command):
    term: str

    def execute(self, task_list: TaskList, storage: StorageAdapter) -> str:
        return ui.format_find_result(task_list.find(self.term))


@dataclass(frozen=True)
class UpdateCommand(Command):
    index: int
    description: str

    def execute(self, task_list: TaskList, storage: StorageAdapter) -> str:
        task = task_list.get(self.index)
        task.update_description(self.description)
        storage.overwrite_file(task_list.tasks)
        return ui.format_update_task(task)


@dataclass(frozen=True)
class ByeCommand(Command):

    def execute(self, task_list: TaskList, storage: StorageAdapter) -> str:
        return ui.FAREWELL

    @property
    def is_exit(self) -> bool:
        return True
