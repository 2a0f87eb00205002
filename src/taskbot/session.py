"""One interactive run of taskbot: parse, execute, report."""

import logging
from typing import Optional

from . import ui
from .errors import TaskbotError
from .parser import parse_command
from .storage import StorageAdapter
from .task_list import TaskList

logger = logging.getLogger(__name__)


class Session:
    """Owns the task list and storage for the lifetime of one run.

    The task list is built from ``storage.load()``, so a
    ``StorageCorruptError`` raised there reaches the caller.
    """

    def __init__(self, storage: StorageAdapter, task_list: Optional[TaskList] = None):
        self.storage = storage
        self.task_list = task_list if task_list is not None else TaskList(storage.load())
        self.is_running = True
        self.last_failed = False

    def handle(self, line: str) -> str:
        """Parse and execute one line, returning the message to show."""
        try:
            command = parse_command(line)
            result = command.execute(self.task_list, self.storage)
        except TaskbotError as e:
            logger.info(f"{type(e).__name__} for input {line!r}: {e.message}")
            self.last_failed = True
            return ui.format_error(e)

        self.last_failed = False
        if command.is_exit:
            self.is_running = False
        return result
