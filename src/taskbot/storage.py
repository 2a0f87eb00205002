"""Storage layer for taskbot using a line based text file.

Each task is stored as one record line::

    T | <O|X> | <description>
    D | <O|X> | <description> | <dd/mm/yyyy>
    E | <O|X> | <description> | <dd/mm/yyyy HHmm>

``O`` marks a done task and ``X`` a task that is not done yet.
"""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Union

from .errors import (
    InvalidDateFormatError,
    StorageCorruptError,
    StorageWriteError,
    TaskValidationError,
)
from .task import RECORD_SEPARATOR, Deadline, DoneMarker, Event, Task, TaskType, Todo
from .utils.datetime import parse_date, parse_datetime

logger = logging.getLogger(__name__)


class TaskRecordFormat:
    """Handles conversion between Task objects and record lines."""

    @staticmethod
    def to_record(task: Task) -> str:
        return task.to_record_string()

    @staticmethod
    def from_record(line: str) -> Task:
        """Parse one record line back into a task.

        The type tag and done marker are split from the left and the date
        field from the right, so a description may itself contain the
        separator.

        Raises:
            StorageCorruptError: If the line is not a valid record.
        """
        line = line.rstrip("\r\n")
        parts = line.split(RECORD_SEPARATOR, 2)
        if len(parts) < 3:
            raise StorageCorruptError(f"Malformed record: {line!r}", line=line)

        tag, marker, rest = parts
        try:
            task_type = TaskType(tag)
            is_done = DoneMarker(marker) is DoneMarker.DONE
        except ValueError:
            raise StorageCorruptError(f"Unknown type or marker in record: {line!r}", line=line) from None

        try:
            if task_type is TaskType.TODO:
                return Todo(rest, is_done=is_done)

            description, sep, when = rest.rpartition(RECORD_SEPARATOR)
            if not sep:
                raise StorageCorruptError(f"Missing date field in record: {line!r}", line=line)
            if task_type is TaskType.DEADLINE:
                return Deadline(description, parse_date(when), is_done=is_done)
            return Event(description, parse_datetime(when), is_done=is_done)
        except (InvalidDateFormatError, TaskValidationError) as e:
            raise StorageCorruptError(f"Invalid record {line!r}: {e.message}", line=line) from e


class StorageAdapter(ABC):
    """Durable home of the task list."""

    @abstractmethod
    def load(self) -> List[Task]:
        """Return the stored tasks in order."""

    @abstractmethod
    def append_to_file(self, task: Task) -> None:
        """Persist one new task after the existing ones."""

    @abstractmethod
    def overwrite_file(self, tasks: Iterable[Task]) -> None:
        """Replace everything stored with ``tasks``."""


class FileStorage(StorageAdapter):
    """File-based storage, one record per line.

    Args:
        path: Location of the data file. Parent directories are created
            on first write.
        strict: When True a malformed line aborts ``load`` with
            ``StorageCorruptError``; otherwise it is logged and skipped.
    """

    def __init__(self, path: Union[str, Path], strict: bool = False):
        self.path = Path(path).expanduser()
        self.strict = strict

    def _ensure_directories(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> List[Task]:
        if not self.path.exists():
            logger.debug(f"No data file at {self.path}, starting with an empty list")
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            raise StorageCorruptError(f"Unable to read {self.path}: {e}") from e

        tasks: List[Task] = []
        skipped = 0
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                tasks.append(TaskRecordFormat.from_record(line))
            except StorageCorruptError as e:
                if self.strict:
                    raise StorageCorruptError(e.message, line_number=line_number, line=e.line) from e
                skipped += 1
                logger.warning(f"Skipping line {line_number} of {self.path}: {e.message}")

        logger.debug(f"Loaded {len(tasks)} tasks from {self.path} ({skipped} skipped)")
        return tasks

    def _ends_without_newline(self) -> bool:
        """True when the file has content whose last byte is not a newline."""
        if not self.path.exists() or self.path.stat().st_size == 0:
            return False
        with open(self.path, "rb") as f:
            f.seek(-1, os.SEEK_END)
            return f.read(1) != b"\n"

    def append_to_file(self, task: Task) -> None:
        record = TaskRecordFormat.to_record(task) + "\n"
        try:
            self._ensure_directories()
            # a hand-edited file may lack the final newline
            if self._ends_without_newline():
                record = "\n" + record
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(record)
        except OSError as e:
            raise StorageWriteError(self.path, e.strerror or str(e)) from e

    def overwrite_file(self, tasks: Iterable[Task]) -> None:
        records = [TaskRecordFormat.to_record(task) for task in tasks]
        try:
            self._ensure_directories()
            with open(self.path, "w", encoding="utf-8") as f:
                f.writelines(record + "\n" for record in records)
        except OSError as e:
            raise StorageWriteError(self.path, e.strerror or str(e)) from e
        logger.debug(f"Rewrote {self.path} with {len(records)} tasks")
