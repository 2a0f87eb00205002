"""In-memory, index addressable list of tasks."""

from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import TaskIndexError
from .task import Task


class TaskList:
    """Ordered collection of tasks.

    Indices are 0-based here; callers convert from the 1-based numbers
    shown to the user.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks) if tasks else []

    def _check_index(self, index: int):
        # negative indices would silently wrap around on a Python list
        if index < 0 or index >= len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def delete(self, index: int) -> Task:
        """Remove and return the task at ``index``."""
        self._check_index(index)
        return self._tasks.pop(index)

    def size(self) -> int:
        return len(self._tasks)

    def find(self, term: str) -> List[Tuple[int, Task]]:
        """Return ``(index, task)`` pairs whose description contains ``term``."""
        return [(i, task) for i, task in enumerate(self._tasks) if term in task.description]

    @property
    def tasks(self) -> List[Task]:
        """Snapshot of the tasks in list order."""
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)
