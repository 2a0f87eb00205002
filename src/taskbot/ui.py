"""Result messages shown to the user.

Commands return plain strings built here; the session decides how to print them.
"""

from typing import Iterable, Tuple

from .errors import TaskbotError
from .task import Task
from .task_list import TaskList


ERROR_PREFIX = "OOPS!!!"
INDENT = "  "

GREETING = "Hello! I'm taskbot\nWhat can I do for you?"
FAREWELL = "Bye. Hope to see you again soon!"


def _count_line(size: int) -> str:
    noun = "task" if size == 1 else "tasks"
    return f"Now you have {size} {noun} in the list."


def format_add_task(task: Task, size: int) -> str:
    return f"Got it. I've added this task:\n{INDENT}{task}\n{_count_line(size)}"


def format_delete_task(task: Task, size: int) -> str:
    return f"Noted. I've removed this task:\n{INDENT}{task}\n{_count_line(size)}"


def format_mark_task(task: Task) -> str:
    return f"Nice! I've marked this task as done:\n{INDENT}{task}"


def format_unmark_task(task: Task) -> str:
    return f"OK, I've marked this task as not done yet:\n{INDENT}{task}"


def format_update_task(task: Task) -> str:
    return f"Got it. I've updated this task:\n{INDENT}{task}"


def _numbered(entries: Iterable[Tuple[int, Task]]) -> list:
    return [f"{index + 1}.{task}" for index, task in entries]


def format_task_list(task_list: TaskList) -> str:
    if task_list.size() == 0:
        return "There are no tasks in your list."
    lines = ["Here are the tasks in your list:"]
    lines.extend(_numbered(enumerate(task_list)))
    return "\n".join(lines)


def format_find_result(matches: Iterable[Tuple[int, Task]]) -> str:
    """Render matches numbered by their position in the full list."""
    lines = _numbered(matches)
    if not lines:
        return "There are no matching tasks in your list."
    return "\n".join(["Here are the matching tasks in your list:"] + lines)


def format_error(error: TaskbotError) -> str:
    lines = [f"{ERROR_PREFIX} {error.message}"]
    lines.extend(error.suggestions)
    return "\n".join(lines)
