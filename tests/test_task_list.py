"""Tests for TaskList."""

import pytest

from taskbot.errors import TaskIndexError
from taskbot.task import Todo
from taskbot.task_list import TaskList


@pytest.fixture
def task_list():
    return TaskList([Todo("first"), Todo("second"), Todo("third")])


class TestTaskList:
    """Test list operations and bounds checks."""

    def test_empty_by_default(self):
        assert TaskList().size() == 0

    def test_add_appends(self, task_list):
        task_list.add(Todo("fourth"))

        assert task_list.size() == 4
        assert task_list.get(3).description == "fourth"

    def test_get_out_of_range(self, task_list):
        with pytest.raises(TaskIndexError):
            task_list.get(3)

    def test_negative_index_is_not_wrapped(self, task_list):
        with pytest.raises(TaskIndexError):
            task_list.get(-1)

    def test_task_index_error_is_index_error(self, task_list):
        with pytest.raises(IndexError):
            task_list.delete(10)

    def test_delete_shifts_later_tasks(self, task_list):
        removed = task_list.delete(1)

        assert removed.description == "second"
        assert task_list.get(1).description == "third"
        assert task_list.size() == 2

    def test_delete_last_then_get_fails(self, task_list):
        task_list.delete(2)

        with pytest.raises(TaskIndexError):
            task_list.get(2)

    def test_find_is_case_sensitive_substring(self):
        task_list = TaskList([Todo("cs2103 project"), Todo("buy milk"), Todo("CS notes")])

        matches = task_list.find("cs")

        assert [(i, t.description) for i, t in matches] == [(0, "cs2103 project")]

    def test_tasks_snapshot_is_a_copy(self, task_list):
        snapshot = task_list.tasks
        snapshot.clear()

        assert task_list.size() == 3
