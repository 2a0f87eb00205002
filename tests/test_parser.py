"""Tests for the command parser."""

from datetime import date, datetime

import pytest

from taskbot.commands import (
    ByeCommand,
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
from taskbot.errors import (
    CommandNotRecognizedError,
    InvalidDateFormatError,
    InvalidIndexError,
    MalformedArgumentsError,
)
from taskbot.parser import parse_command, split_keyword


class TestKeywordDispatch:
    """Test keyword selection."""

    def test_split_keyword(self):
        assert split_keyword("todo  read   book ") == ("todo", "read   book")
        assert split_keyword("list") == ("list", "")

    def test_list_and_bye(self):
        assert parse_command("list") == ListCommand()
        assert parse_command("bye") == ByeCommand()
        assert parse_command("bye").is_exit
        assert not parse_command("list").is_exit

    def test_remainder_ignored_for_list(self):
        assert parse_command("list everything") == ListCommand()

    @pytest.mark.parametrize("line", ["blah", "", "LIST", "todos x"])
    def test_unknown_keyword(self, line):
        with pytest.raises(CommandNotRecognizedError):
            parse_command(line)


class TestIndexCommands:
    """Test mark, unmark and delete."""

    def test_index_is_converted_to_zero_based(self):
        assert parse_command("mark 1") == MarkCommand(0)
        assert parse_command("unmark 3") == UnmarkCommand(2)
        assert parse_command("delete 12") == DeleteCommand(11)

    @pytest.mark.parametrize("line", ["mark", "unmark  ", "delete"])
    def test_missing_index(self, line):
        with pytest.raises(MalformedArgumentsError):
            parse_command(line)

    @pytest.mark.parametrize("line", ["mark one", "delete 1.5", "unmark -1", "mark 0", "delete +2"])
    def test_invalid_index(self, line):
        with pytest.raises(InvalidIndexError):
            parse_command(line)


class TestAddCommands:
    """Test todo, deadline and event."""

    def test_todo(self):
        assert parse_command("todo read book") == TodoCommand("read book")

    def test_todo_without_description(self):
        with pytest.raises(MalformedArgumentsError):
            parse_command("todo   ")

    def test_deadline(self):
        command = parse_command("deadline return book /by 2/12/2023")

        assert command == DeadlineCommand("return book", date(2023, 12, 2))

    def test_deadline_invalid_date_names_pattern(self):
        with pytest.raises(InvalidDateFormatError) as exc_info:
            parse_command("deadline x /by tomorrow")

        assert "dd/mm/yyyy" in exc_info.value.message
        assert exc_info.value.expected == "dd/mm/yyyy"

    @pytest.mark.parametrize("line", [
        "deadline return book",
        "deadline /by 02/12/2023",
        "deadline return book /by",
    ])
    def test_deadline_missing_parts(self, line):
        with pytest.raises(MalformedArgumentsError):
            parse_command(line)

    def test_event(self):
        command = parse_command("event project meeting /at 02/12/2023 1800")

        assert command == EventCommand("project meeting", datetime(2023, 12, 2, 18, 0))

    @pytest.mark.parametrize("when", ["02/12/2023", "2023-12-02 1800", "02/12/2023 2500"])
    def test_event_invalid_datetime(self, when):
        with pytest.raises(InvalidDateFormatError) as exc_info:
            parse_command(f"event meeting /at {when}")

        assert "dd/mm/yyyy HHmm" in exc_info.value.message

    def test_marker_split_uses_first_occurrence(self):
        with pytest.raises(InvalidDateFormatError):
            parse_command("deadline a /by b /by 01/01/2024")


class TestFindAndUpdate:
    """Test find and update."""

    def test_find(self):
        assert parse_command("find cs2103 project") == FindCommand("cs2103 project")

    def test_find_without_term(self):
        with pytest.raises(MalformedArgumentsError):
            parse_command("find")

    def test_update(self):
        assert parse_command("update 2 buy   oat milk") == UpdateCommand(1, "buy   oat milk")

    def test_update_without_description(self):
        with pytest.raises(MalformedArgumentsError):
            parse_command("update 2")

    def test_update_without_anything(self):
        with pytest.raises(MalformedArgumentsError):
            parse_command("update")

    def test_update_with_non_numeric_index(self):
        with pytest.raises(InvalidIndexError):
            parse_command("update two new text")


class TestLineBreaksInDescriptions:
    """Descriptions spanning several lines are rejected."""

    @pytest.mark.parametrize("line", [
        "todo a\nb",
        "todo a\rb",
        "deadline a\nb /by 01/01/2024",
        "event a\r\nb /at 01/01/2024 1200",
        "update 1 new\ntext",
    ])
    def test_line_break_in_description(self, line):
        with pytest.raises(MalformedArgumentsError):
            parse_command(line)
