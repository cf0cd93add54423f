"""Tests for the Todo model."""

import dataclasses
import itertools
from datetime import date

import pytest

from todo_txt.errors import InvalidPriorityError
from todo_txt.parser import parse_line
from todo_txt.todo import Todo, from_parsed, tags_with_prefix, to_string


class TestTodoCreation:
    """Test building todos and deriving projects and contexts."""

    def test_defaults(self):
        todo = Todo()

        assert todo.task == ""
        assert todo.completed is False
        assert todo.priority is None
        assert todo.start_date is None
        assert todo.end_date is None
        assert todo.projects == ()
        assert todo.contexts == ()

    def test_from_parsed(self):
        todo = from_parsed(parse_line("(C) 2014-01-01 Learn to +drive @goals"))

        assert todo.priority == "C"
        assert todo.start_date == date(2014, 1, 1)
        assert todo.task == "Learn to +drive @goals"
        assert todo.projects == ("drive",)
        assert todo.contexts == ("goals",)

    def test_projects_and_contexts_anywhere(self):
        """Tags are found anywhere in the task, in order."""
        todo = Todo.parse("+projects and @contexts can be +anywhere in the @task")

        assert todo.projects == ("projects", "anywhere")
        assert todo.contexts == ("contexts", "task")

    def test_duplicate_tags_are_kept(self):
        todo = Todo.parse("+home fix sink +home @shop @shop")

        assert todo.projects == ("home", "home")
        assert todo.contexts == ("shop", "shop")

    def test_tag_must_start_the_word(self):
        todo = Todo.parse("email bob@example.com about 1+1")

        assert todo.projects == ()
        assert todo.contexts == ()

    def test_tags_split_on_any_whitespace(self):
        assert tags_with_prefix("a\t+one\n+two  @three", "+") == ("one", "two")

    def test_spacing_between_tokens_does_not_affect_equality(self):
        """Only parsed fields are kept, not the raw line."""
        assert Todo.parse("x  (A)\t2021-01-01 Call Mom") == Todo.parse("x (A) 2021-01-01 Call Mom")
        assert not hasattr(Todo.parse("x Call Mom"), "original")

    def test_projects_cannot_be_passed_in(self):
        with pytest.raises(TypeError):
            Todo(task="hello", projects=("nope",))

    def test_invalid_priority_rejected_on_construction(self):
        with pytest.raises(InvalidPriorityError):
            Todo(task="hello", priority="a")

    def test_todo_is_immutable(self):
        todo = Todo(task="hello")

        with pytest.raises(dataclasses.FrozenInstanceError):
            todo.task = "goodbye"


class TestToString:
    """Test serialization back to a line."""

    def test_all_fields(self):
        todo = Todo(
            task="Call Mom",
            completed=True,
            priority="A",
            start_date=date(2021, 1, 1),
            end_date=date(2021, 1, 1),
        )

        assert to_string(todo) == "x (A) 2021-01-01 2021-01-01 Call Mom"

    def test_task_only(self):
        assert Todo(task="Buy milk").to_string() == "Buy milk"

    def test_str_matches_to_string(self):
        todo = Todo(task="Buy milk", priority="B")

        assert str(todo) == "(B) Buy milk"

    def test_end_date_before_start_date(self):
        todo = Todo(task="Report", start_date=date(2021, 1, 1), end_date=date(2021, 2, 1))

        assert todo.to_string() == "2021-02-01 2021-01-01 Report"

    def test_whitespace_is_normalized(self):
        """Runs between tokens become single spaces; the task is untouched."""
        line = "x  (A)   2021-01-01   Call  Mom"

        assert Todo.parse(line).to_string() == "x (A) 2021-01-01 Call  Mom"


class TestRoundTrip:
    """Serializing a parsed todo and parsing it again gives the same todo."""

    @pytest.mark.parametrize("line", [
        "x Call Mom",
        "x (A) 2021-01-02 2021-01-01 Make a New Years Resolution",
        "(C) 2014-01-01 Learn to +drive @goals",
        "+projects and @contexts can be +anywhere in the @task",
        "x 2021-01-01 2021-13-01 odd",
        "2021-01-01 2021-01-02 2021-01-03 three dates",
        "(A) x not done",
        "x",
        "(Z)",
        "2020-02-29",
        "   indented\tline  ",
        "x (a) lowercase",
        "2021-01-012021-01-02",
        "Café ☕ @José",
    ])
    def test_round_trip(self, line):
        todo = Todo.parse(line)

        assert Todo.parse(todo.to_string()) == todo

    def test_round_trip_over_token_combinations(self):
        """Every mix of markers, dates and separators survives a round trip.

        Lines made only of whitespace are left out: they parse to an empty
        todo that serializes to an empty line.
        """
        completions = ["", "x", "X", "xx"]
        priorities = ["", "(A)", "(a)", "(AB)"]
        first_dates = ["", "2021-01-02", "2021-02-30", "2020-02-29"]
        second_dates = ["", "2021-01-01", "2021-13-01"]
        tasks = ["", "Call Mom +family @phone", "x fake", "(B) fake", "2021-05-05 fake"]
        separators = [" ", "\t", "  \t"]

        combinations = itertools.product(
            separators, completions, priorities, first_dates, second_dates, tasks
        )
        for separator, *tokens in combinations:
            line = separator.join(token for token in tokens if token)
            if not line.strip():
                continue

            todo = Todo.parse(line)
            rendered = todo.to_string()

            assert Todo.parse(rendered) == todo, line
            assert rendered.split() == line.split(), line


class TestSetters:
    """Test field setters returning new todos."""

    def setup_method(self):
        self.todo = Todo.parse("(B) 2021-01-01 Plan trip +travel @home")

    def test_set_priority(self):
        updated = self.todo.set_priority("A")

        assert updated.priority == "A"
        assert self.todo.priority == "B"

    @pytest.mark.parametrize("value", ["AA", "a", "", "1", "(A)", " A", "Ä", None, 1])
    def test_set_priority_rejects_invalid(self, value):
        with pytest.raises(InvalidPriorityError) as exc_info:
            self.todo.set_priority(value)

        assert exc_info.value.value == value

    def test_clear_priority(self):
        assert self.todo.clear_priority().priority is None

    def test_set_task_recomputes_tags(self):
        updated = self.todo.set_task("Call @phone about +work and +taxes")

        assert updated.task == "Call @phone about +work and +taxes"
        assert updated.projects == ("work", "taxes")
        assert updated.contexts == ("phone",)
        assert self.todo.projects == ("travel",)

    def test_append_task(self):
        updated = self.todo.append_task("+budget")

        assert updated.task == "Plan trip +travel @home +budget"
        assert updated.projects == ("travel", "budget")

    def test_prepend_task(self):
        updated = self.todo.prepend_task("@office")

        assert updated.task == "@office Plan trip +travel @home"
        assert updated.contexts == ("office", "home")

    def test_append_to_empty_task(self):
        assert Todo().append_task("+new").task == "+new"

    def test_prepend_to_empty_task(self):
        assert Todo().prepend_task("@new").contexts == ("new",)

    def test_append_empty_text(self):
        assert self.todo.append_task("").task == self.todo.task

    def test_complete(self):
        updated = self.todo.complete()

        assert updated.completed is True
        assert self.todo.completed is False
        assert updated.end_date is None

    def test_set_completed(self):
        done = self.todo.set_completed(True)

        assert done.set_completed(False) == self.todo

    def test_set_dates(self):
        updated = self.todo.set_end_date(date(2021, 2, 1)).set_start_date(None)

        assert updated.end_date == date(2021, 2, 1)
        assert updated.start_date is None
