"""Todo data model for todo.txt task lines."""

import re
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Optional, Tuple

from .errors import InvalidPriorityError
from .parser import ParsedLine, parse_line


PRIORITY_LETTER_RE = re.compile(r"[A-Z]")


def tags_with_prefix(task: str, prefix: str) -> Tuple[str, ...]:
    """Return the text after ``prefix`` for each word of ``task`` that starts with it."""
    return tuple(word[len(prefix):] for word in task.split() if word.startswith(prefix))


def validate_priority(priority: str) -> str:
    """Return ``priority`` if it is exactly one uppercase ASCII letter.

    Raises:
        InvalidPriorityError: For anything else, including lowercase letters
    """
    if not isinstance(priority, str) or not PRIORITY_LETTER_RE.fullmatch(priority):
        raise InvalidPriorityError(priority)
    return priority


@dataclass(frozen=True)
class Todo:
    """One todo.txt task.

    Instances are immutable: every setter returns a new ``Todo``. The
    ``projects`` and ``contexts`` fields are derived from ``task`` whenever
    an instance is created and cannot be passed in.
    """

    task: str = ""
    completed: bool = False
    priority: Optional[str] = None
    start_date: Optional[date] = None  # creation date
    end_date: Optional[date] = None  # completion date

    projects: Tuple[str, ...] = field(init=False, default=())  # +project
    contexts: Tuple[str, ...] = field(init=False, default=())  # @context

    def __post_init__(self):
        if self.priority is not None:
            validate_priority(self.priority)
        object.__setattr__(self, "projects", tags_with_prefix(self.task, "+"))
        object.__setattr__(self, "contexts", tags_with_prefix(self.task, "@"))

    @classmethod
    def from_parsed(cls, parsed: ParsedLine) -> "Todo":
        """Build a Todo from the fields recognized by the line parser."""
        return cls(
            task=parsed.task,
            completed=parsed.completed,
            priority=parsed.priority,
            start_date=parsed.start_date,
            end_date=parsed.end_date,
        )

    @classmethod
    def parse(cls, line: str) -> "Todo":
        """Parse one todo.txt line.

        Raises:
            NoDataError: If ``line`` is empty
        """
        return cls.from_parsed(parse_line(line))

    def to_string(self) -> str:
        """Serialize back to a todo.txt line.

        Tokens come out in the order the parser reads them, each followed by
        a single space, then the task text unchanged.
        """
        parts = []
        if self.completed:
            parts.append("x ")
        if self.priority:
            parts.append(f"({self.priority}) ")
        if self.end_date:
            parts.append(f"{self.end_date.isoformat()} ")
        if self.start_date:
            parts.append(f"{self.start_date.isoformat()} ")
        parts.append(self.task)
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()

    def set_priority(self, priority: str) -> "Todo":
        return replace(self, priority=validate_priority(priority))

    def clear_priority(self) -> "Todo":
        return replace(self, priority=None)

    def set_task(self, task: str) -> "Todo":
        return replace(self, task=task)

    def append_task(self, text: str) -> "Todo":
        """Add ``text`` after the current task, separated by a space."""
        if not self.task:
            return self.set_task(text)
        if not text:
            return self
        return self.set_task(f"{self.task} {text}")

    def prepend_task(self, text: str) -> "Todo":
        """Add ``text`` before the current task, separated by a space."""
        if not self.task:
            return self.set_task(text)
        if not text:
            return self
        return self.set_task(f"{text} {self.task}")

    def complete(self) -> "Todo":
        return self.set_completed(True)

    def set_completed(self, completed: bool) -> "Todo":
        return replace(self, completed=completed)

    def set_start_date(self, start_date: Optional[date]) -> "Todo":
        return replace(self, start_date=start_date)

    def set_end_date(self, end_date: Optional[date]) -> "Todo":
        return replace(self, end_date=end_date)


def from_parsed(parsed: ParsedLine) -> Todo:
    """Build a Todo from a parsed line."""
    return Todo.from_parsed(parsed)


def to_string(todo: Todo) -> str:
    """Serialize a Todo to a todo.txt line."""
    return todo.to_string()
