"""Ordered, index-addressable collection of todos backed by a todo.txt file."""

import logging
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Iterator, Optional, Tuple

from .errors import NoDataError
from .storage import FileLineSource, FileSink, PathLike
from .todo import Todo, validate_priority

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskList:
    """A todo.txt file held in memory.

    ``items`` is the only state; ``path`` just records where the list came
    from so it can be written back. Every editing method returns a new
    ``TaskList``.
    """

    items: Tuple[Todo, ...] = ()
    path: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def read(cls, source: Iterable[str], path: Optional[PathLike] = None) -> "TaskList":
        """Parse every line of ``source`` into a todo.

        Empty lines are skipped. A single trailing line ending is removed
        from each line before parsing.
        """
        items = []
        for number, line in enumerate(source, start=1):
            if line.endswith("\n"):
                line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
            try:
                items.append(Todo.parse(line))
            except NoDataError:
                logger.debug("Skipping empty line %d", number)

        return cls(items=tuple(items), path=str(path) if path is not None else None)

    @classmethod
    def read_file(cls, path: PathLike, encoding: str = "utf-8") -> "TaskList":
        """Load a todo.txt file.

        Raises:
            StorageError: If the file cannot be read
        """
        task_list = cls.read(FileLineSource(path, encoding=encoding), path=path)
        logger.debug("Loaded %d todos from %s", len(task_list), path)
        return task_list

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Todo]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Todo:
        return self.items[index]

    def update_at(self, index: int, fn: Callable[[Todo], Todo]) -> "TaskList":
        """Replace the todo at ``index`` with ``fn(todo)``.

        An index outside the list (including negative ones) leaves the list
        unchanged; no error is raised.
        """
        if not 0 <= index < len(self.items):
            logger.debug("Index %d out of range for %d todos, nothing updated",
                         index, len(self.items))
            return self

        items = list(self.items)
        items[index] = fn(items[index])
        return replace(self, items=tuple(items))

    def add(self, todo: Todo) -> "TaskList":
        return replace(self, items=self.items + (todo,))

    def complete_at(self, index: int) -> "TaskList":
        return self.update_at(index, Todo.complete)

    def set_completed_at(self, index: int, completed: bool) -> "TaskList":
        return self.update_at(index, lambda todo: todo.set_completed(completed))

    def set_priority_at(self, index: int, priority: str) -> "TaskList":
        """Set the priority of the todo at ``index``.

        Raises:
            InvalidPriorityError: If ``priority`` is not one letter A-Z, even
                when ``index`` is out of range
        """
        validate_priority(priority)
        return self.update_at(index, lambda todo: todo.set_priority(priority))

    def clear_priority_at(self, index: int) -> "TaskList":
        return self.update_at(index, Todo.clear_priority)

    def set_task_at(self, index: int, task: str) -> "TaskList":
        return self.update_at(index, lambda todo: todo.set_task(task))

    def append_task_at(self, index: int, text: str) -> "TaskList":
        return self.update_at(index, lambda todo: todo.append_task(text))

    def prepend_task_at(self, index: int, text: str) -> "TaskList":
        return self.update_at(index, lambda todo: todo.prepend_task(text))

    def serialize(self) -> str:
        """Render the list as todo.txt text, one todo per line, no final newline."""
        return "\n".join(todo.to_string() for todo in self.items)

    def write(self, sink: Callable[[str], None]) -> None:
        """Hand the serialized list to ``sink``, which overwrites its target.

        Errors raised by ``sink`` propagate unchanged.
        """
        sink(self.serialize())

    def write_file(self, path: Optional[PathLike] = None, encoding: str = "utf-8") -> None:
        """Write the list to ``path``, or back to the file it was read from.

        Raises:
            ValueError: If no path is given and the list has none
            StorageError: If the file cannot be written
        """
        target = path if path is not None else self.path
        if target is None:
            raise ValueError("TaskList has no path to write to")

        self.write(FileSink(target, encoding=encoding))
        logger.debug("Saved %d todos to %s", len(self.items), target)


def read(source: Iterable[str], path: Optional[PathLike] = None) -> TaskList:
    return TaskList.read(source, path=path)


def update_at(task_list: TaskList, index: int, fn: Callable[[Todo], Todo]) -> TaskList:
    return task_list.update_at(index, fn)


def serialize(task_list: TaskList) -> str:
    return task_list.serialize()


def write(task_list: TaskList, sink: Callable[[str], None]) -> None:
    task_list.write(sink)
