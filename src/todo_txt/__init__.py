"""todo-txt - read, edit and write todo.txt task lists."""

__version__ = "0.1.0"

from .errors import InvalidPriorityError, NoDataError, StorageError, TodoTxtError
from .parser import ParsedLine, parse_line
from .storage import FileLineSource, FileSink
from .task_list import TaskList
from .todo import Todo, from_parsed, to_string

__all__ = [
    "Todo",
    "TaskList",
    "ParsedLine",
    "parse_line",
    "from_parsed",
    "to_string",
    "FileLineSource",
    "FileSink",
    "TodoTxtError",
    "NoDataError",
    "InvalidPriorityError",
    "StorageError",
    "__version__",
]
