"""Exception types raised by todo-txt."""

from typing import Any, Optional


class TodoTxtError(Exception):
    """Base class for todo-txt errors."""


class NoDataError(TodoTxtError, ValueError):
    """Raised when an empty line is handed to the line parser."""

    def __init__(self, message: str = "line contains no data"):
        super().__init__(message)


class InvalidPriorityError(TodoTxtError, ValueError):
    """Exception raised when a priority is not a single uppercase letter."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"Invalid priority {value!r}: expected a single letter A-Z"
        )


class StorageError(TodoTxtError, OSError):
    """Exception raised when reading or writing a todo file fails.

    The underlying exception is kept on ``cause`` and chained as
    ``__cause__`` by the raiser.
    """

    def __init__(self, message: str, path: Optional[str] = None,
                 cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        super().__init__(message)
