"""File-backed line source and sink for todo.txt files."""

import logging
import os
from pathlib import Path
from typing import Iterator, List, Union

from .errors import StorageError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FileLineSource:
    """Yields the lines of a todo.txt file with their line endings removed."""

    def __init__(self, path: PathLike, encoding: str = "utf-8"):
        self.path = Path(os.path.expanduser(path))
        self.encoding = encoding

    def __iter__(self) -> Iterator[str]:
        return iter(self.read_lines())

    def read_lines(self) -> List[str]:
        """Read the whole file at once.

        Raises:
            StorageError: If the file cannot be opened or decoded
        """
        try:
            with open(self.path, "r", encoding=self.encoding, newline="") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(
                f"Failed to read {self.path}: {e}", path=str(self.path), cause=e
            ) from e

        lines = [line[:-1] if line.endswith("\r") else line for line in content.split("\n")]
        if lines and lines[-1] == "":
            lines.pop()
        logger.debug("Read %d lines from %s", len(lines), self.path)
        return lines


class FileSink:
    """Overwrites a todo.txt file with new content."""

    def __init__(self, path: PathLike, encoding: str = "utf-8"):
        self.path = Path(os.path.expanduser(path))
        self.encoding = encoding

    def __call__(self, content: str) -> None:
        """Replace the file's contents with ``content``.

        Raises:
            StorageError: If the file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding=self.encoding, newline="") as f:
                f.write(content)
        except (OSError, UnicodeEncodeError) as e:
            raise StorageError(
                f"Failed to write {self.path}: {e}", path=str(self.path), cause=e
            ) from e

        logger.debug("Wrote %d characters to %s", len(content), self.path)
