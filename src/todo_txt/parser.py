"""Line grammar for todo.txt task lines.

A line is an ordered run of optional prefix tokens followed by free text::

    ["x "] ["(" A-Z ") "] [<date> " " <date> " " | <date> " "] <task>

Each prefix token may be followed by a run of spaces or tabs which is
consumed and belongs to no field. Whatever is left over is the task text,
taken verbatim.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from .errors import NoDataError


DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})(?=[ \t]|$)")
PRIORITY_RE = re.compile(r"\(([A-Z])\)")
WHITESPACE_RE = re.compile(r"[ \t]*")
SEPARATOR_RE = re.compile(r"[ \t]+")


@dataclass(frozen=True)
class ParsedLine:
    """Fields recognized on a single line, before any derivation."""
    task: str = ""
    completed: bool = False
    priority: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class LineParser:
    """Recursive-descent parser over one line.

    Every rule either consumes input and returns a value, or returns ``None``
    and leaves the position where it found it, so alternatives can be
    retried from the same spot.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def parse(self) -> ParsedLine:
        self.skip_whitespace()
        completed = self.completion()
        self.skip_whitespace()
        priority = self.priority()
        self.skip_whitespace()
        end_date, start_date = self.date_clause()
        self.skip_whitespace()

        return ParsedLine(
            task=self.text[self.pos:],
            completed=completed,
            priority=priority,
            start_date=start_date,
            end_date=end_date,
        )

    def skip_whitespace(self) -> None:
        match = WHITESPACE_RE.match(self.text, self.pos)
        self.pos = match.end()

    def completion(self) -> bool:
        """Match ``x`` when it stands alone as the first token."""
        if not self.text.startswith("x", self.pos):
            return False
        following = self.pos + 1
        if following < len(self.text) and self.text[following] not in " \t":
            return False
        self.pos = following
        return True

    def priority(self) -> Optional[str]:
        match = PRIORITY_RE.match(self.text, self.pos)
        if match is None:
            return None
        self.pos = match.end()
        return match.group(1)

    def date_clause(self) -> Tuple[Optional[date], Optional[date]]:
        """Match the date clause, returning ``(end_date, start_date)``.

        The two-date form is tried first; on failure the parser backtracks
        and tries a single date, which is always the creation date.
        """
        both = self.two_dates()
        if both is not None:
            return both

        start = self.date()
        if start is not None:
            return None, start

        return None, None

    def two_dates(self) -> Optional[Tuple[date, date]]:
        mark = self.pos

        end = self.date()
        if end is None:
            return None

        separator = SEPARATOR_RE.match(self.text, self.pos)
        if separator is None:
            self.pos = mark
            return None
        self.pos = separator.end()

        start = self.date()
        if start is None:
            self.pos = mark
            return None

        return end, start

    def date(self) -> Optional[date]:
        """Match one ``YYYY-MM-DD`` date that exists on the calendar."""
        match = DATE_RE.match(self.text, self.pos)
        if match is None:
            return None

        year, month, day = (int(part) for part in match.groups())
        try:
            value = date(year, month, day)
        except ValueError:
            return None

        self.pos = match.end()
        return value


def parse_line(raw: str) -> ParsedLine:
    """Split a raw todo.txt line into its prefix tokens and task text.

    Args:
        raw: One line of text, without its trailing newline

    Returns:
        The recognized fields

    Raises:
        NoDataError: If ``raw`` is the empty string
    """
    if raw == "":
        raise NoDataError()
    return LineParser(raw).parse()
