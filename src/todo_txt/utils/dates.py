"""Date input helpers for the command line.

Dates stored in a todo.txt file are always ``YYYY-MM-DD``; this module only
turns what a user types (``today``, ``next friday``, ``2024-12-25``) into a
``datetime.date``.
"""

from datetime import date, datetime, timedelta
from typing import Optional

import parsedatetime


class SmartDateParser:
    """Natural language date parser returning calendar dates."""

    def __init__(self, today: Optional[date] = None):
        self.cal = parsedatetime.Calendar()
        self.today = today or date.today()
        self.patterns = {
            "today": lambda: self.today,
            "tomorrow": lambda: self.today + timedelta(days=1),
            "yesterday": lambda: self.today - timedelta(days=1),
        }

    def parse(self, date_str: str) -> Optional[date]:
        """Parse ``date_str``, returning ``None`` if it is not recognized."""
        if not date_str:
            return None

        date_str = date_str.lower().strip()

        if date_str in self.patterns:
            return self.patterns[date_str]()

        try:
            return datetime.strptime(date_str, "%Y-%m-%d").date()
        except ValueError:
            pass

        source = datetime.combine(self.today, datetime.min.time())
        time_struct, parse_status = self.cal.parse(date_str, source)
        if parse_status > 0:
            return date(*time_struct[:3])

        return None


def parse_date_input(date_str: str, today: Optional[date] = None) -> date:
    """Parse user date input.

    Raises:
        ValueError: If the input is not a date parsedatetime understands
    """
    parsed = SmartDateParser(today=today).parse(date_str)
    if parsed is None:
        raise ValueError(f"Unrecognized date: {date_str!r}")
    return parsed
