"""Calendar dates as used by the vaccine system."""

import re
from dataclasses import dataclass

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_DATE_PATTERN = re.compile(r"\s*([+-]?\d+)-\s*([+-]?\d+)-\s*([+-]?\d+)")


def is_leap_year(year):
    """Return True if the year is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


@dataclass(frozen=True, order=True)
class Date:
    """A day, ordered by year, then month, then day."""

    year: int
    month: int
    day: int

    def is_valid(self):
        """Return True if the date exists in the calendar."""
        if not 1 <= self.month <= 12:
            return False
        days = _DAYS_IN_MONTH[self.month - 1]
        if self.month == 2 and is_leap_year(self.year):
            days = 29
        return 1 <= self.day <= days

    def __str__(self):
        return f"{self.day:02d}-{self.month:02d}-{self.year:02d}"


def parse_date(text):
    """Parse the leading 'DD-MM-YYYY' of text; raise ValueError if absent."""
    match = _DATE_PATTERN.match(text)
    if match is None:
        raise ValueError(f"not a date: {text!r}")
    day, month, year = (int(group) for group in match.groups())
    return Date(year, month, day)