"""
Clock collaborator - answers "what is today's date".

The date select builder only needs the current year, month and day, so the
clock is kept behind a one-method interface that tests can replace.
"""

__all__ = [
    "DateParts",
    "Clock",
    "SystemClock",
    "FixedClock",
]

import datetime
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class DateParts:
    """Calendar date split into its numeric components."""

    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, value) -> "DateParts":
        """Build from anything with year/month/day attributes (date, datetime)."""
        return cls(year=int(value.year), month=int(value.month), day=int(value.day))


class Clock(Protocol):
    def now(self) -> DateParts: ...


class SystemClock:
    """Clock backed by the local system date."""

    def now(self) -> DateParts:
        return DateParts.from_date(datetime.date.today())


class FixedClock:
    """
    Clock that always returns the same date.

    Example:
        >>> FixedClock(datetime.date(2024, 2, 29)).now()
        DateParts(year=2024, month=2, day=29)
    """

    def __init__(self, today: datetime.date):
        self.today = DateParts.from_date(today)

    def now(self) -> DateParts:
        return self.today
