"""Canonical Solar calendar implementation.

This module is the single source of truth for the Solar calendar used
across the project.  Every other module (moon, seasons, digest, views,
API) consumes the ``SolarDate`` values produced here.

The calendar has twelve 30-day months starting with "July", a 6-day week
and 5 intercalary Solstice days (6 in leap years) appended after month 12.
Year 0, month 1, day 1 falls on the Gregorian date ``EPOCH``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import List, Optional, Tuple

EPOCH: date = date(1999, 6, 24)
DAYS_PER_MONTH: int = 30
MONTHS_PER_YEAR: int = 12
REGULAR_DAYS: int = DAYS_PER_MONTH * MONTHS_PER_YEAR
DAYS_PER_WEEK: int = 6
BASE_SOLSTICE_DAYS: int = 5
# Solar years that hold the Gregorian dates 0001-01-01 .. 9999-12-31.
MIN_YEAR: int = -1999
MAX_YEAR: int = 8000

MONTH_NAMES: List[str] = [
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
]
WEEKDAY_NAMES: List[str] = [
    "Monday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]


class InvalidSolarDate(ValueError):
    """Raised when Solar date components are out of range."""


@dataclass(frozen=True)
class SolarDate:
    """A day in the Solar calendar.

    Regular days carry ``month`` 1-12, ``day`` 1-30 and a ``day_of_week``.
    Solstice days have ``month == 0``, ``day == solstice_day`` (1-6) and no
    weekday.
    """

    year: int
    month: int
    day: int
    day_of_week: Optional[int]
    day_of_year: int
    is_solstice_day: bool
    is_leap_year: bool
    solstice_day: Optional[int] = None

    @classmethod
    def regular(cls, year: int, month: int, day: int) -> "SolarDate":
        return cls(
            year=year,
            month=month,
            day=day,
            day_of_week=(day - 1) % DAYS_PER_WEEK,
            day_of_year=(month - 1) * DAYS_PER_MONTH + day,
            is_solstice_day=False,
            is_leap_year=is_leap_year(year),
        )

    @classmethod
    def solstice(cls, year: int, day: int) -> "SolarDate":
        return cls(
            year=year,
            month=0,
            day=day,
            day_of_week=None,
            day_of_year=REGULAR_DAYS + day,
            is_solstice_day=True,
            is_leap_year=is_leap_year(year),
            solstice_day=day,
        )

    def to_gregorian(self) -> date:
        return solar_to_gregorian(
            self.year,
            None if self.is_solstice_day else self.month,
            self.day,
            is_solstice_day=self.is_solstice_day,
        )


def is_leap_year(year: int) -> bool:
    """Return True if Solar ``year`` has six Solstice days.

    Python's ``%`` is floored, so negative years keep the 4-year period
    (year -4 is leap, year -1 is not).
    """

    return year % 4 == 0


def days_in_year(year: int) -> int:
    """Return the number of days in Solar ``year``."""

    return 366 if is_leap_year(year) else 365


def solstice_days_count(year: int) -> int:
    """Return how many Solstice days close ``year``."""

    return BASE_SOLSTICE_DAYS + (1 if is_leap_year(year) else 0)


def validate_parts(
    year: int, month: Optional[int], day: int, is_solstice_day: bool = False
) -> None:
    """Raise ``InvalidSolarDate`` unless the components name a real day."""

    if is_solstice_day:
        count = solstice_days_count(year)
        if not 1 <= day <= count:
            raise InvalidSolarDate(f"Solstice day must be 1-{count} in year {year}")
        return
    if month is None:
        raise InvalidSolarDate("month is required for a regular day")
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise InvalidSolarDate("month must be 1-12")
    if not 1 <= day <= DAYS_PER_MONTH:
        raise InvalidSolarDate("day must be 1-30")


def from_day_of_year(year: int, day_of_year: int) -> SolarDate:
    """Return the ``SolarDate`` at 1-based ``day_of_year`` of ``year``."""

    if not 1 <= day_of_year <= days_in_year(year):
        raise InvalidSolarDate("day-of-year out of range")
    if day_of_year > REGULAR_DAYS:
        return SolarDate.solstice(year, day_of_year - REGULAR_DAYS)
    month = (day_of_year - 1) // DAYS_PER_MONTH + 1
    day = (day_of_year - 1) % DAYS_PER_MONTH + 1
    return SolarDate.regular(year, month, day)


def year_start_offset(year: int) -> int:
    """Return the signed day offset of day 1 of ``year`` from ``EPOCH``."""

    if year >= 0:
        return sum(days_in_year(y) for y in range(0, year))
    return -sum(days_in_year(y) for y in range(year, 0))


def locate(days_since_epoch: int) -> Tuple[int, int]:
    """Return ``(year, remaining)`` for an offset from ``EPOCH``.

    ``remaining`` is the 0-based day within ``year``.  The walk is linear in
    the number of years crossed since year lengths alternate 365/366.
    """

    remaining = days_since_epoch
    if remaining >= 0:
        year = 0
        while remaining >= days_in_year(year):
            remaining -= days_in_year(year)
            year += 1
        return year, remaining

    year = -1
    remaining += days_in_year(year)
    while remaining < 0:
        year -= 1
        remaining += days_in_year(year)
    return year, remaining


def gregorian_to_solar(value: date | datetime) -> SolarDate:
    """Convert a Gregorian ``date`` (or ``datetime``) to a ``SolarDate``.

    A ``datetime`` is truncated to its own calendar date; no timezone
    conversion happens here.
    """

    if isinstance(value, datetime):
        value = value.date()
    elif not isinstance(value, date):
        raise TypeError(f"expected date or datetime, got {type(value).__name__}")
    year, remaining = locate((value - EPOCH).days)
    return from_day_of_year(year, remaining + 1)


def solar_to_gregorian(
    year: int,
    month: Optional[int],
    day: int,
    is_solstice_day: bool = False,
) -> date:
    """Convert Solar components to the Gregorian ``date``.

    ``month`` is ignored (and may be ``None``) for Solstice days.
    """

    validate_parts(year, month, day, is_solstice_day)
    if is_solstice_day:
        day_of_year = REGULAR_DAYS + day
    else:
        day_of_year = (month - 1) * DAYS_PER_MONTH + day
    return EPOCH + timedelta(days=year_start_offset(year) + day_of_year - 1)


def get_month_days(year: int, month: int) -> List[SolarDate]:
    """Return the 30 days of ``month`` in ``year`` in order."""

    if not 1 <= month <= MONTHS_PER_YEAR:
        raise InvalidSolarDate("month must be 1-12")
    return [SolarDate.regular(year, month, d) for d in range(1, DAYS_PER_MONTH + 1)]


def get_solstice_days(year: int) -> List[SolarDate]:
    """Return the Solstice days closing ``year`` (5, or 6 when leap)."""

    return [SolarDate.solstice(year, d) for d in range(1, solstice_days_count(year) + 1)]


def is_same_solar_day(a: SolarDate, b: SolarDate) -> bool:
    """Return True if ``a`` and ``b`` denote the same Solar day."""

    if a.is_solstice_day != b.is_solstice_day or a.year != b.year:
        return False
    if a.is_solstice_day:
        return a.solstice_day == b.solstice_day
    return a.month == b.month and a.day == b.day
