"""Solar calendar helper utilities: names, formatting, parsing, windows."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timedelta
from typing import Any

from django.core.exceptions import ValidationError

from . import core

SOLSTICE_MARK = "SD"
SOLSTICE_ABBREV = "✨"
GREGORIAN_WEEKDAY_ABBREV = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

_STORAGE_RE = re.compile(r"(-?\d{1,6})-(\d{1,2}|SD)-(\d{1,2})", re.IGNORECASE)
_DMY_RE = re.compile(r"(\d{1,2})-(\d{1,2})-(\d{1,6})")

ERR_MSG = "Date must be YYYY-MM-DD, YYYY-SD-DD or DD-MM-YYYY (Solar)"


# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------


def month_name(month: int) -> str:
    if not 1 <= month <= core.MONTHS_PER_YEAR:
        raise core.InvalidSolarDate("month must be 1-12")
    return core.MONTH_NAMES[month - 1]


def day_name(solar_date: core.SolarDate) -> str | None:
    """Return the weekday name, ``None`` for Solstice days."""

    if solar_date.day_of_week is None:
        return None
    return core.WEEKDAY_NAMES[solar_date.day_of_week]


def day_abbrev(solar_date: core.SolarDate) -> str:
    name = day_name(solar_date)
    return name[:3] if name else SOLSTICE_ABBREV


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def format_solar_date(solar_date: core.SolarDate) -> str:
    """Return ``"July 1, Year 0"`` or ``"Solstice Day 3, Y0–1"``."""

    if solar_date.is_solstice_day:
        return (
            f"Solstice Day {solar_date.solstice_day}, "
            f"Y{solar_date.year}–{solar_date.year + 1}"
        )
    return f"{month_name(solar_date.month)} {solar_date.day}, Year {solar_date.year}"


def format_short_solar_date(solar_date: core.SolarDate) -> str:
    if solar_date.is_solstice_day:
        return f"Sol {solar_date.solstice_day}"
    return f"{month_name(solar_date.month)[:3]} {solar_date.day}"


def format_gregorian_date(value: date) -> str:
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


def format_short_gregorian_date(value: date) -> str:
    return f"{value:%b} {value.day}"


# ---------------------------------------------------------------------------
# Storage / parsing
# ---------------------------------------------------------------------------


def _year_str(year: int) -> str:
    return f"-{abs(year):04d}" if year < 0 else f"{year:04d}"


def to_storage(solar_date: core.SolarDate) -> str:
    """Format to storage ``YYYY-MM-DD`` (``YYYY-SD-DD`` for Solstice days)."""

    if solar_date.is_solstice_day:
        return f"{_year_str(solar_date.year)}-{SOLSTICE_MARK}-{solar_date.solstice_day:02d}"
    return f"{_year_str(solar_date.year)}-{solar_date.month:02d}-{solar_date.day:02d}"


def build(year: int, month: int | None, day: int, is_solstice_day: bool = False) -> core.SolarDate:
    """Validate components and return the matching ``SolarDate``."""

    core.validate_parts(year, month, day, is_solstice_day)
    if is_solstice_day:
        return core.SolarDate.solstice(year, day)
    return core.SolarDate.regular(year, month, day)


def _split_month(token: Any) -> tuple[int | None, bool]:
    if isinstance(token, str) and token.strip().upper() == SOLSTICE_MARK:
        return None, True
    month = int(token)
    if month == 0:
        return None, True
    return month, False


_TRUE_FLAGS = {"1", "true", "yes", "on"}


def _as_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_FLAGS
    return bool(value)


def _from_string(value: str) -> tuple[int, int | None, int, bool]:
    match = _STORAGE_RE.fullmatch(value)
    if match:
        year_s, month_s, day_s = match.groups()
        month, solstice = _split_month(month_s)
        return int(year_s), month, int(day_s), solstice
    match = _DMY_RE.fullmatch(value)
    if match:
        day_s, month_s, year_s = match.groups()
        return int(year_s), int(month_s), int(day_s), False
    raise ValidationError(ERR_MSG)


def parse_solar_date(value: Any) -> core.SolarDate | None:
    """Tolerant parser for Solar calendar dates.

    Accepts multiple input types:

    * ``None``/``""``/``b""`` → ``None``
    * ``SolarDate`` → returned unchanged
    * ``date``/``datetime`` → converted from the Gregorian calendar
    * mapping with ``year``, ``month``, ``day`` and optional ``is_solstice_day``
    * ``tuple``/``list`` of three items ``(year, month, day)``; month ``"SD"``
      or ``0`` marks a Solstice day
    * ``bytes`` → decoded as UTF-8
    * ``str`` in formats ``YYYY-MM-DD``, ``YYYY-SD-DD`` or ``DD-MM-YYYY``

    Raises :class:`django.core.exceptions.ValidationError` on invalid input.
    """

    if value in (None, "", b""):
        return None

    if isinstance(value, core.SolarDate):
        return value

    if isinstance(value, date | datetime):
        return core.gregorian_to_solar(value)

    if isinstance(value, bytes):
        try:
            value = value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValidationError(ERR_MSG) from exc

    try:
        if isinstance(value, Mapping):
            solstice = _as_flag(value.get("is_solstice_day", False))
            month = value.get("month")
            if solstice or month in (None, ""):
                month = None
            else:
                month, solstice = _split_month(month)
            parts = (int(value["year"]), month, int(value["day"]), solstice)
        elif isinstance(value, list | tuple) and len(value) == 3:
            month, solstice = _split_month(value[1])
            parts = (int(value[0]), month, int(value[2]), solstice)
        elif isinstance(value, str):
            value = value.strip()
            if not value:
                return None
            parts = _from_string(value)
        else:
            raise ValidationError(ERR_MSG)
        return build(*parts)
    except ValidationError:
        raise
    except core.InvalidSolarDate as exc:
        raise ValidationError(str(exc)) from exc
    except (KeyError, TypeError, ValueError) as exc:
        raise ValidationError(ERR_MSG) from exc


def from_storage(value: str | bytes | Iterable[Any] | None) -> core.SolarDate | None:
    """Parse the storage format, returning ``None`` when parsing fails."""

    if value is None or value in ("", b"", "None"):
        return None
    try:
        return parse_solar_date(value)
    except ValidationError:
        return None


# ---------------------------------------------------------------------------
# Windows
# ---------------------------------------------------------------------------


def solar_week(solar_date: core.SolarDate) -> list[core.SolarDate]:
    """Return the six days of the week containing ``solar_date``.

    Solstice days are outside the weekly cycle and yield an empty list.
    """

    if solar_date.is_solstice_day:
        return []
    start = solar_date.day - solar_date.day_of_week
    return [
        core.SolarDate.regular(solar_date.year, solar_date.month, start + i)
        for i in range(core.DAYS_PER_WEEK)
    ]


def _shifted(today: date, offset: int) -> date | None:
    try:
        return today + timedelta(days=offset)
    except OverflowError:
        return None


def seven_day_window(today: date, radius: int = 3) -> list[tuple[date, core.SolarDate]]:
    """Return ``(gregorian, solar)`` pairs from ``today - radius`` to ``today + radius``.

    Days before ``date.min`` or after ``date.max`` are left out.
    """

    days = []
    for offset in range(-radius, radius + 1):
        d = _shifted(today, offset)
        if d is not None:
            days.append((d, core.gregorian_to_solar(d)))
    return days


def gregorian_week(today: date) -> list[date]:
    """Return the Gregorian week (Sunday to Saturday) containing ``today``.

    Like :func:`seven_day_window`, days outside the ``date`` range are dropped.
    """

    back = (today.weekday() + 1) % 7
    days = (_shifted(today, i - back) for i in range(7))
    return [d for d in days if d is not None]


def year_progress(solar_date: core.SolarDate) -> tuple[int, int, int]:
    """Return ``(day_of_year, days_in_year, percent)``."""

    total = core.days_in_year(solar_date.year)
    return solar_date.day_of_year, total, round(solar_date.day_of_year / total * 100)


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------


def active_solar_date(request) -> core.SolarDate:
    """Return the session's chosen Solar date, or today in ``TIME_ZONE``."""

    from django.utils import timezone

    session = getattr(request, "session", None)
    stored = from_storage(session.get("solar_current_date")) if session is not None else None
    return stored or core.gregorian_to_solar(timezone.localdate())


def calendar_meta(year: int) -> dict[str, Any]:
    """Return calendar metadata for Solar ``year``."""

    return {
        "year": year,
        "is_leap_year": core.is_leap_year(year),
        "days_in_year": core.days_in_year(year),
        "solstice_days": core.solstice_days_count(year),
        "month_names": core.MONTH_NAMES,
        "weekday_names": core.WEEKDAY_NAMES,
    }
