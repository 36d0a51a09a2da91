"""Seasons, the season wheel and the solstice/equinox markers.

Solstice and equinox dates are fixed approximations, not astronomical
computations.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, datetime, timedelta
from typing import List, Optional, Tuple

from . import core

SOLSTICE_EMOJI = "🌞"
SOLSTICE_COLOR = "#ffd700"
# Day of year that sits at the top (0 deg) of the wheel: Solstice Day 3.
WHEEL_ORIGIN = 363


@dataclass(frozen=True)
class Season:
    name: str
    months: Tuple[int, int, int]
    start_angle: int
    end_angle: int
    peak_event: str
    peak_angle: int
    emoji: str
    color: str

    @property
    def span(self) -> int:
        return (self.end_angle - self.start_angle) % 360

    def contains(self, angle: float) -> bool:
        if self.start_angle > self.end_angle:
            return angle >= self.start_angle or angle < self.end_angle
        return self.start_angle <= angle < self.end_angle


SEASONS: List[Season] = [
    Season("Summer", (1, 2, 3), 315, 45, "Summer Solstice", 0, "☀️", "#f59e0b"),
    Season("Fall", (4, 5, 6), 45, 135, "Fall Equinox", 90, "🍂", "#dc2626"),
    Season("Winter", (7, 8, 9), 135, 225, "Winter Solstice", 180, "❄️", "#3b82f6"),
    Season("Spring", (10, 11, 12), 225, 315, "Spring Equinox", 270, "🌸", "#22c55e"),
]

DAY_OF_YEAR_MARKERS: List[Tuple[int, str]] = [
    (90, "Fall Equinox"),
    (180, "Winter Solstice"),
    (270, "Spring Equinox"),
    (360, "Summer Solstice"),
]


@dataclass(frozen=True)
class WheelPosition:
    angle: float
    season: Season
    progress: float


@dataclass(frozen=True)
class MarkerDistance:
    name: str
    day_of_year: int
    days: int  # signed: negative = already passed


@dataclass(frozen=True)
class AstronomicalEvent:
    name: str
    short_name: str
    when: datetime
    icon: str
    color: str


@dataclass(frozen=True)
class EventDistance:
    event: AstronomicalEvent
    days: int
    hours: int
    minutes: int
    seconds: int
    is_past: bool
    is_now: bool


def season_for_month(solar_date: core.SolarDate) -> Optional[Season]:
    """Return the season of the date's month, ``None`` on Solstice days."""

    if solar_date.is_solstice_day:
        return None
    for season in SEASONS:
        if solar_date.month in season.months:
            return season
    raise core.InvalidSolarDate("month must be 1-12")


def season_emoji(solar_date: core.SolarDate) -> str:
    season = season_for_month(solar_date)
    return season.emoji if season else SOLSTICE_EMOJI


def season_color(solar_date: core.SolarDate) -> str:
    season = season_for_month(solar_date)
    return season.color if season else SOLSTICE_COLOR


def season_from_angle(angle: float) -> Season:
    angle = angle % 360
    for season in SEASONS:
        if season.contains(angle):
            return season
    return SEASONS[0]  # pragma: no cover


def wheel_position(solar_date: core.SolarDate) -> WheelPosition:
    """Place ``solar_date`` on the season wheel (0 deg = Solstice Day 3)."""

    total = core.days_in_year(solar_date.year)
    offset = (solar_date.day_of_year - WHEEL_ORIGIN + total) % total
    angle = offset / total * 360
    season = season_from_angle(angle)
    progress = ((angle - season.start_angle) % 360) / season.span
    return WheelPosition(angle=angle, season=season, progress=progress)


def nearest_marker(solar_date: core.SolarDate) -> MarkerDistance:
    """Return the closest day-of-year marker, measured around the year.

    On a tie between a passed and an upcoming marker the upcoming one wins.
    """

    total = core.days_in_year(solar_date.year)
    best: Optional[Tuple[Tuple[int, int], MarkerDistance]] = None
    for doy, name in DAY_OF_YEAR_MARKERS:
        ahead = (doy - solar_date.day_of_year) % total
        behind = ahead - total
        days = ahead if ahead <= -behind else behind
        key = (abs(days), 1 if days < 0 else 0)
        if best is None or key < best[0]:
            best = (key, MarkerDistance(name=name, day_of_year=doy, days=days))
    return best[1]


def astronomical_events(year: int) -> List[AstronomicalEvent]:
    """Return the approximate solstices/equinoxes of Gregorian ``year``."""

    return [
        AstronomicalEvent("Summer Solstice", "Summer", datetime(year, 6, 21, 12), "sun", "#f59e0b"),
        AstronomicalEvent("Fall Equinox", "Fall", datetime(year, 9, 22, 12), "equinox", "#dc2626"),
        AstronomicalEvent("Winter Solstice", "Winter", datetime(year, 12, 21, 12), "sun", "#3b82f6"),
        AstronomicalEvent("Spring Equinox", "Spring", datetime(year, 3, 20, 12), "equinox", "#22c55e"),
    ]


def nearest_astronomical_event(now: datetime) -> EventDistance:
    """Return the event closest to ``now`` among last, this and next year.

    Event times take the ``tzinfo`` of ``now``. On equal distance the
    earlier event wins.
    """

    candidates = []
    for year in range(max(now.year - 1, MINYEAR), min(now.year + 1, MAXYEAR) + 1):
        for event in astronomical_events(year):
            candidates.append(
                AstronomicalEvent(
                    event.name,
                    event.short_name,
                    event.when.replace(tzinfo=now.tzinfo),
                    event.icon,
                    event.color,
                )
            )
    candidates.sort(key=lambda e: e.when)

    nearest = candidates[0]
    nearest_diff = nearest.when - now
    for event in candidates[1:]:
        diff = event.when - now
        if abs(diff) < abs(nearest_diff):
            nearest, nearest_diff = event, diff

    remaining = abs(nearest_diff)
    total_seconds = int(remaining.total_seconds())
    return EventDistance(
        event=nearest,
        days=remaining.days,
        hours=(total_seconds % 86400) // 3600,
        minutes=(total_seconds % 3600) // 60,
        seconds=total_seconds % 60,
        is_past=nearest_diff < timedelta(0),
        is_now=remaining < timedelta(hours=12),
    )
