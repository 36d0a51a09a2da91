"""Moon phase derived from a fixed synodic month (no ephemeris)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timezone

# Average new moon to new moon interval, in days.
SYNODIC_MONTH = 29.53059
# Reference new moon: 2000-01-06 18:14 UTC
KNOWN_NEW_MOON = datetime(2000, 1, 6, 18, 14, tzinfo=timezone.utc)

_PHASES = [
    (0.0625, "New Moon", "🌑"),
    (0.1875, "Waxing Crescent", "🌒"),
    (0.3125, "First Quarter", "🌓"),
    (0.4375, "Waxing Gibbous", "🌔"),
    (0.5625, "Full Moon", "🌕"),
    (0.6875, "Waning Gibbous", "🌖"),
    (0.8125, "Last Quarter", "🌗"),
    (0.9375, "Waning Crescent", "🌘"),
    (1.0, "New Moon", "🌑"),
]


@dataclass(frozen=True)
class MoonPhase:
    phase: float  # 0..1, 0 = new moon, 0.5 = full moon
    name: str
    emoji: str
    illumination: int  # percent


def _as_utc(value: date | datetime | None) -> datetime:
    if value is None:
        return datetime.now(timezone.utc)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    return datetime.combine(value, time(0, 0), tzinfo=timezone.utc)


def _cycle_position(value: date | datetime | None) -> float:
    days = (_as_utc(value) - KNOWN_NEW_MOON).total_seconds() / 86400
    cycles = days / SYNODIC_MONTH
    return cycles - math.floor(cycles)


def get_moon_phase(value: date | datetime | None = None) -> MoonPhase:
    """Return the moon phase for ``value`` (naive datetimes are UTC)."""

    phase = _cycle_position(value)
    illumination = round((1 - math.cos(phase * 2 * math.pi)) / 2 * 100)
    for limit, name, emoji in _PHASES:
        if phase < limit:
            return MoonPhase(phase, name, emoji, illumination)
    return MoonPhase(phase, "New Moon", "🌑", illumination)  # pragma: no cover


def moon_phase_icon(phase: float) -> tuple[str, float]:
    """Return ``(illuminated_side, fraction)`` for drawing a moon icon."""

    if phase < 0.03 or phase > 0.97:
        return "none", 0.0
    if phase < 0.47:
        return "right", phase * 2
    if phase < 0.53:
        return "full", 1.0
    return "left", (1 - phase) * 2


def is_significant_phase(value: date | datetime | None = None) -> bool:
    """True within about a day of new, first quarter, full or last quarter."""

    phase = _cycle_position(value)
    tolerance = 1 / SYNODIC_MONTH
    return any(abs(phase - target) < tolerance for target in (0.0, 0.25, 0.5, 0.75, 1.0))
