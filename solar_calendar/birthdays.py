"""Solar birthdays: the yearly anniversary of a birth date in Solar terms."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from . import core


@dataclass(frozen=True)
class SolarBirthday:
    month: Optional[int]
    day: int
    is_solstice_day: bool = False

    def observed_in(self, year: int) -> core.SolarDate:
        """Return the day the birthday is celebrated in Solar ``year``.

        Solstice Day 6 only exists in leap years; otherwise Solstice Day 5
        stands in for it.
        """

        if self.is_solstice_day:
            return core.SolarDate.solstice(year, min(self.day, core.solstice_days_count(year)))
        return core.SolarDate.regular(year, self.month, self.day)

    @property
    def label(self) -> str:
        if self.is_solstice_day:
            return f"Solstice Day {self.day}"
        return f"{core.MONTH_NAMES[self.month - 1]} {self.day}"


def solar_birthday(born: date) -> SolarBirthday:
    solar = core.gregorian_to_solar(born)
    if solar.is_solstice_day:
        return SolarBirthday(month=None, day=solar.solstice_day, is_solstice_day=True)
    return SolarBirthday(month=solar.month, day=solar.day)


def occurs_on(birthday: SolarBirthday, solar_date: core.SolarDate) -> bool:
    return core.is_same_solar_day(birthday.observed_in(solar_date.year), solar_date)


def next_birthday(birthday: SolarBirthday, today: date) -> Tuple[date, core.SolarDate, int]:
    """Return ``(gregorian, solar, days_until)`` of the next celebration.

    A birthday falling on ``today`` counts with ``days_until == 0``.
    """

    year = core.gregorian_to_solar(today).year
    observed = birthday.observed_in(year)
    when = observed.to_gregorian()
    if when < today:
        observed = birthday.observed_in(year + 1)
        when = observed.to_gregorian()
    return when, observed, (when - today).days


def solar_age(born: date, today: date) -> int:
    """Return the number of completed Solar years between ``born`` and ``today``."""

    if today < born:
        raise ValueError("today is before the birth date")
    birth = core.gregorian_to_solar(born)
    now = core.gregorian_to_solar(today)
    observed = solar_birthday(born).observed_in(now.year)
    age = now.year - birth.year
    if now.day_of_year < observed.day_of_year:
        age -= 1
    return age
