from datetime import date

import pytest

from . import core
from .utils import format_solar_date, from_storage, parse_solar_date, to_storage


def test_epoch_is_year_0_july_1():
    s = core.gregorian_to_solar(core.EPOCH)
    assert (s.year, s.month, s.day) == (0, 1, 1)
    assert s.day_of_week == 0
    assert s.day_of_year == 1
    assert not s.is_solstice_day


def test_year_pivots():
    assert core.gregorian_to_solar(date(2000, 6, 24)).year == 1
    assert core.gregorian_to_solar(date(2001, 6, 24)).year == 2
    assert core.gregorian_to_solar(date(2004, 6, 23)).year == 4
    assert core.gregorian_to_solar(date(1998, 6, 24)).year == -1
    assert core.gregorian_to_solar(date(1995, 6, 24)).year == -4


def test_leap_years_every_fourth():
    assert core.is_leap_year(0)
    assert not core.is_leap_year(1)
    assert not core.is_leap_year(2)
    assert not core.is_leap_year(3)
    assert core.is_leap_year(4)
    assert core.is_leap_year(-4)
    assert not core.is_leap_year(-1)


def test_year_lengths_sum_months_and_solstice_days():
    for y in range(-5, 6):
        assert core.REGULAR_DAYS + len(core.get_solstice_days(y)) == core.days_in_year(y)


def test_parse_and_format():
    s = parse_solar_date("25-04-0026")
    assert (s.year, s.month, s.day) == (26, 4, 25)
    stored = to_storage(s)
    assert stored == "0026-04-25"
    assert from_storage(stored) == s
    assert format_solar_date(s) == "October 25, Year 26"


def test_invalid_solstice_day():
    with pytest.raises(core.InvalidSolarDate):
        core.solar_to_gregorian(1, None, 6, is_solstice_day=True)
