from datetime import datetime, timezone

import pytest

from solar_calendar.core import SolarDate
from solar_calendar.seasons import (
    SEASONS,
    astronomical_events,
    nearest_astronomical_event,
    nearest_marker,
    season_color,
    season_emoji,
    season_for_month,
    wheel_position,
)


def test_season_for_month():
    assert season_for_month(SolarDate.regular(0, 1, 1)).name == "Summer"
    assert season_for_month(SolarDate.regular(0, 6, 30)).name == "Fall"
    assert season_for_month(SolarDate.regular(0, 7, 1)).name == "Winter"
    assert season_for_month(SolarDate.regular(0, 12, 30)).name == "Spring"
    assert season_for_month(SolarDate.solstice(0, 1)) is None


def test_solstice_presentation():
    assert season_emoji(SolarDate.solstice(0, 1)) == "🌞"
    assert season_color(SolarDate.solstice(0, 1)) == "#ffd700"
    assert season_emoji(SolarDate.regular(0, 8, 1)) == "❄️"


def test_seasons_cover_every_month_once():
    months = sorted(m for season in SEASONS for m in season.months)
    assert months == list(range(1, 13))


def test_wheel_origin_is_solstice_day_3():
    pos = wheel_position(SolarDate.solstice(1, 3))
    assert pos.angle == pytest.approx(0.0)
    assert pos.season.name == "Summer"
    assert pos.season.peak_event == "Summer Solstice"
    assert pos.progress == pytest.approx(0.5)


def test_wheel_quarters():
    assert wheel_position(SolarDate.regular(1, 4, 1)).season.name == "Fall"
    assert wheel_position(SolarDate.regular(1, 7, 1)).season.name == "Winter"
    assert wheel_position(SolarDate.regular(1, 10, 1)).season.name == "Spring"
    for day in range(1, 31):
        pos = wheel_position(SolarDate.regular(2, 5, day))
        assert 0 <= pos.angle < 360
        assert 0 <= pos.progress < 1


def test_nearest_marker():
    on = nearest_marker(SolarDate.regular(1, 3, 30))
    assert (on.name, on.days) == ("Fall Equinox", 0)
    after_new_year = nearest_marker(SolarDate.regular(1, 1, 1))
    assert (after_new_year.name, after_new_year.days) == ("Summer Solstice", -6)


def test_nearest_marker_tie_prefers_upcoming():
    # Day 135 is 45 days after the Fall Equinox and 45 before the Winter Solstice.
    marker = nearest_marker(SolarDate.regular(1, 5, 15))
    assert (marker.name, marker.days) == ("Winter Solstice", 45)


def test_astronomical_events():
    names = [e.name for e in astronomical_events(2024)]
    assert names == ["Summer Solstice", "Fall Equinox", "Winter Solstice", "Spring Equinox"]


def test_nearest_event_now():
    dist = nearest_astronomical_event(datetime(2024, 6, 21, 12))
    assert dist.event.name == "Summer Solstice"
    assert dist.is_now
    assert not dist.is_past
    assert dist.days == 0


def test_nearest_event_in_previous_year():
    dist = nearest_astronomical_event(datetime(2024, 1, 1))
    assert dist.event.name == "Winter Solstice"
    assert dist.event.when.year == 2023
    assert dist.is_past
    assert not dist.is_now
    assert (dist.days, dist.hours, dist.minutes, dist.seconds) == (10, 12, 0, 0)


def test_nearest_event_aware_datetime():
    dist = nearest_astronomical_event(datetime(2024, 9, 20, 12, tzinfo=timezone.utc))
    assert dist.event.name == "Fall Equinox"
    assert dist.event.when.tzinfo is timezone.utc
    assert dist.days == 2


def test_nearest_event_at_the_edges_of_the_date_range():
    last = nearest_astronomical_event(datetime(9999, 12, 31, 12))
    assert last.event.name == "Winter Solstice"
    assert last.days == 10
    first = nearest_astronomical_event(datetime(1, 1, 1, 12))
    assert first.event.name == "Spring Equinox"
    assert not first.is_past
