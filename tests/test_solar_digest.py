import json
from datetime import date
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from solar_calendar.digest import (
    DEFAULT_DESCRIPTION,
    build_daily_digest,
    render_digest_text,
    seven_day_lines,
    solar_week_line,
)
from solar_calendar.core import SolarDate


def _field(digest, name):
    return next(f for f in digest["fields"] if f["name"] == name)


def test_digest_on_epoch():
    digest = build_daily_digest(date(1999, 6, 24), url="https://example.com")
    assert digest["title"] == "☀️ Today's Date"
    assert digest["color"] == "#f59e0b"
    assert digest["description"] == DEFAULT_DESCRIPTION
    assert digest["url"] == "https://example.com"
    assert digest["solar"] == "0000-01-01"
    assert _field(digest, "🌞 Solar Calendar")["value"] == "**Monday**\nJuly 1, Year 0"
    assert _field(digest, "📅 Gregorian Calendar")["value"] == "Thursday, June 24, 1999"
    assert _field(digest, "📊 Year Progress")["value"] == "Day 1 of 366 (0%)"
    assert "▶ **Mon Jul 1** · Jun 24" in _field(digest, "📆 7-Day View")["value"]
    assert not any(f["name"] == "🎉 Solstice Celebration!" for f in digest["fields"])


def test_digest_on_solstice_day():
    digest = build_daily_digest(date(2000, 6, 20), description="Custom")
    assert digest["title"] == "🌞 Today's Date"
    assert digest["color"] == "#ffd700"
    assert digest["description"] == "Custom"
    assert "Solstice Day 3" in _field(digest, "🎉 Solstice Celebration!")["value"]
    assert "outside regular weeks" in _field(digest, "🌞 Solar Week")["value"]


def test_seven_day_lines_mark_only_today():
    lines = seven_day_lines(date(1999, 6, 24))
    assert len(lines) == 7
    assert [line.startswith("▶") for line in lines] == [False] * 3 + [True] + [False] * 3
    assert lines[2] == "   ✨ Sol 5 · Jun 23"


def test_solar_week_line_highlights_day():
    line = solar_week_line(SolarDate.regular(0, 1, 2))
    assert line.startswith(" Mon 1 •**Wed 2**")


def test_render_digest_text():
    text = render_digest_text(build_daily_digest(date(1999, 6, 24)))
    assert text.splitlines()[0] == "☀️ Today's Date"
    assert "Solar Calendar • Click title to view full calendar" in text


def test_command_json_output():
    out = StringIO()
    call_command("solar_today", "--date", "1999-06-24", "--json", stdout=out)
    data = json.loads(out.getvalue())
    assert data["solar"] == "0000-01-01"
    assert data["date"] == "1999-06-24"


def test_command_text_output():
    out = StringIO()
    call_command("solar_today", "--date", "2000-06-20", "--description", "Hi", stdout=out)
    assert "🎉 Solstice Celebration!" in out.getvalue()
    assert "Hi" in out.getvalue()


def test_command_rejects_bad_date():
    with pytest.raises(CommandError):
        call_command("solar_today", "--date", "24.06.1999")


@pytest.mark.parametrize("day", [date.min, date.max])
def test_digest_at_the_edges_of_the_date_range(day):
    digest = build_daily_digest(day)
    assert digest["date"] == day.isoformat()
    week_line = _field(digest, "📅 Gregorian Week")["value"]
    assert f"**{'Mon' if day == date.min else 'Fri'} {day.day}**" in week_line


def test_gregorian_week_line_names_days():
    digest = build_daily_digest(date(1999, 6, 24))
    assert _field(digest, "📅 Gregorian Week")["value"] == (
        "` Sun 20  Mon 21  Tue 22  Wed 23 •**Thu 24**  Fri 25  Sat 26`"
    )


@pytest.mark.parametrize("day", ["0001-01-01", "9999-12-31"])
def test_command_at_the_edges_of_the_date_range(day):
    out = StringIO()
    call_command("solar_today", "--date", day, "--json", stdout=out)
    assert json.loads(out.getvalue())["date"] == day
