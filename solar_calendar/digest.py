"""Daily digest: today in both calendars, as posted by the chat bot.

The digest is a plain dict so the API can return it as JSON and the
``solar_today`` command can print it.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from . import core, moon, seasons, utils

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION = "Here's today in both calendars:"


def seven_day_lines(today: date) -> list[str]:
    lines = []
    for d, solar in utils.seven_day_window(today):
        is_today = d == today
        marker = "▶" if is_today else "  "
        highlight = "**" if is_today else ""
        lines.append(
            f"{marker} {highlight}{utils.day_abbrev(solar)} "
            f"{utils.format_short_solar_date(solar)}{highlight} · "
            f"{utils.format_short_gregorian_date(d)}"
        )
    return lines


def solar_week_line(solar_date: core.SolarDate) -> str:
    week = utils.solar_week(solar_date)
    if not week:
        return "✨ _Solstice Days - outside regular weeks_"
    parts = []
    for solar in week:
        is_today = solar.day == solar_date.day
        highlight = "**" if is_today else ""
        marker = "•" if is_today else " "
        parts.append(f"{marker}{highlight}{utils.day_abbrev(solar)} {solar.day}{highlight}")
    return " ".join(parts)


def gregorian_week_line(today: date) -> str:
    parts = []
    for d in utils.gregorian_week(today):
        is_today = d == today
        highlight = "**" if is_today else ""
        marker = "•" if is_today else " "
        abbrev = utils.GREGORIAN_WEEKDAY_ABBREV[d.isoweekday() % 7]
        parts.append(f"{marker}{highlight}{abbrev} {d.day}{highlight}")
    return " ".join(parts)


def build_daily_digest(
    today: date, description: str | None = None, url: str | None = None
) -> dict[str, Any]:
    """Return the digest for ``today`` as a JSON-serialisable dict."""

    solar = core.gregorian_to_solar(today)
    solar_text = utils.format_solar_date(solar)
    weekday = utils.day_name(solar)
    if weekday:
        solar_value = f"**{weekday}**\n{solar_text}"
    else:
        solar_value = f"**{solar_text}**\n✨ _Outside the regular week_"

    fields = [
        {"name": "🌞 Solar Calendar", "value": solar_value, "inline": True},
        {
            "name": "📅 Gregorian Calendar",
            "value": utils.format_gregorian_date(today),
            "inline": True,
        },
    ]
    if solar.is_solstice_day:
        fields.append(
            {
                "name": "🎉 Solstice Celebration!",
                "value": (
                    f"Today is **Solstice Day {solar.solstice_day}**, a special day "
                    "outside the regular calendar for celebration and reflection!"
                ),
                "inline": False,
            }
        )

    day_of_year, total, percent = utils.year_progress(solar)
    phase = moon.get_moon_phase(today)
    fields += [
        {
            "name": "📆 7-Day View",
            "value": "```\n" + "\n".join(seven_day_lines(today)) + "\n```",
            "inline": False,
        },
        {"name": "🌞 Solar Week", "value": f"`{solar_week_line(solar)}`", "inline": False},
        {
            "name": "📅 Gregorian Week",
            "value": f"`{gregorian_week_line(today)}`",
            "inline": False,
        },
        {
            "name": "📊 Year Progress",
            "value": f"Day {day_of_year} of {total} ({percent}%)",
            "inline": False,
        },
        {
            "name": f"{phase.emoji} Moon",
            "value": f"{phase.name} ({phase.illumination}% illuminated)",
            "inline": False,
        },
    ]

    logger.debug("digest built for %s (%s)", today.isoformat(), utils.to_storage(solar))
    return {
        "title": f"{seasons.season_emoji(solar)} Today's Date",
        "description": description or DEFAULT_DESCRIPTION,
        "color": seasons.season_color(solar),
        "url": url,
        "date": today.isoformat(),
        "solar": utils.to_storage(solar),
        "fields": fields,
        "footer": "Solar Calendar • Click title to view full calendar",
    }


def render_digest_text(digest: dict[str, Any]) -> str:
    """Render a digest dict as plain text."""

    lines = [digest["title"], digest["description"], ""]
    for field in digest["fields"]:
        lines.append(field["name"])
        lines.append(field["value"])
        lines.append("")
    lines.append(digest["footer"])
    return "\n".join(lines)
