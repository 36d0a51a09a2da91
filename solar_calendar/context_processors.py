"""Context processors for the Solar calendar."""

from . import utils


def solar_today(request):
    """Expose the active Solar date and calendar metadata to templates."""
    solar = utils.active_solar_date(request)
    session = getattr(request, "session", None)
    return {
        "SOLAR_TODAY": solar,
        "SOLAR_TODAY_TEXT": utils.format_solar_date(solar),
        "SOLAR_CURRENT_DATE": session.get("solar_current_date", "") if session is not None else "",
        "SOLAR_CALENDAR_META": utils.calendar_meta(solar.year),
    }
