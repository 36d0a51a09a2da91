"""Validators for Solar calendar dates."""

from django.core.exceptions import ValidationError

from . import core


def validate_solar_date_parts(
    year: int, month: int | None, day: int, is_solstice_day: bool = False
) -> None:
    """Validate numeric parts of a Solar date."""
    try:
        core.validate_parts(year, month, day, is_solstice_day)
    except core.InvalidSolarDate as exc:
        raise ValidationError(str(exc)) from exc
