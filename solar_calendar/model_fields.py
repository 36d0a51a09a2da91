"""Django model fields for Solar calendar dates."""

from __future__ import annotations

from django.db import models

from . import core, utils
from .forms import SolarDateFormField


class SolarDateField(models.CharField):
    """Store Solar dates as normalized ``YYYY-MM-DD`` / ``YYYY-SD-DD`` strings.

    Gregorian ``date`` values assigned to the field are converted to the
    Solar calendar. Parsing and validation delegate to
    :mod:`solar_calendar.utils`, which relies on :mod:`solar_calendar.core`.
    """

    description = "Solar calendar date"

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("max_length", 16)
        super().__init__(*args, **kwargs)

    def _normalize(self, value) -> str:
        if value in (None, ""):
            return ""
        solar = utils.parse_solar_date(value)
        return utils.to_storage(solar) if solar else ""

    def to_python(self, value):
        return self._normalize(value)

    def get_prep_value(self, value):
        v = self._normalize(value)
        return v or None if self.null else v

    def from_db_value(self, value, expression, connection):
        return self._normalize(value)

    def formfield(self, **kwargs):
        defaults = {"form_class": SolarDateFormField}
        defaults.update(kwargs)
        return models.Field.formfield(self, **defaults)


def as_solar(value: str) -> core.SolarDate | None:
    """Return the ``SolarDate`` behind a stored field value."""

    return utils.from_storage(value)


__all__ = ["SolarDateField", "as_solar"]
