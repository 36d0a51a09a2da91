from __future__ import annotations

from django import forms

from solar_calendar import core, utils
from solar_calendar.validators import validate_solar_date_parts


class SolarDateFormField(forms.Field):
    """\
    Text field for a Solar date.
    clean() returns the normalized storage string (YYYY-MM-DD or YYYY-SD-DD).
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("widget", forms.TextInput(attrs={"placeholder": "YYYY-MM-DD"}))
        super().__init__(*args, **kwargs)

    def to_python(self, value):
        if value in (None, ""):
            return ""
        solar = utils.parse_solar_date(value)
        return utils.to_storage(solar) if solar else ""


class SolarConvertForm(forms.Form):
    """Solar components to convert into a Gregorian date."""

    year = forms.IntegerField(min_value=core.MIN_YEAR, max_value=core.MAX_YEAR)
    month = forms.IntegerField(required=False, min_value=1, max_value=12)
    day = forms.IntegerField(min_value=1, max_value=30)
    is_solstice_day = forms.BooleanField(required=False)

    def clean(self):
        cleaned = super().clean()
        if self.errors:
            return cleaned
        validate_solar_date_parts(
            cleaned["year"],
            cleaned.get("month"),
            cleaned["day"],
            cleaned.get("is_solstice_day", False),
        )
        return cleaned
