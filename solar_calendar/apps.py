from django.apps import AppConfig


class SolarCalendarConfig(AppConfig):
    name = "solar_calendar"
    verbose_name = "Solar calendar"
