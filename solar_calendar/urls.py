from django.urls import path

from . import converters  # noqa: F401 - registers "sint"
from . import views

app_name = "solar_calendar"

urlpatterns = [
    path("date/set/", views.set_solar_date, name="set_solar_date"),
    path("year/<sint:y>/meta/", views.year_meta, name="year_meta"),
    path("convert/", views.convert_to_gregorian, name="convert"),
]
