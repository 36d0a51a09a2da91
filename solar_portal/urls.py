from django.contrib import admin
from django.urls import include, path

from solar_calendar import converters  # noqa: F401 - registers "sint"
from solar_calendar import views as calendar_views

urlpatterns = [
    path("admin/", admin.site.urls),
    path("solar/", include("solar_calendar.urls")),
    path("api/solar/", include("solar_calendar.api.urls")),
    path(
        "api/solar/year/<sint:y>/meta",
        calendar_views.year_meta,
        name="solar-calendar-year-meta",
    ),
]
