from django.urls import path

from solar_calendar import converters  # noqa: F401 - registers "sint"

from . import views

urlpatterns = [
    path("today/", views.TodayView.as_view(), name="solar-today"),
    path("convert/to-solar/", views.ToSolarView.as_view(), name="solar-to-solar"),
    path("convert/to-gregorian/", views.ToGregorianView.as_view(), name="solar-to-gregorian"),
    path(
        "year/<sint:year>/month/<int:month>/",
        views.MonthDaysView.as_view(),
        name="solar-month-days",
    ),
    path(
        "year/<sint:year>/solstice/",
        views.SolsticeDaysView.as_view(),
        name="solar-solstice-days",
    ),
    path("moon/", views.MoonPhaseView.as_view(), name="solar-moon"),
    path("season/", views.SeasonView.as_view(), name="solar-season"),
    path("birthday/", views.BirthdayView.as_view(), name="solar-birthday"),
    path("countdown/", views.CountdownView.as_view(), name="solar-countdown"),
    path("profile/", views.ProfileView.as_view(), name="solar-profile"),
]
