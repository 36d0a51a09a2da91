from __future__ import annotations

import logging
from datetime import datetime, time

from django.conf import settings
from django.utils import timezone
from rest_framework import permissions, serializers
from rest_framework.response import Response
from rest_framework.views import APIView

from solar_calendar import birthdays, core, moon, seasons, utils
from solar_calendar.digest import build_daily_digest
from solar_calendar.models import SolarProfile

from .serializers import (
    BirthdayQuerySerializer,
    GregorianQuerySerializer,
    MoonPhaseSerializer,
    ProfileSerializer,
    SolarDateSerializer,
    SolarQuerySerializer,
)

logger = logging.getLogger(__name__)


def _check_year(year: int) -> None:
    if not core.MIN_YEAR <= year <= core.MAX_YEAR:
        raise serializers.ValidationError(f"year must be {core.MIN_YEAR}..{core.MAX_YEAR}")


def _query_date(request):
    query = GregorianQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    return query.validated_data.get("date") or timezone.localdate()


class TodayView(APIView):
    def get(self, request):
        day = _query_date(request)
        return Response(build_daily_digest(day, url=getattr(settings, "SOLAR_WEBSITE_URL", None)))


class ToSolarView(APIView):
    def get(self, request):
        solar = core.gregorian_to_solar(_query_date(request))
        return Response(SolarDateSerializer(solar).data)


class ToGregorianView(APIView):
    def get(self, request):
        query = SolarQuerySerializer(data=request.query_params)
        if not query.is_valid():
            logger.info("rejected solar query %s: %s", dict(request.query_params), query.errors)
            raise serializers.ValidationError(query.errors)
        data = query.validated_data
        try:
            result = core.solar_to_gregorian(
                data["year"],
                data.get("month"),
                data["day"],
                is_solstice_day=data["is_solstice_day"],
            )
        except OverflowError as exc:
            raise serializers.ValidationError("date out of range") from exc
        return Response(
            {
                "date": result.isoformat(),
                "text": utils.format_gregorian_date(result),
                "solar": SolarDateSerializer(core.gregorian_to_solar(result)).data,
            }
        )


class MonthDaysView(APIView):
    def get(self, request, year: int, month: int):
        _check_year(year)
        try:
            days = core.get_month_days(year, month)
        except core.InvalidSolarDate as exc:
            raise serializers.ValidationError(str(exc)) from exc
        return Response(
            {
                "year": year,
                "month": month,
                "month_name": utils.month_name(month),
                "days": SolarDateSerializer(days, many=True).data,
            }
        )


class SolsticeDaysView(APIView):
    def get(self, request, year: int):
        _check_year(year)
        days = core.get_solstice_days(year)
        return Response(
            {
                "year": year,
                "is_leap_year": core.is_leap_year(year),
                "days": SolarDateSerializer(days, many=True).data,
            }
        )


class MoonPhaseView(APIView):
    def get(self, request):
        day = _query_date(request)
        phase = moon.get_moon_phase(day)
        side, fraction = moon.moon_phase_icon(phase.phase)
        return Response(
            {
                **MoonPhaseSerializer(phase).data,
                "date": day.isoformat(),
                "illuminated_side": side,
                "illumination_fraction": fraction,
                "is_significant": moon.is_significant_phase(day),
            }
        )


class SeasonView(APIView):
    def get(self, request):
        day = _query_date(request)
        solar = core.gregorian_to_solar(day)
        wheel = seasons.wheel_position(solar)
        marker = seasons.nearest_marker(solar)
        month_season = seasons.season_for_month(solar)
        return Response(
            {
                "date": day.isoformat(),
                "solar": utils.to_storage(solar),
                "season": month_season.name if month_season else None,
                "emoji": seasons.season_emoji(solar),
                "color": seasons.season_color(solar),
                "wheel": {
                    "angle": wheel.angle,
                    "season": wheel.season.name,
                    "peak_event": wheel.season.peak_event,
                    "progress": wheel.progress,
                },
                "nearest_marker": {
                    "name": marker.name,
                    "day_of_year": marker.day_of_year,
                    "days": marker.days,
                },
            }
        )


def _birthday_data(born, today) -> dict:
    if today < born:
        raise serializers.ValidationError("date is before the birth date")
    birthday = birthdays.solar_birthday(born)
    try:
        when, solar, days_until = birthdays.next_birthday(birthday, today)
    except OverflowError as exc:
        raise serializers.ValidationError("date out of range") from exc
    return {
        "born": born.isoformat(),
        "solar_born": utils.to_storage(core.gregorian_to_solar(born)),
        "birthday": {
            "month": birthday.month,
            "day": birthday.day,
            "is_solstice_day": birthday.is_solstice_day,
            "text": birthday.label,
        },
        "next": {
            "date": when.isoformat(),
            "solar": utils.to_storage(solar),
            "text": utils.format_solar_date(solar),
            "days_until": days_until,
        },
        "age": birthdays.solar_age(born, today),
    }


class BirthdayView(APIView):
    def get(self, request):
        query = BirthdayQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        data = query.validated_data
        return Response(_birthday_data(data["born"], data.get("date") or timezone.localdate()))


class CountdownView(APIView):
    """Nearest solstice or equinox to ``?date=`` (noon local time) or to now."""

    def get(self, request):
        query = GregorianQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        day = query.validated_data.get("date")
        if day is None:
            now = timezone.localtime()
        else:
            now = datetime.combine(day, time(12), tzinfo=timezone.get_current_timezone())
        distance = seasons.nearest_astronomical_event(now)
        event = distance.event
        return Response(
            {
                "name": event.name,
                "short_name": event.short_name,
                "when": event.when.isoformat(),
                "icon": event.icon,
                "color": event.color,
                "days": distance.days,
                "hours": distance.hours,
                "minutes": distance.minutes,
                "seconds": distance.seconds,
                "is_past": distance.is_past,
                "is_now": distance.is_now,
            }
        )


class ProfileView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def _payload(self, profile: SolarProfile) -> dict:
        data = dict(ProfileSerializer(profile).data)
        today = timezone.localdate()
        born = profile.birthday
        data["details"] = _birthday_data(born, today) if born and born <= today else None
        return data

    def get(self, request):
        profile, _ = SolarProfile.objects.get_or_create(user=request.user)
        return Response(self._payload(profile))

    def put(self, request):
        profile, _ = SolarProfile.objects.get_or_create(user=request.user)
        serializer = ProfileSerializer(profile, data=request.data)
        serializer.is_valid(raise_exception=True)
        profile = serializer.save()
        logger.info("birthday of user %s set to %s", request.user.pk, profile.birthday)
        return Response(self._payload(profile))
