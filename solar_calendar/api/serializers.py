from __future__ import annotations

from rest_framework import serializers

from solar_calendar import core, utils
from solar_calendar.models import SolarProfile


class SolarDateSerializer(serializers.Serializer):
    year = serializers.IntegerField()
    month = serializers.IntegerField()
    day = serializers.IntegerField()
    day_of_week = serializers.IntegerField(allow_null=True)
    day_of_year = serializers.IntegerField()
    is_solstice_day = serializers.BooleanField()
    solstice_day = serializers.IntegerField(allow_null=True)
    is_leap_year = serializers.BooleanField()
    day_name = serializers.SerializerMethodField()
    text = serializers.SerializerMethodField()
    storage = serializers.SerializerMethodField()
    gregorian = serializers.SerializerMethodField()

    def get_day_name(self, obj: core.SolarDate) -> str | None:
        return utils.day_name(obj)

    def get_text(self, obj: core.SolarDate) -> str:
        return utils.format_solar_date(obj)

    def get_storage(self, obj: core.SolarDate) -> str:
        return utils.to_storage(obj)

    def get_gregorian(self, obj: core.SolarDate) -> str | None:
        try:
            return obj.to_gregorian().isoformat()
        except OverflowError:
            return None


class GregorianQuerySerializer(serializers.Serializer):
    date = serializers.DateField(required=False)


class SolarQuerySerializer(serializers.Serializer):
    year = serializers.IntegerField(min_value=core.MIN_YEAR, max_value=core.MAX_YEAR)
    month = serializers.IntegerField(required=False, allow_null=True)
    day = serializers.IntegerField()
    is_solstice_day = serializers.BooleanField(default=False)

    def validate(self, attrs):
        try:
            core.validate_parts(
                attrs["year"],
                attrs.get("month"),
                attrs["day"],
                attrs.get("is_solstice_day", False),
            )
        except core.InvalidSolarDate as exc:
            raise serializers.ValidationError(str(exc)) from exc
        return attrs


class MoonPhaseSerializer(serializers.Serializer):
    phase = serializers.FloatField()
    name = serializers.CharField()
    emoji = serializers.CharField()
    illumination = serializers.IntegerField()


class BirthdayQuerySerializer(serializers.Serializer):
    born = serializers.DateField()
    date = serializers.DateField(required=False)


class ProfileSerializer(serializers.ModelSerializer):
    class Meta:
        model = SolarProfile
        fields = ["birthday", "solar_birthday", "updated_at"]
        read_only_fields = ["solar_birthday", "updated_at"]
        extra_kwargs = {"birthday": {"required": True, "allow_null": False}}
