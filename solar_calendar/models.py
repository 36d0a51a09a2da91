from __future__ import annotations

from django.conf import settings
from django.db import models

from . import core, utils
from .model_fields import SolarDateField


class SolarProfile(models.Model):
    """Per-user calendar preferences; the birthday is kept in both calendars."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="solar_profile",
    )
    birthday = models.DateField(null=True, blank=True)
    solar_birthday = SolarDateField(blank=True, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Solar profile"

    def __str__(self) -> str:
        return f"{self.user} ({self.solar_birthday or 'no birthday'})"

    def save(self, *args, **kwargs):
        if self.birthday:
            self.solar_birthday = utils.to_storage(core.gregorian_to_solar(self.birthday))
        else:
            self.solar_birthday = ""
        super().save(*args, **kwargs)
