from django.contrib import admin

from .models import SolarProfile


@admin.register(SolarProfile)
class SolarProfileAdmin(admin.ModelAdmin):
    list_display = ("user", "birthday", "solar_birthday", "updated_at")
    readonly_fields = ("solar_birthday",)
    search_fields = ("user__username", "user__email")
