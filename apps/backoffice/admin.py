"""Admin registration for the system log."""

from __future__ import annotations

from django.contrib import admin

from .models import SystemLog


@admin.register(SystemLog)
class SystemLogAdmin(admin.ModelAdmin):
    list_display = ("created_at", "level", "source", "message")
    list_filter = ("level", "source")
    search_fields = ("message",)
    readonly_fields = ("created_at",)
