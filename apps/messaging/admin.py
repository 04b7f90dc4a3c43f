"""Admin registrations for messages."""

from __future__ import annotations

from django.contrib import admin

from .models import Message


@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ("subject", "email", "status", "property", "recipient", "created_at")
    list_filter = ("status",)
    search_fields = ("subject", "message", "name", "email")
    readonly_fields = ("created_at",)
