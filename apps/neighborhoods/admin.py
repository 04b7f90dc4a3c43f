"""Admin registration for neighborhoods."""

from __future__ import annotations

from django.contrib import admin

from .models import Neighborhood


@admin.register(Neighborhood)
class NeighborhoodAdmin(admin.ModelAdmin):
    list_display = ("name", "city", "walk_score", "transit_score", "active")
    list_filter = ("active", "city")
    search_fields = ("name", "city", "description")
