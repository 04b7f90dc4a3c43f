"""Admin registrations for properties domain."""

from __future__ import annotations

from django.contrib import admin

from .models import Location, Property


@admin.register(Property)
class PropertyAdmin(admin.ModelAdmin):
    list_display = (
        "title",
        "city",
        "property_type",
        "listing_type",
        "status",
        "price",
        "featured",
        "verified",
        "owner",
    )
    list_filter = ("status", "listing_type", "property_type", "featured", "verified")
    search_fields = ("title", "city", "address", "owner__email")
    prepopulated_fields = {"slug": ("title",)}
    readonly_fields = ("created_at", "updated_at")
    actions = ("mark_verified", "mark_featured")

    @admin.action(description="Mark selected properties as verified")
    def mark_verified(self, request, queryset):
        queryset.update(verified=True)

    @admin.action(description="Feature selected properties")
    def mark_featured(self, request, queryset):
        queryset.update(featured=True)


@admin.register(Location)
class LocationAdmin(admin.ModelAdmin):
    list_display = ("name", "city", "municipality_code", "active", "created_at")
    list_filter = ("active", "country")
    search_fields = ("name", "city", "municipality_code")
