"""Admin registrations for site content."""

from __future__ import annotations

from django.contrib import admin

from .models import FooterContent, PageContent, StaticPage


@admin.register(FooterContent)
class FooterContentAdmin(admin.ModelAdmin):
    list_display = ("section", "title", "position", "active")
    list_filter = ("section", "active")
    search_fields = ("title", "content")


@admin.register(PageContent)
class PageContentAdmin(admin.ModelAdmin):
    list_display = ("page_type", "section", "title", "position", "active")
    list_filter = ("page_type", "active")
    search_fields = ("title", "subtitle", "content")


@admin.register(StaticPage)
class StaticPageAdmin(admin.ModelAdmin):
    list_display = ("slug", "updated_at")
