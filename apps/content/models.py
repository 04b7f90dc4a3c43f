"""Editable site content.

Footer links and page sections are ordered by ``position`` within their
section; static pages are plain HTML/markdown blobs addressed by slug.
"""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class FooterContent(models.Model):
    """Ссылка или блок текста в подвале сайта."""

    section = models.CharField(
        max_length=50,
        help_text=_("quick_links, property_types, locations, social_media, ..."),
    )
    title = models.CharField(max_length=255)
    content = models.TextField(blank=True)
    link = models.CharField(max_length=500, blank=True)
    icon = models.CharField(max_length=100, blank=True, help_text=_("Icon class, e.g. ri-facebook-fill"))
    position = models.PositiveIntegerField(default=0)
    active = models.BooleanField(default=True)
    open_in_new_tab = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["section", "position", "id"]
        indexes = [models.Index(fields=["section", "position"], name="footer_section_pos_idx")]

    def __str__(self) -> str:
        return f"{self.section}: {self.title}"


class PageContent(models.Model):
    """Секция страницы (hero, features, faq и т.д.)."""

    page_type = models.CharField(max_length=50, help_text=_("agents, neighborhoods, mortgage, ..."))
    section = models.CharField(max_length=50, help_text=_("hero, features, team, faq, ..."))
    title = models.CharField(max_length=255, blank=True)
    subtitle = models.CharField(max_length=255, blank=True)
    content = models.TextField(blank=True)
    image = models.CharField(max_length=500, blank=True)
    link = models.CharField(max_length=500, blank=True)
    link_text = models.CharField(max_length=100, blank=True)
    button_text = models.CharField(max_length=100, blank=True)
    position = models.PositiveIntegerField(default=0)
    active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["page_type", "section", "position", "id"]
        indexes = [
            models.Index(fields=["page_type", "section", "position"], name="page_content_type_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.page_type}/{self.section}: {self.title}"


class StaticPage(models.Model):
    slug = models.SlugField(max_length=100, primary_key=True)
    content = models.TextField(blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return self.slug
