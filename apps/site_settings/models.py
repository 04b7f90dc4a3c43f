"""Key/value storage for site-wide settings."""

from __future__ import annotations

from django.db import models  # type: ignore


class SiteSetting(models.Model):
    """Одна запись настроек: ключ и JSON-значение."""

    key = models.CharField(max_length=50, unique=True)
    value = models.JSONField(default=dict)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['key']

    def __str__(self) -> str:
        return self.key
