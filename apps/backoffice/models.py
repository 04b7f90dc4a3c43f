"""System log persisted for the admin log viewer."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class SystemLog(models.Model):
    """Событие, которое должен увидеть администратор."""

    class Level(models.TextChoices):
        DEBUG = "debug", _("Debug")
        INFO = "info", _("Info")
        WARNING = "warning", _("Warning")
        ERROR = "error", _("Error")

    level = models.CharField(max_length=10, choices=Level.choices, default=Level.INFO)
    source = models.CharField(max_length=50, help_text=_("admin, system, crime-sync, ..."))
    message = models.TextField()
    details = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["level", "source"], name="systemlog_level_source_idx"),
        ]

    def __str__(self) -> str:
        return f"[{self.level}] {self.source}: {self.message[:60]}"
