"""Celery tasks for the back-office."""

from __future__ import annotations

import logging
from datetime import timedelta

from celery import shared_task  # type: ignore
from django.conf import settings  # type: ignore
from django.utils import timezone  # type: ignore

from .models import SystemLog

logger = logging.getLogger(__name__)


@shared_task(name="backoffice.prune_system_logs")
def prune_system_logs() -> dict[str, int]:
    """
    Удаляет системные логи старше SYSTEM_LOG_RETENTION_DAYS.

    Запускается раз в неделю через Celery Beat.
    """
    days = getattr(settings, "SYSTEM_LOG_RETENTION_DAYS", 30)
    cutoff = timezone.now() - timedelta(days=days)
    deleted, _ = SystemLog.objects.filter(created_at__lt=cutoff).delete()
    if deleted:
        logger.info(f"Pruned {deleted} system log entries older than {days} days")
    return {"deleted": deleted}
