"""Celery tasks for the insights domain."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore

from apps.backoffice.models import SystemLog
from apps.backoffice.services import record_event
from shared.exceptions import ExternalServiceError

from .services.crime import CrimeDataService

logger = logging.getLogger(__name__)


# ============================================================================
# PERIODIC TASKS (запускаются автоматически через Celery Beat)
# ============================================================================

@shared_task(name="insights.sync_crime_data")
def sync_crime_data() -> dict[str, int]:
    """
    Синхронизация статистики преступлений Statistics Finland.

    Запускается раз в сутки в полночь через Celery Beat.

    Returns:
        dict: {"records": количество сохраненных записей}
    """
    try:
        records = CrimeDataService().sync()
    except ExternalServiceError as exc:
        logger.error(f"Crime data sync failed: {exc}")
        record_event(
            "Crime data sync failed",
            source="crime-sync",
            level=SystemLog.Level.ERROR,
            details={"error": str(exc.detail)},
        )
        raise
    return {"records": records}
