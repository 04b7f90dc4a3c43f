import os

from celery import Celery
from celery.schedules import crontab  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.dev")

app = Celery("homeharbor")

app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()


# ============================================================================
# CELERY BEAT SCHEDULE (Periodic Tasks)
# ============================================================================

app.conf.beat_schedule = {
    # Синхронизация статистики преступности - раз в сутки в полночь
    "sync-crime-data": {
        "task": "insights.sync_crime_data",
        "schedule": crontab(minute=0, hour=0),
    },
    # Очистка старых системных логов - раз в неделю
    "prune-system-logs": {
        "task": "backoffice.prune_system_logs",
        "schedule": crontab(minute=30, hour=3, day_of_week="mon"),
    },
}

app.conf.timezone = "Europe/Helsinki"
