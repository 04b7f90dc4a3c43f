"""Back-office services: system events, dashboard numbers and catalogue wipe."""

from __future__ import annotations

import logging
from typing import Any

from django.contrib.auth import get_user_model  # type: ignore
from django.db import transaction  # type: ignore
from django.db.models import Count  # type: ignore

from apps.favorites.models import Favorite
from apps.properties.models import Location, Property
from apps.properties.serializers import PropertySerializer
from .models import SystemLog
from .serializers import AdminUserSerializer

logger = logging.getLogger(__name__)

User = get_user_model()

LOG_SOURCES = ["admin", "authentication", "crime-sync", "database", "property", "system"]

_LOGGING_LEVELS = {
    SystemLog.Level.DEBUG: logging.DEBUG,
    SystemLog.Level.INFO: logging.INFO,
    SystemLog.Level.WARNING: logging.WARNING,
    SystemLog.Level.ERROR: logging.ERROR,
}


def record_event(
    message: str,
    *,
    source: str = "system",
    level: str = SystemLog.Level.INFO,
    details: dict[str, Any] | None = None,
) -> SystemLog:
    """Пишет событие в журнал приложения и в таблицу SystemLog."""
    logger.log(_LOGGING_LEVELS.get(level, logging.INFO), message, extra={"source": source})
    return SystemLog.objects.create(
        level=level,
        source=source,
        message=message,
        details=details or {},
    )


def _grouped(queryset, field: str) -> list[dict[str, Any]]:
    rows = queryset.values(field).annotate(count=Count("id")).order_by("-count", field)
    return [{"name": row[field], "count": row["count"]} for row in rows]


def dashboard_stats() -> dict[str, Any]:
    properties = Property.objects.all()
    users = User.objects.all()
    return {
        "properties": properties.count(),
        "users": users.count(),
        "active_users": users.filter(is_active=True, is_staff=False)
        .exclude(role=User.RoleChoices.ADMIN)
        .count(),
        "agents": users.filter(role=User.RoleChoices.AGENT).count(),
        "locations": Location.objects.count(),
        "favorites": Favorite.objects.count(),
        "featured": properties.filter(featured=True).count(),
        "verified": properties.filter(verified=True).count(),
        "properties_by_type": _grouped(properties, "property_type"),
        "properties_by_listing_type": _grouped(properties, "listing_type"),
        "properties_by_city": _grouped(properties, "city"),
        "recent_properties": PropertySerializer(properties.order_by("-created_at")[:5], many=True).data,
        "recent_users": AdminUserSerializer(users.order_by("-created_at")[:5], many=True).data,
    }


@transaction.atomic
def clear_catalog_data(actor=None) -> dict[str, int]:
    """Удаляет все объекты и локации. Избранное уходит каскадом."""
    properties_deleted = Property.objects.count()
    locations_deleted = Location.objects.count()
    Property.objects.all().delete()
    Location.objects.all().delete()
    record_event(
        "All properties and locations have been deleted",
        source="admin",
        level=SystemLog.Level.WARNING,
        details={
            "properties": properties_deleted,
            "locations": locations_deleted,
            "actor_id": getattr(actor, "id", None),
        },
    )
    return {"properties": properties_deleted, "locations": locations_deleted}
