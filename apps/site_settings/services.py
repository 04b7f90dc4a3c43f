"""Read and write helpers for site settings."""

from __future__ import annotations

import logging

from .models import SiteSetting
from .serializers import SETTINGS_SERIALIZERS

logger = logging.getLogger(__name__)


def get_settings(key: str) -> dict:
    """Stored value for ``key`` merged over its defaults."""
    serializer_class = SETTINGS_SERIALIZERS[key]
    value = serializer_class.defaults()
    stored = SiteSetting.objects.filter(key=key).values_list("value", flat=True).first()
    if isinstance(stored, dict):
        value.update(stored)
    return value


def save_settings(key: str, data: dict) -> dict:
    """Validate ``data`` for ``key`` and upsert it. Raises ValidationError on bad input."""
    serializer = SETTINGS_SERIALIZERS[key](data=data)
    serializer.is_valid(raise_exception=True)
    SiteSetting.objects.update_or_create(key=key, defaults={"value": serializer.validated_data})
    logger.info("Site settings updated", extra={"key": key})
    return get_settings(key)
