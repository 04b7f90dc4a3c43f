"""Validation for each known settings key and its defaults."""

from __future__ import annotations

from django.utils import timezone  # type: ignore
from rest_framework import serializers  # type: ignore


class CurrencySettingsSerializer(serializers.Serializer):
    currency = serializers.CharField(min_length=1, max_length=10)
    symbol = serializers.CharField(min_length=1, max_length=5)
    position = serializers.ChoiceField(choices=["before", "after"])
    decimal_places = serializers.IntegerField(min_value=0, max_value=4, required=False, default=0)

    @staticmethod
    def defaults() -> dict:
        return {"currency": "EUR", "symbol": "€", "position": "before", "decimal_places": 0}


class SiteSettingsSerializer(serializers.Serializer):
    site_name = serializers.CharField(min_length=1)
    brand_name = serializers.CharField(min_length=1)
    footer_copyright = serializers.CharField(required=False, allow_blank=True)
    contact_phone = serializers.CharField(min_length=1)
    contact_email = serializers.EmailField()
    default_language = serializers.CharField(required=False, default="en")
    show_admin_link = serializers.BooleanField(required=False, default=True)
    hero_image_url = serializers.URLField(required=False, allow_null=True, allow_blank=True)

    @staticmethod
    def defaults() -> dict:
        year = timezone.now().year
        return {
            "site_name": "HomeHarbor",
            "brand_name": "HomeHarbor",
            "footer_copyright": f"© {year} HomeHarbor. All rights reserved.",
            "contact_phone": "+358 123 456 789",
            "contact_email": "info@homeharbor.com",
            "default_language": "en",
            "show_admin_link": True,
            "hero_image_url": None,
        }


# Известные ключи настроек и их валидаторы
SETTINGS_SERIALIZERS: dict[str, type[serializers.Serializer]] = {
    "currency": CurrencySettingsSerializer,
    "site": SiteSettingsSerializer,
}
