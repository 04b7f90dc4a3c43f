"""Query-parameter serializers for the insights endpoints."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .services.oulu import DEFAULT_ATTRACTION_RADIUS_KM


class CrimeRateQuerySerializer(serializers.Serializer):
    city = serializers.CharField(required=False, allow_blank=True, max_length=100)


class DatasetSearchQuerySerializer(serializers.Serializer):
    q = serializers.CharField(max_length=200)
    limit = serializers.IntegerField(required=False, default=10, min_value=1, max_value=1000)


class ResourceQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(required=False, default=100, min_value=1, max_value=32000)
    offset = serializers.IntegerField(required=False, default=0, min_value=0)


class PropertyPricesQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(required=False, default=50, min_value=1, max_value=32000)


class AttractionsQuerySerializer(serializers.Serializer):
    lat = serializers.FloatField(min_value=-90, max_value=90)
    lng = serializers.FloatField(min_value=-180, max_value=180)
    radius = serializers.FloatField(required=False, default=DEFAULT_ATTRACTION_RADIUS_KM, min_value=0)


class PlacesQuerySerializer(serializers.Serializer):
    """Параметры передаются в Google как есть, поэтому остаются строками."""

    lat = serializers.CharField()
    lng = serializers.CharField()
    type = serializers.CharField()
