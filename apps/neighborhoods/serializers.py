"""Serializers for neighborhoods."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Neighborhood


class NeighborhoodSerializer(serializers.ModelSerializer):
    name = serializers.CharField(min_length=2, max_length=255)
    city = serializers.CharField(min_length=2, max_length=100)

    class Meta:
        model = Neighborhood
        fields = [
            "id",
            "name",
            "city",
            "description",
            "image",
            "average_price",
            "population_density",
            "walk_score",
            "transit_score",
            "latitude",
            "longitude",
            "active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]
        # Дубликат name+city отдаём как 409 во view, а не как 400
        validators: list = []
