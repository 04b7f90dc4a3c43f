"""Serializers for the favorites domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.properties.models import Property
from .models import Favorite


class FavoriteCreateSerializer(serializers.ModelSerializer):
    """Serializer for adding a property to favorites."""

    class Meta:
        model = Favorite
        fields = ['property']


class PropertyShortSerializer(serializers.ModelSerializer):
    """Краткая информация об объекте для списка избранных."""

    main_image = serializers.SerializerMethodField()

    class Meta:
        model = Property
        fields = [
            'id',
            'title',
            'slug',
            'price',
            'city',
            'address',
            'area',
            'bedrooms',
            'bathrooms',
            'property_type',
            'listing_type',
            'status',
            'main_image',
        ]
        read_only_fields = fields

    def get_main_image(self, obj: Property) -> str | None:
        images = obj.images or []
        return images[0] if images else None


class FavoriteSerializer(serializers.ModelSerializer):
    """Serializer for listing favorites."""

    user_id = serializers.ReadOnlyField(source='user.id')
    property_id = serializers.ReadOnlyField(source='property.id')
    property = PropertyShortSerializer(read_only=True)

    class Meta:
        model = Favorite
        fields = ['id', 'user_id', 'property_id', 'property', 'created_at']
