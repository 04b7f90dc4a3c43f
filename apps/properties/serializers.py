"""Serializers for the properties domain."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

from apps.users.serializers import UserShortSerializer
from .models import Location, Property
from .municipalities import municipality_code_for

User = get_user_model()

PROPERTY_FIELDS = [
    "id",
    "title",
    "slug",
    "description",
    "price",
    "address",
    "city",
    "postal_code",
    "area",
    "bedrooms",
    "bathrooms",
    "property_type",
    "listing_type",
    "features",
    "images",
    "latitude",
    "longitude",
    "featured",
    "verified",
    "status",
    "transaction_type",
    "property_ownership",
    "flooring_details",
    "furnishing_details",
    "heating_available",
    "water_details",
    "gas_details",
    "owner_details",
    "average_nearby_prices",
    "registration_details",
    "created_at",
    "updated_at",
]


class StringListField(serializers.ListField):
    child = serializers.CharField(max_length=500)


class PropertySerializer(serializers.ModelSerializer):
    """Read serializer for lists and cards."""

    owner_id = serializers.ReadOnlyField(source="owner.id")
    owner = UserShortSerializer(read_only=True)

    class Meta:
        model = Property
        fields = ["owner_id", "owner", *PROPERTY_FIELDS]
        read_only_fields = fields


class PropertyDetailSerializer(PropertySerializer):
    """Детальная карточка: контакты владельца и код муниципалитета."""

    owner_details = serializers.SerializerMethodField()
    municipality_code = serializers.SerializerMethodField()

    class Meta(PropertySerializer.Meta):
        fields = [*PropertySerializer.Meta.fields, "municipality_code"]
        read_only_fields = fields

    def get_owner_details(self, obj: Property) -> dict:
        if obj.owner is None:
            return obj.owner_details or {}
        return {
            "name": obj.owner.display_name,
            "email": obj.owner.email,
            "phone": obj.owner.phone,
            "user_id": obj.owner.id,
        }

    def get_municipality_code(self, obj: Property) -> str | None:
        location = Location.objects.filter(name__iexact=obj.city).exclude(municipality_code="").first()
        if location is not None:
            return location.municipality_code
        return municipality_code_for(obj.city)


class PropertyWriteSerializer(serializers.ModelSerializer):
    """Serializer for create/update operations."""

    features = StringListField(required=False)
    images = StringListField(required=False)

    class Meta:
        model = Property
        fields = [field for field in PROPERTY_FIELDS if field not in {"id", "created_at", "updated_at"}]
        # Верификацию и продвижение выставляет только back-office.
        read_only_fields = ["featured", "verified"]
        extra_kwargs = {
            "slug": {"required": False, "allow_blank": True},
        }

    def validate(self, attrs):  # type: ignore
        lat = attrs.get("latitude", getattr(self.instance, "latitude", None))
        lng = attrs.get("longitude", getattr(self.instance, "longitude", None))
        if (lat is None) != (lng is None):
            raise serializers.ValidationError(
                {"non_field_errors": ["Latitude and longitude must be provided together."]}
            )
        return attrs


class PropertyAdminSerializer(PropertyWriteSerializer):
    """Back-office variant: all flags and the owner are writable."""

    owner = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.all(), required=False, allow_null=True
    )

    class Meta(PropertyWriteSerializer.Meta):
        fields = ["owner", *PropertyWriteSerializer.Meta.fields]
        read_only_fields: list[str] = []


class PropertyTypeOptionSerializer(serializers.Serializer):
    value = serializers.CharField()
    label = serializers.CharField()


class LocationSerializer(serializers.ModelSerializer):
    property_count = serializers.IntegerField(read_only=True, default=0)

    class Meta:
        model = Location
        fields = [
            "id",
            "name",
            "city",
            "country",
            "image",
            "description",
            "latitude",
            "longitude",
            "municipality_code",
            "active",
            "property_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "property_count", "created_at", "updated_at"]
