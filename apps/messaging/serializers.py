"""Serializers for the messaging domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.users.serializers import UserShortSerializer
from .models import Message


class MessagePropertySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    title = serializers.CharField()
    city = serializers.CharField()


class MessageSerializer(serializers.ModelSerializer):
    """Read serializer with the related property and both participants."""

    property_id = serializers.ReadOnlyField(source="property.id")
    property = MessagePropertySerializer(read_only=True)
    recipient = UserShortSerializer(read_only=True)
    sender = UserShortSerializer(read_only=True)

    class Meta:
        model = Message
        fields = [
            "id",
            "name",
            "email",
            "subject",
            "message",
            "status",
            "property_id",
            "property",
            "recipient",
            "sender",
            "created_at",
        ]
        read_only_fields = fields


class MessageCreateSerializer(serializers.ModelSerializer):
    """Contact form payload; status and sender are set by the server."""

    class Meta:
        model = Message
        fields = ["name", "email", "subject", "message", "property", "recipient"]
        extra_kwargs = {
            "property": {"required": False, "allow_null": True},
            "recipient": {"required": False, "allow_null": True},
        }

    def create(self, validated_data):  # type: ignore
        property_obj = validated_data.get("property")
        if property_obj is not None and validated_data.get("recipient") is None:
            validated_data["recipient"] = property_obj.owner
        return super().create(validated_data)


class MessageUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Message
        fields = ["name", "email", "subject", "message", "status"]
