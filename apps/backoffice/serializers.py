"""Serializers for the back-office API."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

from .models import SystemLog

User = get_user_model()


class AdminUserSerializer(serializers.ModelSerializer):
    """Управление пользователями: пароль принимается открытым текстом и хешируется."""

    password = serializers.CharField(write_only=True, required=False, min_length=6, style={"input_type": "password"})

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "username",
            "name",
            "phone",
            "role",
            "photo_url",
            "is_active",
            "is_staff",
            "password",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]
        extra_kwargs = {"username": {"required": False}}

    def validate(self, attrs):  # type: ignore
        if self.instance is None and not attrs.get("password"):
            raise serializers.ValidationError({"password": ["This field is required."]})
        return attrs

    def create(self, validated_data):  # type: ignore
        password = validated_data.pop("password")
        email = validated_data.pop("email")
        return User.objects.create_user(email=email, password=password, **validated_data)

    def update(self, instance, validated_data):  # type: ignore
        password = validated_data.pop("password", None)
        user = super().update(instance, validated_data)
        if password:
            user.set_password(password)
            user.save(update_fields=["password"])
        return user


class SeedRequestSerializer(serializers.Serializer):
    clear_existing = serializers.BooleanField(default=False)


class SystemLogSerializer(serializers.ModelSerializer):
    class Meta:
        model = SystemLog
        fields = ["id", "level", "source", "message", "details", "created_at"]
        read_only_fields = fields
