"""Serializers for user-related API endpoints."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Основной сериализатор пользователя."""

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
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "id",
            "email",
            "role",
            "created_at",
            "updated_at",
        ]


class PublicProfileSerializer(serializers.ModelSerializer):
    """Публичный профиль: без служебных полей."""

    class Meta:
        model = User
        fields = ["id", "username", "name", "email", "phone", "role", "photo_url"]
        read_only_fields = fields


class UserShortSerializer(serializers.ModelSerializer):
    """Краткая информация о пользователе для вложенных ответов."""

    class Meta:
        model = User
        fields = ["id", "username", "name", "photo_url"]
        read_only_fields = fields
