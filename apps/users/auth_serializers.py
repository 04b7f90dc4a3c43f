"""Serializers for authentication flows (register, login, Firebase sign-in)."""

from __future__ import annotations

import logging
from typing import Any

from django.contrib.auth import get_user_model  # type: ignore
from django.db import transaction  # type: ignore
from django.db.models import Q  # type: ignore
from rest_framework import serializers  # type: ignore
from rest_framework.exceptions import AuthenticationFailed  # type: ignore

from shared.exceptions import Conflict

User = get_user_model()

logger = logging.getLogger(__name__)


class RegisterSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField()
    username = serializers.CharField(max_length=150)
    password = serializers.CharField(min_length=6, write_only=True)
    phone = serializers.CharField(max_length=32, required=False, allow_blank=True)
    photo_url = serializers.URLField(required=False, allow_blank=True)
    # Администратора нельзя зарегистрировать через публичный API.
    role = serializers.ChoiceField(
        choices=[User.RoleChoices.USER, User.RoleChoices.AGENT],
        default=User.RoleChoices.USER,
    )

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        if User.objects.filter(email__iexact=attrs["email"]).exists():
            raise Conflict({"email": "A user with this email already exists."})
        if User.objects.filter(username__iexact=attrs["username"]).exists():
            raise Conflict({"username": "This username is already taken."})
        return attrs

    @transaction.atomic
    def create(self, validated_data: dict[str, Any]):  # type: ignore
        password = validated_data.pop("password")
        user = User.objects.create_user(password=password, **validated_data)
        logger.info("user registered", extra={"user_id": user.pk, "role": user.role})
        return user


class LoginSerializer(serializers.Serializer):
    username_or_email = serializers.CharField()
    password = serializers.CharField(write_only=True)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        login = attrs.get("username_or_email", "").strip()
        password = attrs.get("password", "")

        user = User.objects.filter(Q(email__iexact=login) | Q(username__iexact=login)).first()
        if user is None or not user.is_active or not user.check_password(password):
            raise AuthenticationFailed("Invalid credentials.")

        attrs["user"] = user
        return attrs


class LogoutSerializer(serializers.Serializer):
    refresh = serializers.CharField(required=False, allow_blank=True)


class FirebaseAuthSerializer(serializers.Serializer):
    """Вход через Firebase: находим по uid, затем по email, иначе создаём."""

    firebase_uid = serializers.CharField(max_length=128)
    email = serializers.EmailField()
    display_name = serializers.CharField(max_length=255, required=False, allow_blank=True)
    photo_url = serializers.URLField(required=False, allow_blank=True, allow_null=True)

    @transaction.atomic
    def create(self, validated_data: dict[str, Any]):  # type: ignore
        uid = validated_data["firebase_uid"]
        email = validated_data["email"]

        user = User.objects.filter(firebase_uid=uid).first()
        if user is not None:
            self.created = False
            return user

        user = User.objects.filter(email__iexact=email).first()
        if user is not None:
            user.firebase_uid = uid
            update_fields = ["firebase_uid"]
            if not user.photo_url and validated_data.get("photo_url"):
                user.photo_url = validated_data["photo_url"]
                update_fields.append("photo_url")
            user.save(update_fields=update_fields)
            self.created = False
            logger.info("firebase uid linked", extra={"user_id": user.pk})
            return user

        user = User.objects.create_user(
            email=email,
            password=None,
            username=User.objects.generate_unique_username(email.split("@")[0]),
            name=validated_data.get("display_name") or "",
            photo_url=validated_data.get("photo_url") or "",
            firebase_uid=uid,
        )
        self.created = True
        logger.info("user created from firebase sign-in", extra={"user_id": user.pk})
        return user
