"""User API views."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from django.shortcuts import get_object_or_404  # type: ignore
from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.permissions import is_platform_admin
from .serializers import PublicProfileSerializer, UserSerializer

User = get_user_model()


class UserViewSet(
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    viewsets.GenericViewSet,
):
    """Профили пользователей.

    - `me` / `current` возвращает профиль текущего пользователя
    - `profile?email=` публичный профиль по email
    - `agents` список агентов
    - обновлять профиль может только его владелец или администратор
    """

    queryset = User.objects.filter(is_active=True)

    def get_serializer_class(self):  # type: ignore
        if self.action in {"retrieve", "profile", "agents"}:
            return PublicProfileSerializer
        return UserSerializer

    def get_permissions(self):  # type: ignore
        if self.action in {"retrieve", "profile", "agents"}:
            return [permissions.AllowAny()]
        return [permissions.IsAuthenticated()]

    def update(self, request, *args, **kwargs):  # type: ignore
        # Администраторы могут обновлять произвольных пользователей, остальные только себя.
        if not is_platform_admin(request.user) and str(request.user.pk) != str(kwargs.get("pk")):
            return Response(status=status.HTTP_403_FORBIDDEN)
        return super().update(request, *args, **kwargs)

    @action(detail=False, methods=["get"], url_path="me")
    def me(self, request):
        """Возвращает профиль текущего пользователя."""
        return Response(UserSerializer(request.user).data)

    @action(detail=False, methods=["get"], url_path="current")
    def current(self, request):
        return self.me(request)

    @action(detail=False, methods=["get"], url_path="profile")
    def profile(self, request):
        email = request.query_params.get("email")
        if not email:
            return Response({"detail": "Email is required."}, status=status.HTTP_400_BAD_REQUEST)
        user = get_object_or_404(self.get_queryset(), email__iexact=email)
        return Response(self.get_serializer(user).data)

    @action(detail=False, methods=["get"], url_path="agents")
    def agents(self, request):
        agents = self.get_queryset().filter(role=User.RoleChoices.AGENT).order_by("name", "username")
        return Response(self.get_serializer(agents, many=True).data)
