"""Public read and admin write access to site settings."""

from __future__ import annotations

from django.http import Http404  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from shared.permissions import IsAdminOrReadOnly
from .serializers import SETTINGS_SERIALIZERS
from .services import get_settings, save_settings


class SiteSettingView(APIView):
    """
    GET /api/v1/settings/{key}/ - настройки с подставленными значениями по умолчанию
    POST /api/v1/settings/{key}/ - сохранить настройки (только администратор)
    """

    permission_classes = [IsAdminOrReadOnly]

    def _check_key(self, key: str) -> None:
        if key not in SETTINGS_SERIALIZERS:
            raise Http404(f"Unknown settings key '{key}'.")

    def get(self, request, key: str):  # type: ignore
        self._check_key(key)
        return Response(get_settings(key))

    def post(self, request, key: str):  # type: ignore
        self._check_key(key)
        return Response({"success": True, "settings": save_settings(key, request.data)})
