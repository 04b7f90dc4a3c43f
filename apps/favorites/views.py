"""API views for favorites management."""

from __future__ import annotations

import logging

from django.db import IntegrityError, transaction  # type: ignore
from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.exceptions import Conflict
from .models import Favorite
from .serializers import FavoriteCreateSerializer, FavoriteSerializer

logger = logging.getLogger(__name__)


class FavoriteViewSet(
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    Viewset to add, list and remove favorite properties.

    Endpoints:
    - GET /api/v1/favorites/ - список избранных
    - POST /api/v1/favorites/ - добавить в избранное
    - DELETE /api/v1/favorites/{property_id}/ - удалить из избранного
    - GET /api/v1/favorites/check/{property_id}/ - проверить наличие в избранном
    """

    queryset = Favorite.objects.select_related('user', 'property').all()
    permission_classes = [permissions.IsAuthenticated]
    lookup_field = 'property_id'
    lookup_value_regex = '[0-9]+'

    def get_serializer_class(self):  # type: ignore
        if self.action == 'create':
            return FavoriteCreateSerializer
        return FavoriteSerializer

    def get_queryset(self):  # type: ignore
        """Пользователи видят только свои избранные."""
        return super().get_queryset().filter(user=self.request.user)

    def perform_create(self, serializer):  # type: ignore
        """Добавление в избранное с обработкой дубликатов."""
        property_obj = serializer.validated_data['property']
        if Favorite.objects.filter(user=self.request.user, property=property_obj).exists():
            raise Conflict("Property is already in favorites.")
        try:
            with transaction.atomic():
                serializer.save(user=self.request.user)
        except IntegrityError as exc:
            raise Conflict("Property is already in favorites.") from exc
        logger.info("Favorite added", extra={"user_id": self.request.user.id, "property_id": property_obj.id})

    def create(self, request, *args, **kwargs):  # type: ignore
        """Возвращаем избранное вместе с кратким описанием объекта."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        output_serializer = FavoriteSerializer(serializer.instance)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=['get'], url_path='check/(?P<property_id>[0-9]+)')
    def check(self, request, property_id=None):  # type: ignore
        """
        Проверка наличия объекта в избранном.

        GET /api/v1/favorites/check/123/

        Returns:
            {"is_favorite": true/false, "favorite_id": 456 | null}
        """
        favorite = self.get_queryset().filter(property_id=property_id).first()
        return Response(
            {
                "is_favorite": favorite is not None,
                "favorite_id": favorite.id if favorite else None,
            },
            status=status.HTTP_200_OK,
        )
