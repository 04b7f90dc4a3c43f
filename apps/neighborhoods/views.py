"""API views for neighborhoods."""

from __future__ import annotations

import logging

from django.db.models import Q  # type: ignore
from rest_framework import viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.exceptions import Conflict
from shared.permissions import IsAdminOrReadOnly, IsPlatformAdmin, is_platform_admin
from .models import Neighborhood
from .serializers import NeighborhoodSerializer

logger = logging.getLogger(__name__)


class NeighborhoodViewSet(viewsets.ModelViewSet):
    """
    Endpoints:
    - GET /api/v1/neighborhoods/?city=&search= - активные районы
    - GET /api/v1/neighborhoods/all/ - все районы (администратор)
    - POST/PUT/PATCH/DELETE - только администратор
    """

    serializer_class = NeighborhoodSerializer
    permission_classes = [IsAdminOrReadOnly]

    def get_queryset(self):  # type: ignore
        qs = Neighborhood.objects.all()
        if self.action == "list" or not is_platform_admin(self.request.user):
            qs = qs.filter(active=True)
        if self.action != "list":
            return qs

        city = self.request.query_params.get("city")
        if city:
            qs = qs.filter(city__icontains=city)
        search = (self.request.query_params.get("search") or "").strip()
        if search:
            qs = qs.filter(
                Q(name__icontains=search)
                | Q(city__icontains=search)
                | Q(description__icontains=search)
            )
        return qs

    def _ensure_unique(self, serializer) -> None:
        instance = serializer.instance
        name = serializer.validated_data.get("name", getattr(instance, "name", None))
        city = serializer.validated_data.get("city", getattr(instance, "city", None))
        clash = Neighborhood.objects.filter(name__iexact=name, city__iexact=city)
        if instance is not None:
            clash = clash.exclude(pk=instance.pk)
        if clash.exists():
            raise Conflict(f"Neighborhood '{name}' already exists in {city}.")

    def perform_create(self, serializer):  # type: ignore
        self._ensure_unique(serializer)
        neighborhood = serializer.save()
        logger.info("Neighborhood created", extra={"neighborhood_id": neighborhood.id})

    def perform_update(self, serializer):  # type: ignore
        self._ensure_unique(serializer)
        serializer.save()

    @action(detail=False, methods=["get"], url_path="all", url_name="all", permission_classes=[IsPlatformAdmin])
    def all_neighborhoods(self, request):  # type: ignore
        qs = Neighborhood.objects.all()
        return Response(self.get_serializer(qs, many=True).data)
