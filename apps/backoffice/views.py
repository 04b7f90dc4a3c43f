"""Back-office API (mounted at /api/v1/admin/). Every endpoint is admin-only."""

from __future__ import annotations

import logging

from django.contrib.auth import get_user_model  # type: ignore
from django.db.models import Count  # type: ignore
from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import mixins, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.properties.models import Property
from apps.properties.serializers import PropertyAdminSerializer, PropertyDetailSerializer, PropertySerializer
from apps.properties.views import DetailResponseMixin, PropertyPagination
from apps.users.serializers import PublicProfileSerializer
from shared.pagination import PageLimitPagination
from shared.permissions import IsPlatformAdmin
from .filters import SystemLogFilterSet
from .models import SystemLog
from .seed import seed_demo_data
from .serializers import AdminUserSerializer, SeedRequestSerializer, SystemLogSerializer
from .services import LOG_SOURCES, clear_catalog_data, dashboard_stats, record_event

logger = logging.getLogger(__name__)

User = get_user_model()


class DashboardView(APIView):
    """GET /api/v1/admin/dashboard/ - счетчики, графики и последние записи."""

    permission_classes = [IsPlatformAdmin]

    def get(self, request):  # type: ignore
        return Response(dashboard_stats())


class AdminUserViewSet(viewsets.ModelViewSet):
    """CRUD пользователей. Удалить собственную учетную запись нельзя."""

    queryset = User.objects.all().order_by("-created_at")
    serializer_class = AdminUserSerializer
    permission_classes = [IsPlatformAdmin]

    def perform_create(self, serializer):  # type: ignore
        user = serializer.save()
        record_event(
            f"User {user.email} created by admin",
            source="admin",
            details={"user_id": user.id, "actor_id": self.request.user.id},
        )

    def destroy(self, request, *args, **kwargs):  # type: ignore
        user = self.get_object()
        if user.pk == request.user.pk:
            return Response(
                {"detail": "You cannot delete your own account."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        email = user.email
        user.delete()
        record_event(
            f"User {email} deleted by admin",
            source="admin",
            level=SystemLog.Level.WARNING,
            details={"actor_id": request.user.id},
        )
        return Response(status=status.HTTP_204_NO_CONTENT)


class AdminPropertyViewSet(DetailResponseMixin, viewsets.ModelViewSet):
    """
    Все объекты независимо от статуса.

    Endpoints:
    - GET /api/v1/admin/properties/ - {properties, total}
    - POST /api/v1/admin/properties/{id}/verify/ | unverify/ | feature/ | unfeature/
    """

    queryset = Property.objects.select_related("owner").order_by("-created_at")
    permission_classes = [IsPlatformAdmin]
    pagination_class = PropertyPagination

    def get_serializer_class(self):  # type: ignore
        if self.action in {"create", "update", "partial_update"}:
            return PropertyAdminSerializer
        if self.action == "retrieve":
            return PropertyDetailSerializer
        return PropertySerializer

    def get_queryset(self):  # type: ignore
        qs = super().get_queryset()
        status_param = self.request.query_params.get("status")
        if self.action == "list" and status_param:
            qs = qs.filter(status=status_param)
        return qs

    def perform_create(self, serializer):  # type: ignore
        owner = serializer.validated_data.get("owner") or self.request.user
        prop = serializer.save(owner=owner)
        logger.info("Property created from back-office", extra={"property_id": prop.id})

    def _set_flag(self, request, field: str, value: bool):
        prop = self.get_object()
        if field == "verified":
            prop.set_verified(value)
        else:
            prop.set_featured(value)
        record_event(
            f"Property {prop.id} {field}={value}",
            source="property",
            details={"property_id": prop.id, "actor_id": request.user.id},
        )
        return Response(PropertySerializer(prop).data)

    @action(detail=True, methods=["post", "put"])
    def verify(self, request, pk=None):  # type: ignore
        return self._set_flag(request, "verified", True)

    @action(detail=True, methods=["post", "put"])
    def unverify(self, request, pk=None):  # type: ignore
        return self._set_flag(request, "verified", False)

    @action(detail=True, methods=["post", "put"])
    def feature(self, request, pk=None):  # type: ignore
        return self._set_flag(request, "featured", True)

    @action(detail=True, methods=["post", "put"])
    def unfeature(self, request, pk=None):  # type: ignore
        return self._set_flag(request, "featured", False)


class AgentListView(APIView):
    """GET /api/v1/admin/agents/ - агенты с количеством объектов."""

    permission_classes = [IsPlatformAdmin]

    def get(self, request):  # type: ignore
        agents = (
            User.objects.filter(role=User.RoleChoices.AGENT)
            .annotate(property_count=Count("properties"))
            .order_by("name", "username")
        )
        data = []
        for agent in agents:
            row = PublicProfileSerializer(agent).data
            row["property_count"] = agent.property_count
            data.append(row)
        return Response(data)


class ClearAllDataView(APIView):
    """DELETE /api/v1/admin/clear-all-data/ - удаляет все объекты и локации."""

    permission_classes = [IsPlatformAdmin]

    def delete(self, request):  # type: ignore
        deleted = clear_catalog_data(actor=request.user)
        return Response({"success": True, "deleted": deleted})


class SeedDataView(APIView):
    """POST /api/v1/admin/generate-data/ и /reseed/ с телом {"clear_existing": true}."""

    permission_classes = [IsPlatformAdmin]

    def post(self, request):  # type: ignore
        params = SeedRequestSerializer(data=request.data)
        params.is_valid(raise_exception=True)
        if not params.validated_data["clear_existing"]:
            return Response(
                {"detail": "Seeding replaces the catalogue; send clear_existing=true to confirm."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        summary = seed_demo_data(clear_existing=True, actor=request.user)
        return Response({"success": True, "created": summary})


class LogPagination(PageLimitPagination):
    results_key = "logs"
    default_limit = 50
    max_limit = 500


class SystemLogViewSet(mixins.ListModelMixin, mixins.DestroyModelMixin, viewsets.GenericViewSet):
    """
    Endpoints:
    - GET /api/v1/admin/logs/?level=&source=&search=&page=&limit=
    - GET /api/v1/admin/logs/levels/ | sources/
    - DELETE /api/v1/admin/logs/{id}/
    - DELETE /api/v1/admin/logs/clear/
    """

    queryset = SystemLog.objects.all()
    serializer_class = SystemLogSerializer
    permission_classes = [IsPlatformAdmin]
    filter_backends = [DjangoFilterBackend]
    filterset_class = SystemLogFilterSet
    pagination_class = LogPagination
    lookup_value_regex = "[0-9]+"

    @action(detail=False, methods=["get"])
    def levels(self, request):  # type: ignore
        return Response([value for value, _ in SystemLog.Level.choices])

    @action(detail=False, methods=["get"])
    def sources(self, request):  # type: ignore
        stored = SystemLog.objects.values_list("source", flat=True).distinct()
        return Response(sorted(set(LOG_SOURCES) | set(stored)))

    @action(detail=False, methods=["delete"])
    def clear(self, request):  # type: ignore
        deleted, _ = SystemLog.objects.all().delete()
        logger.warning(f"System log cleared by user {request.user.id}: {deleted} entries")
        return Response({"success": True, "deleted": deleted})
