"""Property API views."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from django.shortcuts import get_object_or_404  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.pagination import PageLimitPagination
from shared.permissions import IsAdminOrReadOnly, is_platform_admin
from .filters import PropertyFilterSet, search_properties
from .models import Location, Property
from .serializers import (
    LocationSerializer,
    PropertyDetailSerializer,
    PropertySerializer,
    PropertyTypeOptionSerializer,
    PropertyWriteSerializer,
)

User = get_user_model()

FEATURED_DEFAULT_LIMIT = 16
RECOMMENDATIONS_LIMIT = 5


def _limit_param(request, default: int, maximum: int = 100) -> int:
    try:
        value = int(request.query_params.get("limit", default))
    except (TypeError, ValueError):
        return default
    return min(value, maximum) if value > 0 else default


class PropertyPagination(PageLimitPagination):
    results_key = "properties"


class IsPropertyOwnerOrAdmin(permissions.BasePermission):
    """Публиковать могут агенты и администраторы, изменять владелец и администраторы."""

    def has_permission(self, request, view):  # type: ignore
        if request.method in permissions.SAFE_METHODS:
            return True
        user = request.user
        if not user.is_authenticated:
            return False
        if is_platform_admin(user):
            return True
        if getattr(view, "action", None) == "create":
            return hasattr(user, "can_publish_listings") and user.can_publish_listings()
        return True

    def has_object_permission(self, request, view, obj: Property):  # type: ignore
        if request.method in permissions.SAFE_METHODS:
            return True
        user = request.user
        if not user.is_authenticated:
            return False
        if is_platform_admin(user):
            return True
        return obj.owner_id == user.id


class DetailResponseMixin:
    """create/update принимают write-сериализатор, а отвечают полной карточкой объекта."""

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        output = PropertyDetailSerializer(serializer.instance, context=self.get_serializer_context())
        return Response(output.data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):  # type: ignore
        partial = kwargs.pop("partial", False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        self.perform_update(serializer)
        output = PropertyDetailSerializer(serializer.instance, context=self.get_serializer_context())
        return Response(output.data)


class PropertyViewSet(DetailResponseMixin, viewsets.ModelViewSet):
    """Viewset для объектов недвижимости.

    Endpoints:
    - GET /api/v1/properties/ - список с фильтрами, {properties, total}
    - GET /api/v1/properties/featured/ - избранные объекты для главной
    - GET /api/v1/properties/search/?q= - полнотекстовый поиск
    - GET /api/v1/properties/types/ - справочник типов
    - GET /api/v1/properties/user/{user_id}/ - объекты пользователя
    - GET /api/v1/properties/{id}/recommendations/ - похожие в том же городе
    """

    queryset = Property.objects.select_related("owner")
    permission_classes = [IsPropertyOwnerOrAdmin]
    filter_backends = [DjangoFilterBackend]
    filterset_class = PropertyFilterSet
    pagination_class = PropertyPagination

    def get_serializer_class(self):  # type: ignore
        if self.action in {"create", "update", "partial_update"}:
            return PropertyWriteSerializer
        if self.action == "retrieve":
            return PropertyDetailSerializer
        return PropertySerializer

    def perform_create(self, serializer):  # type: ignore
        serializer.save(owner=self.request.user)

    @action(detail=False, methods=["get"], url_path="featured")
    def featured(self, request):  # type: ignore
        limit = _limit_param(request, FEATURED_DEFAULT_LIMIT)
        qs = self.get_queryset().filter(featured=True, status=Property.Status.ACTIVE)[:limit]
        return Response(PropertySerializer(qs, many=True).data)

    @action(detail=False, methods=["get"], url_path="search")
    def search(self, request):  # type: ignore
        query = (request.query_params.get("q") or "").strip()
        if not query:
            return Response({"detail": "Search query 'q' is required."}, status=status.HTTP_400_BAD_REQUEST)
        qs = search_properties(self.get_queryset(), query)
        return Response(PropertySerializer(qs, many=True).data)

    @action(detail=True, methods=["get"], url_path="recommendations")
    def recommendations(self, request, pk=None):  # type: ignore
        property_obj = self.get_object()
        limit = _limit_param(request, RECOMMENDATIONS_LIMIT)
        qs = (
            self.get_queryset()
            .filter(city__iexact=property_obj.city, status=Property.Status.ACTIVE)
            .exclude(pk=property_obj.pk)[:limit]
        )
        return Response(PropertySerializer(qs, many=True).data)

    @action(detail=False, methods=["get"], url_path="types")
    def types(self, request):  # type: ignore
        options = [{"value": value, "label": label} for value, label in Property.PropertyType.choices]
        return Response(PropertyTypeOptionSerializer(options, many=True).data)

    @action(detail=False, methods=["get"], url_path=r"user/(?P<user_id>[0-9]+)")
    def by_user(self, request, user_id=None):  # type: ignore
        owner = get_object_or_404(User, pk=user_id)
        qs = self.get_queryset().filter(owner=owner)
        return Response(PropertySerializer(qs, many=True).data)


class LocationViewSet(viewsets.ModelViewSet):
    """Локации: чтение для всех, изменение только администраторам."""

    serializer_class = LocationSerializer
    permission_classes = [IsAdminOrReadOnly]

    def get_queryset(self):  # type: ignore
        qs = Location.objects.with_property_count().order_by("-property_count", "city", "name")
        if not is_platform_admin(self.request.user):
            qs = qs.filter(active=True)
        return qs
