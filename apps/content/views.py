"""API views for footer links, page sections and static pages."""

from __future__ import annotations

import logging

from rest_framework import status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from shared.permissions import IsAdminOrReadOnly, is_platform_admin
from .models import FooterContent, PageContent, StaticPage
from .serializers import (
    FooterContentSerializer,
    PageContentSerializer,
    ReorderSerializer,
    StaticPageSerializer,
)

logger = logging.getLogger(__name__)


class OrderedContentViewSet(viewsets.ModelViewSet):
    """Общая часть: посетители видят только активные записи, админ меняет позицию."""

    permission_classes = [IsAdminOrReadOnly]

    def get_queryset(self):  # type: ignore
        qs = super().get_queryset()
        if not is_platform_admin(self.request.user):
            qs = qs.filter(active=True)
        return qs

    @action(detail=True, methods=["post", "put"], url_path="reorder")
    def reorder(self, request, pk=None):  # type: ignore
        item = self.get_object()
        serializer = ReorderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item.position = serializer.validated_data["position"]
        item.save(update_fields=["position", "updated_at"])
        return Response(self.get_serializer(item).data)


class FooterContentViewSet(OrderedContentViewSet):
    """
    GET /api/v1/footer/?section= - ссылки подвала
    GET /api/v1/footer/section/{section}/ - ссылки одной секции
    POST/PATCH/DELETE - только администратор
    """

    queryset = FooterContent.objects.all()
    serializer_class = FooterContentSerializer

    def get_queryset(self):  # type: ignore
        qs = super().get_queryset()
        section = self.request.query_params.get("section")
        if section:
            qs = qs.filter(section=section)
        return qs

    @action(detail=False, methods=["get"], url_path=r"section/(?P<section>[\w-]+)")
    def by_section(self, request, section=None):  # type: ignore
        qs = self.get_queryset().filter(section=section)
        return Response(self.get_serializer(qs, many=True).data)


class PageContentViewSet(OrderedContentViewSet):
    """
    GET /api/v1/page-content/type/{page_type}/ - секции страницы
    GET /api/v1/page-content/type/{page_type}/section/{section}/ - одна секция
    """

    queryset = PageContent.objects.all()
    serializer_class = PageContentSerializer

    @action(detail=False, methods=["get"], url_path=r"type/(?P<page_type>[\w-]+)")
    def by_type(self, request, page_type=None):  # type: ignore
        qs = self.get_queryset().filter(page_type=page_type)
        return Response(self.get_serializer(qs, many=True).data)

    @action(
        detail=False,
        methods=["get"],
        url_path=r"type/(?P<page_type>[\w-]+)/section/(?P<section>[\w-]+)",
    )
    def by_type_and_section(self, request, page_type=None, section=None):  # type: ignore
        qs = self.get_queryset().filter(page_type=page_type, section=section)
        return Response(self.get_serializer(qs, many=True).data)


class StaticPageView(APIView):
    """
    GET /api/v1/pages/{slug}/ - содержимое страницы, пустое если её ещё нет
    POST /api/v1/pages/{slug}/ - сохранить (только администратор)
    """

    permission_classes = [IsAdminOrReadOnly]

    def get(self, request, slug: str):  # type: ignore
        page = StaticPage.objects.filter(slug=slug).first()
        if page is None:
            return Response({"slug": slug, "content": ""})
        return Response(StaticPageSerializer(page).data)

    def post(self, request, slug: str):  # type: ignore
        page = StaticPage.objects.filter(slug=slug).first()
        serializer = StaticPageSerializer(page, data=request.data)
        serializer.is_valid(raise_exception=True)
        created = page is None
        page = serializer.save(slug=slug)
        logger.info("Static page saved", extra={"slug": slug, "is_new": created})
        return Response(
            StaticPageSerializer(page).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )
