"""API views for blog posts."""

from __future__ import annotations

import logging

from django.shortcuts import get_object_or_404  # type: ignore
from rest_framework import permissions, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.exceptions import Conflict
from shared.pagination import PageLimitPagination
from shared.permissions import IsPlatformAdmin
from .models import Post
from .serializers import PostSerializer

logger = logging.getLogger(__name__)


class PostPagination(PageLimitPagination):
    results_key = "posts"

    def get_paginated_response(self, data):  # type: ignore
        return Response({
            self.results_key: data,
            "total": self.total,
            "page": self.page,
            "limit": self.limit,
        })


class PostViewSet(viewsets.ModelViewSet):
    """
    Endpoints:
    - GET /api/v1/posts/?category=&page=&limit= - опубликованные статьи
    - GET /api/v1/posts/slug/{slug}/ - статья по slug
    - GET /api/v1/posts/all/ - все статьи, включая черновики (администратор)
    - GET/POST/PUT/PATCH/DELETE /api/v1/posts/{id}/ - администратор
    """

    serializer_class = PostSerializer
    pagination_class = PostPagination

    def get_permissions(self):  # type: ignore
        if self.action in {"list", "by_slug"}:
            return [permissions.AllowAny()]
        return [IsPlatformAdmin()]

    def get_queryset(self):  # type: ignore
        qs = Post.objects.select_related("author")
        if self.action == "list":
            qs = qs.published().newest_first()
            category = self.request.query_params.get("category")
            if category:
                qs = qs.filter(category=category)
        return qs

    def _ensure_unique_slug(self, serializer) -> None:
        slug = serializer.validated_data.get("slug")
        if not slug:
            return
        clash = Post.objects.filter(slug=slug)
        if serializer.instance is not None:
            clash = clash.exclude(pk=serializer.instance.pk)
        if clash.exists():
            raise Conflict("Slug already exists. Please provide a unique slug.")

    def perform_create(self, serializer):  # type: ignore
        self._ensure_unique_slug(serializer)
        user = self.request.user
        post = serializer.save(
            author=user,
            author_name=serializer.validated_data.get("author_name") or user.display_name,
        )
        logger.info("Post created", extra={"post_id": post.id, "slug": post.slug})

    def perform_update(self, serializer):  # type: ignore
        self._ensure_unique_slug(serializer)
        serializer.save()

    @action(detail=False, methods=["get"], url_path="all", url_name="all")
    def all_posts(self, request):  # type: ignore
        qs = Post.objects.select_related("author").newest_first()
        return Response(self.get_serializer(qs, many=True).data)

    @action(detail=False, methods=["get"], url_path=r"slug/(?P<slug>[-a-z0-9]+)")
    def by_slug(self, request, slug=None):  # type: ignore
        post = get_object_or_404(Post.objects.select_related("author").published(), slug=slug)
        return Response(self.get_serializer(post).data)
