"""Serializers for editable site content."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import FooterContent, PageContent, StaticPage


class FooterContentSerializer(serializers.ModelSerializer):
    class Meta:
        model = FooterContent
        fields = [
            "id",
            "section",
            "title",
            "content",
            "link",
            "icon",
            "position",
            "active",
            "open_in_new_tab",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


class PageContentSerializer(serializers.ModelSerializer):
    class Meta:
        model = PageContent
        fields = [
            "id",
            "page_type",
            "section",
            "title",
            "subtitle",
            "content",
            "image",
            "link",
            "link_text",
            "button_text",
            "position",
            "active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


class ReorderSerializer(serializers.Serializer):
    position = serializers.IntegerField(min_value=0)


class StaticPageSerializer(serializers.ModelSerializer):
    class Meta:
        model = StaticPage
        fields = ["slug", "content", "updated_at"]
        read_only_fields = ["slug", "updated_at"]
