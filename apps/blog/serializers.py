"""Serializers for blog posts."""

from __future__ import annotations

import re

from django.core.validators import RegexValidator  # type: ignore
from django.utils.text import slugify  # type: ignore
from rest_framework import serializers  # type: ignore

from .models import Post

slug_validator = RegexValidator(
    r"^[a-z0-9]+(?:-[a-z0-9]+)*$",
    "Slug must be lowercase alphanumeric with hyphens.",
)


def make_slug(title: str) -> str:
    return re.sub(r"[-_]+", "-", slugify(title)).strip("-")[:255].strip("-")


class PostAuthorSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField(source="display_name")
    email = serializers.EmailField()
    photo_url = serializers.CharField()


class PostSerializer(serializers.ModelSerializer):
    title = serializers.CharField(min_length=5, max_length=255)
    slug = serializers.CharField(
        min_length=3, max_length=255, required=False, allow_blank=True, validators=[slug_validator]
    )
    content = serializers.CharField(min_length=50)
    author = PostAuthorSerializer(read_only=True)
    tag_list = serializers.ListField(child=serializers.CharField(), read_only=True)

    class Meta:
        model = Post
        fields = [
            "id",
            "title",
            "slug",
            "excerpt",
            "content",
            "author",
            "author_name",
            "category",
            "tags",
            "tag_list",
            "image_url",
            "read_time_minutes",
            "is_published",
            "published_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate(self, attrs):  # type: ignore
        slug_missing = not attrs.get("slug")
        if slug_missing and (self.instance is None or "slug" in attrs):
            title = attrs.get("title") or getattr(self.instance, "title", "")
            attrs["slug"] = make_slug(title)
            if not attrs["slug"]:
                raise serializers.ValidationError({"slug": ["Slug could not be generated from the title."]})
        return attrs
