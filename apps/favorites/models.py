"""Saved properties of signed-in users."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore


class Favorite(models.Model):
    """Объект, сохраненный пользователем. Пара (user, property) уникальна."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='favorites'
    )
    property = models.ForeignKey(
        'properties.Property', on_delete=models.CASCADE, related_name='favorited_by'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['user', 'property'], name='favorite_user_property_uniq'),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} -> {self.property_id}"
