"""Neighborhood guide model."""

from __future__ import annotations

from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

score_validators = [MinValueValidator(0), MaxValueValidator(100)]


class Neighborhood(models.Model):
    """Район города с краткой статистикой."""

    name = models.CharField(max_length=255)
    city = models.CharField(max_length=100)
    description = models.TextField(blank=True)
    image = models.URLField(max_length=512, blank=True)
    average_price = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    population_density = models.PositiveIntegerField(
        null=True, blank=True, help_text=_("People per square kilometre.")
    )
    walk_score = models.PositiveSmallIntegerField(null=True, blank=True, validators=score_validators)
    transit_score = models.PositiveSmallIntegerField(null=True, blank=True, validators=score_validators)
    latitude = models.DecimalField(
        max_digits=9,
        decimal_places=6,
        null=True,
        blank=True,
        validators=[MinValueValidator(-90), MaxValueValidator(90)],
    )
    longitude = models.DecimalField(
        max_digits=9,
        decimal_places=6,
        null=True,
        blank=True,
        validators=[MinValueValidator(-180), MaxValueValidator(180)],
    )
    active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(fields=["name", "city"], name="neighborhood_name_city_uniq"),
        ]

    def __str__(self) -> str:
        return f"{self.name}, {self.city}"
