"""Location model: cities shown on the landing page and in search."""

from django.db import models
from django.db.models import F, Func, IntegerField, OuterRef, Subquery
from django.db.models.functions import Coalesce


class LocationQuerySet(models.QuerySet):
    def with_property_count(self):
        """Annotate ``property_count`` as the number of listings in the location's city."""
        from .models import Property

        listings = (
            Property.objects.filter(city__iexact=OuterRef("city"))
            .order_by()
            .annotate(total=Func(F("id"), function="COUNT"))
            .values("total")
        )
        return self.annotate(
            property_count=Coalesce(Subquery(listings, output_field=IntegerField()), 0)
        )


class Location(models.Model):
    """Город или район с привязкой к коду муниципалитета."""

    name = models.CharField(
        max_length=255,
        unique=True,
        verbose_name="Name",
    )
    city = models.CharField(max_length=100, verbose_name="City")
    country = models.CharField(max_length=100, default="Finland")
    image = models.URLField(max_length=500, blank=True)
    description = models.TextField(blank=True)
    latitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)
    longitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)
    municipality_code = models.CharField(
        max_length=10,
        blank=True,
        help_text="Statistics Finland municipality code, e.g. 091 for Helsinki",
    )
    active = models.BooleanField(
        default=True,
        verbose_name="Active",
        help_text="Show in the public list",
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="Created")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Updated")

    objects = LocationQuerySet.as_manager()

    class Meta:
        verbose_name = "Location"
        verbose_name_plural = "Locations"
        ordering = ["city", "name"]

    def __str__(self):
        return f"{self.name} ({self.city})"
