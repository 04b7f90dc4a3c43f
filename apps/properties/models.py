"""Property domain models.

A ``Property`` is a listing published by an agent (or an administrator)
for sale, rent or shared living (``pg``). Locations group listings by
city and carry the Statistics Finland municipality code used by the
crime statistics integration.
"""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.text import slugify  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Property(models.Model):
    """Объект недвижимости, опубликованный агентом."""

    class PropertyType(models.TextChoices):
        APARTMENT = "apartment", _("Apartment")
        HOUSE = "house", _("House")
        TOWNHOUSE = "townhouse", _("Townhouse")
        VILLA = "villa", _("Villa")
        PENTHOUSE = "penthouse", _("Penthouse")
        STUDIO = "studio", _("Studio")
        COMMERCIAL = "commercial", _("Commercial")
        LAND = "land", _("Land")
        COTTAGE = "cottage", _("Cottage")
        OFFICE = "office", _("Office")

    class ListingType(models.TextChoices):
        BUY = "buy", _("Buy")
        RENT = "rent", _("Rent")
        PG = "pg", _("PG / Co-living")

    class Status(models.TextChoices):
        ACTIVE = "active", _("Active")
        SOLD = "sold", _("Sold")
        RENTED = "rented", _("Rented")

    class TransactionType(models.TextChoices):
        NEW = "new", _("New")
        RESALE = "resale", _("Resale")

    class Ownership(models.TextChoices):
        FREEHOLD = "freehold", _("Freehold")
        LEASEHOLD = "leasehold", _("Leasehold")

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="properties",
        null=True,
        blank=True,
    )
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True, blank=True)
    description = models.TextField()
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )
    address = models.CharField(max_length=255)
    city = models.CharField(max_length=100)
    postal_code = models.CharField(max_length=20, blank=True)
    area = models.PositiveIntegerField(help_text=_("Living area in square metres."))
    bedrooms = models.PositiveSmallIntegerField(default=0)
    bathrooms = models.PositiveSmallIntegerField(default=0)
    property_type = models.CharField(max_length=20, choices=PropertyType.choices)
    listing_type = models.CharField(max_length=10, choices=ListingType.choices)
    features = models.JSONField(default=list, blank=True)
    images = models.JSONField(default=list, blank=True)
    latitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)
    longitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)
    featured = models.BooleanField(default=False)
    verified = models.BooleanField(default=False)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.ACTIVE)
    transaction_type = models.CharField(
        max_length=10, choices=TransactionType.choices, blank=True
    )
    property_ownership = models.CharField(max_length=10, choices=Ownership.choices, blank=True)
    flooring_details = models.CharField(max_length=255, blank=True)
    furnishing_details = models.CharField(max_length=100, blank=True)
    heating_available = models.BooleanField(default=False)
    water_details = models.CharField(max_length=255, blank=True)
    gas_details = models.CharField(max_length=255, blank=True)
    owner_details = models.JSONField(default=dict, blank=True)
    average_nearby_prices = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    registration_details = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Property")
        verbose_name_plural = _("Properties")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status"], name="property_status_idx"),
            models.Index(fields=["city"], name="property_city_idx"),
            models.Index(fields=["owner", "status"], name="property_owner_status_idx"),
        ]

    def __str__(self) -> str:
        return self.title

    def set_verified(self, value: bool) -> None:
        if self.verified != value:
            self.verified = value
            self.save(update_fields=["verified", "updated_at"])

    def set_featured(self, value: bool) -> None:
        if self.featured != value:
            self.featured = value
            self.save(update_fields=["featured", "updated_at"])

    def save(self, *args, **kwargs):  # type: ignore
        if not self.slug:
            base_slug = slugify(self.title)[:200] or "property"
            candidate = base_slug
            counter = 1
            while self.__class__.objects.filter(slug=candidate).exclude(pk=self.pk).exists():
                counter += 1
                candidate = f"{base_slug}-{counter}"
            self.slug = candidate
        super().save(*args, **kwargs)


from .models_location import Location  # noqa: E402,F401
