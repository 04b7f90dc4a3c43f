"""FilterSet definitions for properties search and listing."""

from __future__ import annotations

import json

import django_filters  # type: ignore
from django.db.models import Q  # type: ignore

from shared.geo import bounding_box, haversine_km
from .models import Property


class CharInFilter(django_filters.BaseInFilter, django_filters.CharFilter):
    """Comma separated list of values, e.g. ``?propertyType=house,villa``."""


def search_properties(queryset, term: str | None):
    """Free-text match over title, city, address and description."""
    term = (term or "").strip()
    if not term:
        return queryset
    return queryset.filter(
        Q(title__icontains=term)
        | Q(city__icontains=term)
        | Q(address__icontains=term)
        | Q(description__icontains=term)
    )


def _to_float(value) -> float | None:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class PropertyFilterSet(django_filters.FilterSet):
    """FilterSet for Property with the filters used by list and search."""

    search = django_filters.CharFilter(method="filter_search")
    propertyType = CharInFilter(field_name="property_type")
    listingType = django_filters.CharFilter(field_name="listing_type")
    city = django_filters.CharFilter(field_name="city", lookup_expr="icontains")
    status = django_filters.CharFilter(field_name="status")
    transactionType = django_filters.CharFilter(field_name="transaction_type")

    # "3" matches exactly three, "3+" at least three
    bedrooms = django_filters.CharFilter(method="filter_room_count")
    bathrooms = django_filters.CharFilter(method="filter_room_count")

    minPrice = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    maxPrice = django_filters.NumberFilter(field_name="price", lookup_expr="lte")
    minArea = django_filters.NumberFilter(field_name="area", lookup_expr="gte")
    maxArea = django_filters.NumberFilter(field_name="area", lookup_expr="lte")

    featured = django_filters.BooleanFilter(field_name="featured")
    verified = django_filters.BooleanFilter(field_name="verified")
    heatingAvailable = django_filters.BooleanFilter(field_name="heating_available")
    ownership = CharInFilter(field_name="property_ownership")
    furnishingDetails = CharInFilter(field_name="furnishing_details")
    postedBy = CharInFilter(field_name="owner__role")

    # CSV of feature names, requires all selected features
    amenities = django_filters.CharFilter(method="filter_amenities")
    onlyWithPhotos = django_filters.BooleanFilter(method="filter_only_with_photos")

    sortBy = django_filters.ChoiceFilter(
        method="filter_sort",
        choices=[("price", "price"), ("area", "area"), ("date", "date")],
    )
    radius = django_filters.NumberFilter(method="filter_radius")

    class Meta:
        model = Property
        fields: list[str] = []

    SORT_FIELDS = {"price": "price", "area": "area", "date": "created_at"}

    def filter_search(self, queryset, name, value):  # type: ignore
        return search_properties(queryset, value)

    def filter_room_count(self, queryset, name, value):  # type: ignore
        raw = str(value).strip()
        at_least = raw.endswith("+")
        try:
            count = int(raw.rstrip("+"))
        except ValueError:
            return queryset
        lookup = "gte" if at_least else "exact"
        return queryset.filter(**{f"{name}__{lookup}": count})

    def filter_amenities(self, queryset, name, value):  # type: ignore
        features = [item.strip() for item in str(value).split(",") if item.strip()]
        # Элементы JSON-списка ищем вместе с кавычками, чтобы "sauna" не совпадало с "saunas".
        # jsonb (PostgreSQL) хранит не-ASCII как есть, текстовый JSON (SQLite) - в виде \uXXXX.
        for feature in features:
            queryset = queryset.filter(
                Q(features__icontains=json.dumps(feature, ensure_ascii=False))
                | Q(features__icontains=json.dumps(feature))
            )
        return queryset

    def filter_only_with_photos(self, queryset, name, value):  # type: ignore
        if not value:
            return queryset
        return queryset.exclude(images=[])

    def filter_sort(self, queryset, name, value):  # type: ignore
        field = self.SORT_FIELDS.get(value, "created_at")
        direction = str(self.data.get("sortDir", "desc")).lower()
        prefix = "" if direction == "asc" else "-"
        return queryset.order_by(f"{prefix}{field}", "-id")

    def filter_radius(self, queryset, name, value):  # type: ignore
        lat = _to_float(self.data.get("lat"))
        lng = _to_float(self.data.get("lng"))
        radius = _to_float(value)
        if lat is None or lng is None or radius is None or radius <= 0:
            return queryset

        min_lat, max_lat, min_lng, max_lng = bounding_box(lat, lng, radius)
        candidates = queryset.filter(
            latitude__isnull=False,
            longitude__isnull=False,
            latitude__gte=min_lat,
            latitude__lte=max_lat,
            longitude__gte=min_lng,
            longitude__lte=max_lng,
        ).values_list("id", "latitude", "longitude")
        within = [
            pk
            for pk, p_lat, p_lng in candidates
            if haversine_km(lat, lng, float(p_lat), float(p_lng)) <= radius
        ]
        return queryset.filter(id__in=within)
