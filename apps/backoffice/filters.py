"""Filters for the admin log viewer."""

from __future__ import annotations

import django_filters  # type: ignore
from django.db.models import Q  # type: ignore

from .models import SystemLog


class SystemLogFilterSet(django_filters.FilterSet):
    level = django_filters.ChoiceFilter(choices=SystemLog.Level.choices)
    source = django_filters.CharFilter(field_name="source", lookup_expr="iexact")
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = SystemLog
        fields = ["level", "source"]

    def filter_search(self, queryset, name, value):  # type: ignore
        value = value.strip()
        if not value:
            return queryset
        return queryset.filter(Q(message__icontains=value) | Q(source__icontains=value))
