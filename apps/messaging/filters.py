"""Filters for the admin message inbox."""

from __future__ import annotations

import django_filters  # type: ignore
from django.db.models import Q  # type: ignore

from .models import Message


class MessageFilterSet(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=Message.Status.choices)
    propertyId = django_filters.NumberFilter(field_name="property_id")
    # Сообщения, где пользователь получатель или отправитель
    userId = django_filters.NumberFilter(method="filter_user")
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = Message
        fields: list[str] = []

    def filter_user(self, queryset, name, value):  # type: ignore
        return queryset.filter(Q(recipient_id=value) | Q(sender_id=value))

    def filter_search(self, queryset, name, value):  # type: ignore
        value = (value or "").strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(subject__icontains=value)
            | Q(message__icontains=value)
            | Q(name__icontains=value)
            | Q(email__icontains=value)
        )
