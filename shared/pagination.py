"""Page/limit pagination returning ``{<results_key>: [...], "total": N}``."""

from __future__ import annotations

from rest_framework.pagination import BasePagination  # type: ignore
from rest_framework.response import Response  # type: ignore


def _positive_int(raw, default: int) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


class PageLimitPagination(BasePagination):
    page_query_param = "page"
    limit_query_param = "limit"
    default_limit = 10
    max_limit = 100
    results_key = "results"

    def paginate_queryset(self, queryset, request, view=None):  # type: ignore
        self.page = _positive_int(request.query_params.get(self.page_query_param), 1)
        self.limit = min(
            _positive_int(request.query_params.get(self.limit_query_param), self.default_limit),
            self.max_limit,
        )
        self.total = len(queryset) if isinstance(queryset, list) else queryset.count()
        offset = (self.page - 1) * self.limit
        return list(queryset[offset:offset + self.limit])

    def get_paginated_response(self, data):  # type: ignore
        return Response({self.results_key: data, "total": self.total})

    def get_paginated_response_schema(self, schema):  # type: ignore
        return {
            "type": "object",
            "properties": {
                self.results_key: schema,
                "total": {"type": "integer"},
            },
        }
