"""API exceptions shared across domain apps."""

from __future__ import annotations

from rest_framework import status  # type: ignore
from rest_framework.exceptions import APIException  # type: ignore


class Conflict(APIException):
    """Raised when the request collides with an existing record."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists."
    default_code = "conflict"


class ExternalServiceError(APIException):
    """Raised when an upstream HTTP API fails or returns an unusable payload."""

    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = "External service is unavailable."
    default_code = "external_service_error"
