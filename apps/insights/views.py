"""API views for crime statistics and third-party neighbourhood data."""

from __future__ import annotations

import logging

from rest_framework import permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from shared.exceptions import ExternalServiceError
from .serializers import (
    AttractionsQuerySerializer,
    CrimeRateQuerySerializer,
    DatasetSearchQuerySerializer,
    PlacesQuerySerializer,
    PropertyPricesQuerySerializer,
    ResourceQuerySerializer,
)
from .services.crime import monthly_totals
from .services.oulu import OuluOpenDataClient, nearby_attractions
from .services.places import PlacesNotConfigured, nearby_places

logger = logging.getLogger(__name__)

PAGING_PARAMS = {"limit", "offset"}


class CrimeRateView(APIView):
    """GET /api/v1/crime-rate/?city= - помесячная статистика за последние 12 месяцев."""

    permission_classes = [permissions.AllowAny]

    def get(self, request):  # type: ignore
        params = CrimeRateQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        city = (params.validated_data.get("city") or "").strip() or None
        return Response(monthly_totals(city))


class OuluDataView(APIView):
    """Общая обработка ошибок CKAN: ошибка превращается в {"error": ...}."""

    permission_classes = [permissions.AllowAny]
    error_message = "Failed to fetch Oulu open data"

    def fetch(self, request, client: OuluOpenDataClient, **kwargs):
        raise NotImplementedError

    def get(self, request, **kwargs):  # type: ignore
        try:
            data = self.fetch(request, OuluOpenDataClient(), **kwargs)
        except ExternalServiceError as exc:
            logger.error(f"{self.__class__.__name__}: {exc.detail}")
            return Response(
                {"error": self.error_message, "detail": str(exc.detail)},
                status=status.HTTP_502_BAD_GATEWAY,
            )
        return Response(data)


class OuluDatasetListView(OuluDataView):
    error_message = "Failed to fetch datasets"

    def fetch(self, request, client, **kwargs):
        return client.package_list()


class OuluDatasetDetailView(OuluDataView):
    error_message = "Failed to fetch dataset information"

    def fetch(self, request, client, **kwargs):
        return client.package_show(kwargs["dataset_id"])


class OuluSearchView(OuluDataView):
    error_message = "Failed to search datasets"

    def get(self, request, **kwargs):  # type: ignore
        params = DatasetSearchQuerySerializer(data=request.query_params)
        if not params.is_valid():
            return Response(
                {"error": 'Query parameter "q" is required', "details": params.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )
        self.params = params.validated_data
        return super().get(request, **kwargs)

    def fetch(self, request, client, **kwargs):
        return client.package_search(self.params["q"], self.params["limit"])


class OuluResourceView(OuluDataView):
    """Все параметры кроме limit/offset передаются в datastore_search как фильтры."""

    error_message = "Failed to fetch resource data"

    def fetch(self, request, client, **kwargs):
        params = ResourceQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        filters = {
            key: value for key, value in request.query_params.items() if key not in PAGING_PARAMS
        }
        return client.datastore_search(
            kwargs["resource_id"],
            params.validated_data["limit"],
            params.validated_data["offset"],
            filters,
        )


class OuluPropertyPricesView(OuluDataView):
    error_message = "Failed to fetch property price data"

    def fetch(self, request, client, **kwargs):
        params = PropertyPricesQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        filters = {key: value for key, value in request.query_params.items() if key != "limit"}
        return client.property_prices(params.validated_data["limit"], filters)


class NearbyAttractionsView(APIView):
    """GET /api/v1/attractions/nearby/?lat=&lng=&radius= (км, по умолчанию 10)."""

    permission_classes = [permissions.AllowAny]

    def get(self, request):  # type: ignore
        params = AttractionsQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        data = params.validated_data
        try:
            attractions = nearby_attractions(data["lat"], data["lng"], data["radius"])
        except ExternalServiceError as exc:
            return Response(
                {"error": "Failed to fetch attractions", "detail": str(exc.detail)},
                status=status.HTTP_502_BAD_GATEWAY,
            )
        return Response(attractions)


class NearbyPlacesView(APIView):
    """GET /api/v1/places/nearby/?lat=&lng=&type= - прокси Google Places."""

    permission_classes = [permissions.AllowAny]

    def get(self, request):  # type: ignore
        params = PlacesQuerySerializer(data=request.query_params)
        if not params.is_valid():
            return Response(
                {"error": "Missing required parameters: lat, lng, type"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        data = params.validated_data
        try:
            return Response(nearby_places(data["lat"], data["lng"], data["type"]))
        except PlacesNotConfigured as exc:
            logger.error(str(exc))
            return Response({"error": str(exc)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
