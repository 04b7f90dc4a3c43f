"""
Oulu open data (CKAN 2.x) and ZoneAtlas attraction feed
Data source: https://data.ouka.fi/data/fi/dataset/
"""

from __future__ import annotations

import logging
from typing import Any

import requests
from django.conf import settings  # type: ignore

from shared.exceptions import ExternalServiceError
from shared.geo import haversine_km

logger = logging.getLogger(__name__)

OULU_OPEN_DATA_URL = getattr(settings, "OULU_OPEN_DATA_URL", "https://data.ouka.fi/data/api/3/action")
ZONEATLAS_OBJECTS_URL = getattr(
    settings, "ZONEATLAS_OBJECTS_URL", "https://opendata.zoneatlas.com/oulu/objects.json"
)
EXTERNAL_HTTP_TIMEOUT = getattr(settings, "EXTERNAL_HTTP_TIMEOUT", 30)

PROPERTY_DATASET_ID = "oulun-kaupungin-kiinteistojen-perustiedot"
FALLBACK_PROPERTY_DATASET_ID = "asuntokunnat-kaupunginosittain"
TABULAR_FORMATS = ("CSV", "JSON", "XLSX")
DEFAULT_ATTRACTION_RADIUS_KM = 10.0


class OuluDataError(ExternalServiceError):
    """CKAN вернул ошибку или ответ без success."""

    default_detail = "Oulu open data service is unavailable."


class OuluOpenDataClient:
    """Тонкая обертка над CKAN action API."""

    def __init__(self, base_url: str | None = None, timeout: int | None = None):
        self.base_url = (base_url or OULU_OPEN_DATA_URL).rstrip("/")
        self.timeout = timeout or EXTERNAL_HTTP_TIMEOUT

    def _action(self, action: str, params: dict[str, Any] | None = None) -> Any:
        url = f"{self.base_url}/{action}"
        logger.info(f"CKAN {action} {params or {}}")
        try:
            response = requests.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            logger.error(f"CKAN {action} request failed: {exc}")
            raise OuluDataError(f"Failed to call {action}: {exc}") from exc
        except ValueError as exc:
            logger.error(f"CKAN {action} returned invalid JSON: {exc}")
            raise OuluDataError(f"Invalid response from {action}") from exc

        if not payload.get("success"):
            message = (payload.get("error") or {}).get("message") or "Unknown error"
            logger.error(f"CKAN {action} API error: {message}")
            raise OuluDataError(f"API Error: {message}")
        return payload.get("result")

    def package_list(self) -> list[str]:
        return self._action("package_list")

    def package_show(self, dataset_id: str) -> dict:
        return self._action("package_show", {"id": dataset_id})

    def datastore_search(
        self,
        resource_id: str,
        limit: int = 100,
        offset: int = 0,
        filters: dict[str, Any] | None = None,
    ) -> dict:
        params: dict[str, Any] = {"id": resource_id, "limit": limit, "offset": offset}
        for key, value in (filters or {}).items():
            params[key] = value
        return self._action("datastore_search", params)

    def package_search(self, query: str, rows: int = 10) -> dict:
        return self._action("package_search", {"q": query, "rows": rows})

    def _tabular_resource_id(self, dataset_id: str) -> str:
        dataset = self.package_show(dataset_id)
        for resource in dataset.get("resources") or []:
            if resource.get("format") in TABULAR_FORMATS and resource.get("id"):
                return resource["id"]
        raise OuluDataError(f"No suitable resource found in the {dataset_id} dataset")

    def property_prices(self, limit: int = 50, filters: dict[str, Any] | None = None) -> dict:
        """
        Данные о недвижимости Оулу.

        Сначала основной датасет, при любой ошибке запасной. Если упал и
        запасной, пробрасывается исходная ошибка.
        """
        try:
            resource_id = self._tabular_resource_id(PROPERTY_DATASET_ID)
            return self.datastore_search(resource_id, limit, 0, filters)
        except OuluDataError as primary_error:
            logger.warning(f"Property dataset failed ({primary_error}); trying fallback")
            try:
                resource_id = self._tabular_resource_id(FALLBACK_PROPERTY_DATASET_ID)
                return self.datastore_search(resource_id, limit, 0, filters)
            except OuluDataError as fallback_error:
                logger.error(f"Fallback property dataset also failed: {fallback_error}")
                raise primary_error


def _attraction_payload(item: dict) -> dict:
    categories = item.get("Categories") or []
    media = item.get("Media") or []
    buttons = item.get("buttons") or []
    latitude, longitude = item["geo"]["coordinates"]
    return {
        "id": item.get("id"),
        "title": item.get("title"),
        "type": (categories[0].get("title") if categories else None) or "Attraction",
        "latitude": latitude,
        "longitude": longitude,
        "content": item.get("content") or "",
        "image": media[0].get("path") if media else None,
        "url": buttons[0].get("url") if buttons else None,
        "category": categories[0].get("slug") if categories else None,
        "tags": [tag.get("title") for tag in item.get("Tags") or []],
        "i18n": item.get("i18n") or {},
    }


def nearby_attractions(lat: float, lng: float, radius_km: float = DEFAULT_ATTRACTION_RADIUS_KM) -> list[dict]:
    """Культурные и природные объекты ZoneAtlas в радиусе radius_km."""
    try:
        response = requests.get(ZONEATLAS_OBJECTS_URL, timeout=EXTERNAL_HTTP_TIMEOUT)
        response.raise_for_status()
        items = response.json()
    except (requests.RequestException, ValueError) as exc:
        logger.error(f"ZoneAtlas request failed: {exc}")
        raise OuluDataError("Failed to fetch attractions") from exc

    result = []
    for item in items or []:
        coords = (item.get("geo") or {}).get("coordinates")
        if not coords or len(coords) != 2:
            continue
        if haversine_km(lat, lng, float(coords[0]), float(coords[1])) <= radius_km:
            result.append(_attraction_payload(item))
    logger.info(f"ZoneAtlas: {len(result)} attractions within {radius_km} km of {lat},{lng}")
    return result
