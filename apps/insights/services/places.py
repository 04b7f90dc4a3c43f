"""Google Places nearby search proxy."""

from __future__ import annotations

import logging

import requests
from django.conf import settings  # type: ignore

from shared.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

PLACES_NEARBY_URL = "https://maps.googleapis.com/maps/api/place/nearbysearch/json"
PLACES_RADIUS_METERS = 1500


class PlacesNotConfigured(Exception):
    """GOOGLE_MAPS_API_KEY не задан."""


def nearby_places(lat: str, lng: str, place_type: str) -> dict:
    api_key = getattr(settings, "GOOGLE_MAPS_API_KEY", "")
    if not api_key:
        raise PlacesNotConfigured("Google Maps API key not configured")

    params = {
        "location": f"{lat},{lng}",
        "radius": PLACES_RADIUS_METERS,
        "type": place_type,
        "key": api_key,
    }
    logger.info(f"Fetching places type={place_type} near {lat},{lng}")
    try:
        response = requests.get(
            PLACES_NEARBY_URL,
            params=params,
            timeout=getattr(settings, "EXTERNAL_HTTP_TIMEOUT", 30),
        )
        response.raise_for_status()
        return response.json()
    except (requests.RequestException, ValueError) as exc:
        logger.error(f"Google Places request failed: {exc}")
        raise ExternalServiceError("Failed to fetch nearby places") from exc
