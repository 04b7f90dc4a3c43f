"""Tests for the Oulu open data, attractions and places proxies."""

from __future__ import annotations

from unittest import mock

import requests
from django.test import override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase


def ckan(result, success: bool = True) -> mock.Mock:
    response = mock.Mock()
    payload = {"success": success, "result": result}
    if not success:
        payload["error"] = {"message": "Not found", "__type": "Not Found Error"}
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


OULU_GET = "apps.insights.services.oulu.requests.get"


class OuluOpenDataAPITests(APITestCase):
    def test_dataset_list(self) -> None:
        with mock.patch(OULU_GET, return_value=ckan(["parks", "schools"])) as get:
            response = self.client.get(reverse("oulu-datasets"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, ["parks", "schools"])
        self.assertTrue(get.call_args.args[0].endswith("/package_list"))

    def test_ckan_failure_becomes_error_payload(self) -> None:
        with mock.patch(OULU_GET, return_value=ckan(None, success=False)):
            response = self.client.get(reverse("oulu-dataset-detail", args=["missing"]))

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertEqual(response.data["error"], "Failed to fetch dataset information")
        self.assertIn("Not found", response.data["detail"])

    def test_network_failure_becomes_error_payload(self) -> None:
        with mock.patch(OULU_GET, side_effect=requests.ConnectionError("down")):
            response = self.client.get(reverse("oulu-datasets"))
        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)

    def test_search_requires_q(self) -> None:
        response = self.client.get(reverse("oulu-search"))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        with mock.patch(OULU_GET, return_value=ckan({"count": 1, "results": []})) as get:
            response = self.client.get(reverse("oulu-search"), {"q": "asunnot", "limit": 5})
        self.assertEqual(response.data["count"], 1)
        self.assertEqual(get.call_args.kwargs["params"], {"q": "asunnot", "rows": 5})

    def test_resource_passes_extra_params_as_filters(self) -> None:
        with mock.patch(OULU_GET, return_value=ckan({"records": [], "total": 0})) as get:
            response = self.client.get(
                reverse("oulu-resource", args=["abc-123"]), {"limit": 20, "district": "Tuira"}
            )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            get.call_args.kwargs["params"],
            {"id": "abc-123", "limit": 20, "offset": 0, "district": "Tuira"},
        )

    def test_property_prices_falls_back_to_second_dataset(self) -> None:
        responses = [
            ckan({"resources": [{"id": "pdf-1", "format": "PDF"}]}),
            ckan({"resources": [{"id": "csv-2", "format": "CSV"}]}),
            ckan({"records": [{"district": "Tuira"}], "total": 1}),
        ]
        with mock.patch(OULU_GET, side_effect=responses) as get:
            response = self.client.get(reverse("oulu-property-prices"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["total"], 1)
        self.assertEqual(get.call_args_list[1].kwargs["params"], {"id": "asuntokunnat-kaupunginosittain"})
        self.assertEqual(get.call_args.kwargs["params"]["id"], "csv-2")
        self.assertEqual(get.call_args.kwargs["params"]["limit"], 50)


ZONEATLAS_ITEMS = [
    {
        "id": 1,
        "title": "Oulu Cathedral",
        "geo": {"coordinates": [65.0143, 25.4719]},
        "Categories": [{"title": "Church", "slug": "church"}],
        "Media": [{"path": "https://img.example.com/cathedral.jpg"}],
        "buttons": [{"url": "https://example.com/cathedral"}],
        "Tags": [{"title": "history"}],
        "content": "Cathedral in the city centre",
    },
    {"id": 2, "title": "Hailuoto lighthouse", "geo": {"coordinates": [65.04, 24.56]}},
    {"id": 3, "title": "Broken", "geo": {}},
]


class NearbyAttractionsAPITests(APITestCase):
    def test_filters_by_radius_and_maps_fields(self) -> None:
        response_mock = mock.Mock()
        response_mock.json.return_value = ZONEATLAS_ITEMS
        with mock.patch(OULU_GET, return_value=response_mock):
            response = self.client.get(reverse("attractions-nearby"), {"lat": 65.0121, "lng": 25.4651})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        attraction = response.data[0]
        self.assertEqual(attraction["title"], "Oulu Cathedral")
        self.assertEqual(attraction["type"], "Church")
        self.assertEqual(attraction["latitude"], 65.0143)
        self.assertEqual(attraction["image"], "https://img.example.com/cathedral.jpg")
        self.assertEqual(attraction["url"], "https://example.com/cathedral")
        self.assertEqual(attraction["category"], "church")
        self.assertEqual(attraction["tags"], ["history"])
        self.assertEqual(attraction["i18n"], {})

    def test_wider_radius_and_defaults(self) -> None:
        response_mock = mock.Mock()
        response_mock.json.return_value = ZONEATLAS_ITEMS
        with mock.patch(OULU_GET, return_value=response_mock):
            response = self.client.get(
                reverse("attractions-nearby"), {"lat": 65.0121, "lng": 25.4651, "radius": 60}
            )

        lighthouse = [a for a in response.data if a["id"] == 2][0]
        self.assertEqual(lighthouse["type"], "Attraction")
        self.assertIsNone(lighthouse["image"])
        self.assertEqual(lighthouse["tags"], [])

    def test_requires_coordinates(self) -> None:
        response = self.client.get(reverse("attractions-nearby"), {"lat": 65.0})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class NearbyPlacesAPITests(APITestCase):
    def test_missing_params(self) -> None:
        response = self.client.get(reverse("places-nearby"), {"lat": "60.17", "lng": "24.94"})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    @override_settings(GOOGLE_MAPS_API_KEY="")
    def test_missing_api_key(self) -> None:
        response = self.client.get(
            reverse("places-nearby"), {"lat": "60.17", "lng": "24.94", "type": "school"}
        )
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @override_settings(GOOGLE_MAPS_API_KEY="test-key")
    def test_proxies_google_places(self) -> None:
        google = mock.Mock()
        google.json.return_value = {"status": "OK", "results": [{"name": "Kallion kirjasto"}]}
        with mock.patch("apps.insights.services.places.requests.get", return_value=google) as get:
            response = self.client.get(
                reverse("places-nearby"), {"lat": "60.17", "lng": "24.94", "type": "library"}
            )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["results"][0]["name"], "Kallion kirjasto")
        params = get.call_args.kwargs["params"]
        self.assertEqual(params["location"], "60.17,24.94")
        self.assertEqual(params["radius"], 1500)
        self.assertEqual(params["type"], "library")
        self.assertEqual(params["key"], "test-key")
