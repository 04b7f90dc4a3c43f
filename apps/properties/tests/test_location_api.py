"""Tests for the locations endpoint."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.properties.models import Location
from apps.properties.tests.test_property_api import make_property
from apps.users.models import User


class LocationAPITests(APITestCase):
    def setUp(self) -> None:
        self.admin = User.objects.create_user(
            email="admin@example.com", password="secret1", role=User.RoleChoices.ADMIN
        )
        self.helsinki = Location.objects.create(name="Helsinki", city="Helsinki", municipality_code="091")
        self.oulu = Location.objects.create(name="Oulu", city="Oulu", municipality_code="564")
        self.hidden = Location.objects.create(name="Salo", city="Salo", active=False)
        make_property(self.admin, city="Oulu")
        make_property(self.admin, city="oulu", title="Second")
        make_property(self.admin, city="Helsinki", title="Third")

    def test_list_ordered_by_property_count(self) -> None:
        response = self.client.get(reverse("location-list"))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        rows = [(row["name"], row["property_count"]) for row in response.data]
        self.assertEqual(rows, [("Oulu", 2), ("Helsinki", 1)])

    def test_admin_sees_inactive(self) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.get(reverse("location-list"))
        names = [row["name"] for row in response.data]
        self.assertIn("Salo", names)
        self.assertEqual(response.data[-1]["property_count"], 0)

    def test_write_requires_admin(self) -> None:
        payload = {"name": "Turku", "city": "Turku", "municipality_code": "853"}
        response = self.client.post(reverse("location-list"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

        self.client.force_authenticate(self.admin)
        response = self.client.post(reverse("location-list"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["country"], "Finland")
