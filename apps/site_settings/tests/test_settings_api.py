"""API tests for site settings."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.site_settings.models import SiteSetting
from apps.users.models import User


class SiteSettingsAPITests(APITestCase):
    def setUp(self) -> None:
        self.admin = User.objects.create_user(
            email="admin@example.com", password="secret1", role=User.RoleChoices.ADMIN
        )
        self.user = User.objects.create_user(email="user@example.com", password="secret1")

    def test_defaults_when_nothing_stored(self) -> None:
        response = self.client.get(reverse("site-settings", args=["currency"]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response.data,
            {"currency": "EUR", "symbol": "€", "position": "before", "decimal_places": 0},
        )

        response = self.client.get(reverse("site-settings", args=["site"]))
        self.assertEqual(response.data["site_name"], "HomeHarbor")
        self.assertIsNone(response.data["hero_image_url"])

    def test_stored_values_are_merged_over_defaults(self) -> None:
        SiteSetting.objects.create(key="site", value={"site_name": "Harbor Homes"})
        response = self.client.get(reverse("site-settings", args=["site"]))
        self.assertEqual(response.data["site_name"], "Harbor Homes")
        self.assertEqual(response.data["contact_email"], "info@homeharbor.com")

    def test_unknown_key(self) -> None:
        response = self.client.get(reverse("site-settings", args=["theme"]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_only_admin_can_update(self) -> None:
        payload = {"currency": "USD", "symbol": "$", "position": "after"}
        self.client.force_authenticate(self.user)
        response = self.client.post(reverse("site-settings", args=["currency"]), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        self.client.force_authenticate(self.admin)
        response = self.client.post(reverse("site-settings", args=["currency"]), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["settings"]["symbol"], "$")
        self.assertEqual(SiteSetting.objects.get(key="currency").value["position"], "after")

    def test_validation(self) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.post(
            reverse("site-settings", args=["currency"]),
            {"currency": "USD", "symbol": "$", "position": "middle"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("position", response.data)

        response = self.client.post(
            reverse("site-settings", args=["site"]),
            {"site_name": "X", "brand_name": "X", "contact_phone": "1", "contact_email": "nope"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("contact_email", response.data)
