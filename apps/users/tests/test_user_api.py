"""API tests for user profile endpoints."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.models import User


class UserAPITests(APITestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(
            email="user@example.com", username="user", name="Plain User", password="secret1"
        )
        self.agent = User.objects.create_user(
            email="agent@example.com",
            username="agent",
            name="Agent Smith",
            password="secret1",
            role=User.RoleChoices.AGENT,
        )

    def test_current_requires_authentication(self) -> None:
        response = self.client.get(reverse("user-current"))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_current_returns_profile(self) -> None:
        self.client.force_authenticate(self.user)
        response = self.client.get(reverse("user-me"))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["email"], self.user.email)

    def test_profile_by_email(self) -> None:
        response = self.client.get(reverse("user-profile"), {"email": "AGENT@example.com"})
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["username"], "agent")

        response = self.client.get(reverse("user-profile"))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.get(reverse("user-profile"), {"email": "nobody@example.com"})
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_agents_list(self) -> None:
        response = self.client.get(reverse("user-agents"))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([row["id"] for row in response.data], [self.agent.id])

    def test_user_cannot_update_someone_else(self) -> None:
        self.client.force_authenticate(self.user)
        response = self.client.patch(
            reverse("user-detail", args=[self.agent.id]), {"name": "Hacked"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        response = self.client.patch(
            reverse("user-detail", args=[self.user.id]), {"name": "Renamed"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.user.refresh_from_db()
        self.assertEqual(self.user.name, "Renamed")
