"""API tests for authentication endpoints."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.models import User


class AuthAPITests(APITestCase):
    def test_register_returns_tokens(self) -> None:
        payload = {
            "name": "Aino Virtanen",
            "email": "aino@example.com",
            "username": "aino",
            "password": "secret1",
            "role": "agent",
        }

        response = self.client.post(reverse("auth:register"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertIn("tokens", response.data)
        self.assertEqual(response.data["user"]["email"], payload["email"])
        self.assertEqual(response.data["user"]["role"], User.RoleChoices.AGENT)
        self.assertTrue(User.objects.filter(email=payload["email"]).exists())

    def test_register_rejects_admin_role(self) -> None:
        payload = {
            "name": "Mallory",
            "email": "mallory@example.com",
            "username": "mallory",
            "password": "secret1",
            "role": "admin",
        }
        response = self.client.post(reverse("auth:register"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)

    def test_register_short_password(self) -> None:
        payload = {"name": "Short", "email": "short@example.com", "username": "short", "password": "123"}
        response = self.client.post(reverse("auth:register"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertIn("password", response.data)

    def test_register_duplicate_returns_conflict(self) -> None:
        User.objects.create_user(email="taken@example.com", username="taken", password="secret1")

        by_email = {"name": "A", "email": "TAKEN@example.com", "username": "other", "password": "secret1"}
        response = self.client.post(reverse("auth:register"), by_email, format="json")
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT, response.data)

        by_username = {"name": "B", "email": "fresh@example.com", "username": "taken", "password": "secret1"}
        response = self.client.post(reverse("auth:register"), by_username, format="json")
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT, response.data)

    def test_login_by_username_or_email(self) -> None:
        User.objects.create_user(email="login@example.com", username="loginuser", password="CorrectPassword1")
        url = reverse("auth:login")

        for identifier in ("login@example.com", "loginuser"):
            response = self.client.post(
                url, {"username_or_email": identifier, "password": "CorrectPassword1"}, format="json"
            )
            self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
            self.assertEqual(response.data["user"]["username"], "loginuser")
            self.assertIn("access", response.data["tokens"])

    def test_login_invalid_credentials(self) -> None:
        User.objects.create_user(email="wrong@example.com", username="wrong", password="CorrectPassword1")
        response = self.client.post(
            reverse("auth:login"), {"username_or_email": "wrong", "password": "nope"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED, response.data)

        response = self.client.post(
            reverse("auth:login"), {"username_or_email": "ghost", "password": "nope"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED, response.data)

    def test_logout_blacklists_refresh_token(self) -> None:
        User.objects.create_user(email="out@example.com", username="out", password="secret12")
        login = self.client.post(
            reverse("auth:login"), {"username_or_email": "out", "password": "secret12"}, format="json"
        )
        refresh = login.data["tokens"]["refresh"]

        response = self.client.post(reverse("auth:logout"), {"refresh": refresh}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)

        response = self.client.post(reverse("auth:token_refresh"), {"refresh": refresh}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_logout_rejects_blacklisted_or_malformed_token(self) -> None:
        User.objects.create_user(email="twice@example.com", username="twice", password="secret12")
        login = self.client.post(
            reverse("auth:login"), {"username_or_email": "twice", "password": "secret12"}, format="json"
        )
        refresh = login.data["tokens"]["refresh"]

        response = self.client.post(reverse("auth:logout"), {"refresh": refresh}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)

        response = self.client.post(reverse("auth:logout"), {"refresh": refresh}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)

        response = self.client.post(reverse("auth:logout"), {"refresh": "not-a-token"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)

    def test_logout_without_token(self) -> None:
        response = self.client.post(reverse("auth:logout"), {}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_firebase_auth_creates_then_reuses_user(self) -> None:
        payload = {
            "firebase_uid": "fb-123",
            "email": "matti@example.com",
            "display_name": "Matti",
        }
        response = self.client.post(reverse("auth:firebase-auth"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertTrue(response.data["created"])
        self.assertEqual(response.data["user"]["username"], "matti")
        user = User.objects.get(firebase_uid="fb-123")
        self.assertFalse(user.has_usable_password())

        response = self.client.post(reverse("auth:firebase-auth"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertFalse(response.data["created"])
        self.assertEqual(User.objects.filter(email="matti@example.com").count(), 1)

    def test_firebase_auth_links_existing_email(self) -> None:
        existing = User.objects.create_user(email="linked@example.com", username="linked", password="secret1")
        payload = {"firebase_uid": "fb-link", "email": "linked@example.com"}

        response = self.client.post(reverse("auth:firebase-auth"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        existing.refresh_from_db()
        self.assertEqual(existing.firebase_uid, "fb-link")

    def test_firebase_auth_generates_unique_username(self) -> None:
        User.objects.create_user(email="kalle@other.fi", username="kalle", password="secret1")
        payload = {"firebase_uid": "fb-kalle", "email": "kalle@example.com"}

        response = self.client.post(reverse("auth:firebase-auth"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["user"]["username"], "kalle-2")
