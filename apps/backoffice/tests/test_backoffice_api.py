"""API tests for the back-office."""

from __future__ import annotations

from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.backoffice.models import SystemLog
from apps.backoffice.services import record_event
from apps.backoffice.tasks import prune_system_logs
from apps.favorites.models import Favorite
from apps.properties.models import Location, Property
from apps.users.models import User


def make_property(owner, **overrides) -> Property:
    data = {
        "title": "Flat in Kallio",
        "description": "Bright two-room flat",
        "price": 250000,
        "address": "Fleminginkatu 1",
        "city": "Helsinki",
        "area": 60,
        "bedrooms": 2,
        "bathrooms": 1,
        "property_type": Property.PropertyType.APARTMENT,
        "listing_type": Property.ListingType.BUY,
    }
    data.update(overrides)
    return Property.objects.create(owner=owner, **data)


class BackofficeAPITestCase(APITestCase):
    def setUp(self) -> None:
        self.admin = User.objects.create_user(
            email="admin@example.com", password="secret1", role=User.RoleChoices.ADMIN
        )
        self.agent = User.objects.create_user(
            email="agent@example.com", password="secret1", role=User.RoleChoices.AGENT, name="Aino Agent"
        )
        self.user = User.objects.create_user(email="user@example.com", password="secret1")
        self.client.force_authenticate(self.admin)


class AccessTests(BackofficeAPITestCase):
    def test_admin_only(self) -> None:
        self.client.force_authenticate(None)
        self.assertEqual(self.client.get(reverse("admin-dashboard")).status_code, status.HTTP_401_UNAUTHORIZED)

        self.client.force_authenticate(self.user)
        for name in ("admin-dashboard", "admin-agents", "admin-user-list", "admin-log-list"):
            self.assertEqual(self.client.get(reverse(name)).status_code, status.HTTP_403_FORBIDDEN, name)

    def test_staff_user_is_admin(self) -> None:
        staff = User.objects.create_user(email="staff@example.com", password="secret1", is_staff=True)
        self.client.force_authenticate(staff)
        self.assertEqual(self.client.get(reverse("admin-dashboard")).status_code, status.HTTP_200_OK)


class DashboardTests(BackofficeAPITestCase):
    def test_counts_and_charts(self) -> None:
        flat = make_property(self.agent, featured=True)
        make_property(self.agent, title="House in Oulu", city="Oulu", property_type="house", verified=True)
        make_property(self.agent, title="Rental", city="Oulu", listing_type="rent")
        Location.objects.create(name="Oulu", city="Oulu")
        Favorite.objects.create(user=self.user, property=flat)

        response = self.client.get(reverse("admin-dashboard"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.data
        self.assertEqual(data["properties"], 3)
        self.assertEqual(data["users"], 3)
        self.assertEqual(data["active_users"], 2)
        self.assertEqual(data["agents"], 1)
        self.assertEqual(data["locations"], 1)
        self.assertEqual(data["favorites"], 1)
        self.assertEqual(data["featured"], 1)
        self.assertEqual(data["verified"], 1)
        self.assertEqual(data["properties_by_city"], [{"name": "Oulu", "count": 2}, {"name": "Helsinki", "count": 1}])
        self.assertIn({"name": "rent", "count": 1}, data["properties_by_listing_type"])
        self.assertEqual(len(data["recent_properties"]), 3)
        self.assertEqual(len(data["recent_users"]), 3)
        self.assertNotIn("password", data["recent_users"][0])


class AdminUserTests(BackofficeAPITestCase):
    def test_create_hashes_password(self) -> None:
        response = self.client.post(
            reverse("admin-user-list"),
            {"email": "new@example.com", "password": "topsecret", "role": "agent", "name": "New Agent"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertNotIn("password", response.data)
        created = User.objects.get(email="new@example.com")
        self.assertNotEqual(created.password, "topsecret")
        self.assertTrue(created.check_password("topsecret"))
        self.assertTrue(created.username)

    def test_create_requires_password(self) -> None:
        response = self.client.post(reverse("admin-user-list"), {"email": "x@example.com"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_update_rehashes_password(self) -> None:
        url = reverse("admin-user-detail", args=[self.user.id])
        response = self.client.patch(url, {"password": "changed123", "name": "Renamed"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.user.refresh_from_db()
        self.assertEqual(self.user.name, "Renamed")
        self.assertTrue(self.user.check_password("changed123"))

    def test_cannot_delete_self(self) -> None:
        response = self.client.delete(reverse("admin-user-detail", args=[self.admin.id]))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(User.objects.filter(pk=self.admin.id).exists())

        response = self.client.delete(reverse("admin-user-detail", args=[self.user.id]))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(User.objects.filter(pk=self.user.id).exists())


class AdminPropertyTests(BackofficeAPITestCase):
    def test_lists_all_statuses(self) -> None:
        make_property(self.agent)
        make_property(self.agent, title="Sold flat", status=Property.Status.SOLD)

        response = self.client.get(reverse("admin-property-list"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["total"], 2)

        response = self.client.get(reverse("admin-property-list"), {"status": "sold"})
        self.assertEqual([p["title"] for p in response.data["properties"]], ["Sold flat"])

    def test_verify_and_feature_flags(self) -> None:
        prop = make_property(self.agent)

        response = self.client.post(reverse("admin-property-verify", args=[prop.id]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["verified"])

        self.client.put(reverse("admin-property-feature", args=[prop.id]))
        prop.refresh_from_db()
        self.assertTrue(prop.featured)

        self.client.post(reverse("admin-property-unverify", args=[prop.id]))
        self.client.post(reverse("admin-property-unfeature", args=[prop.id]))
        prop.refresh_from_db()
        self.assertFalse(prop.verified)
        self.assertFalse(prop.featured)

    def test_create_with_flags_and_owner(self) -> None:
        response = self.client.post(
            reverse("admin-property-list"),
            {
                "owner": self.agent.id,
                "title": "Villa by the sea",
                "description": "Seaside villa",
                "price": "990000.00",
                "address": "Rantatie 5",
                "city": "Espoo",
                "area": 240,
                "property_type": "villa",
                "listing_type": "buy",
                "featured": True,
                "verified": True,
            },
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        prop = Property.objects.get(pk=response.data["id"])
        self.assertEqual(prop.owner, self.agent)
        self.assertTrue(prop.featured)
        self.assertTrue(prop.verified)


class AgentsAndMaintenanceTests(BackofficeAPITestCase):
    def test_agents_list(self) -> None:
        make_property(self.agent)
        response = self.client.get(reverse("admin-agents"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([a["email"] for a in response.data], ["agent@example.com"])
        self.assertEqual(response.data[0]["property_count"], 1)

    def test_clear_all_data(self) -> None:
        make_property(self.agent)
        make_property(self.agent, title="Second")
        Location.objects.create(name="Helsinki", city="Helsinki")

        response = self.client.delete(reverse("admin-clear-all-data"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["deleted"], {"properties": 2, "locations": 1})
        self.assertFalse(Property.objects.exists())
        self.assertTrue(SystemLog.objects.filter(source="admin", level="warning").exists())

    def test_seed_requires_confirmation(self) -> None:
        for name in ("admin-generate-data", "admin-reseed"):
            response = self.client.post(reverse(name), {}, format="json")
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Property.objects.exists())

    def test_reseed_populates_catalogue(self) -> None:
        make_property(self.agent, title="Old listing")

        response = self.client.post(reverse("admin-reseed"), {"clear_existing": True}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        created = response.data["created"]
        self.assertEqual(created["users"], 3)
        self.assertEqual(created["locations"], 20)
        self.assertEqual(created["properties"], Property.objects.count())
        self.assertFalse(Property.objects.filter(title="Old listing").exists())
        self.assertTrue(User.objects.get(email="agent@homeharbor.com").check_password("agent123"))
        self.assertEqual(Location.objects.get(city="Oulu").municipality_code, "564")
        # the requesting admin survives the reseed
        self.assertTrue(User.objects.filter(pk=self.admin.pk).exists())


class SystemLogTests(BackofficeAPITestCase):
    def setUp(self) -> None:
        super().setUp()
        self.info = record_event("Crime data synchronised", source="crime-sync")
        self.error = record_event("Crime data sync failed", source="crime-sync", level=SystemLog.Level.ERROR)
        self.admin_event = record_event("Catalogue wiped", source="admin", level=SystemLog.Level.WARNING)

    def test_list_filters_and_pagination(self) -> None:
        response = self.client.get(reverse("admin-log-list"), {"limit": 2})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["total"], 3)
        self.assertEqual(len(response.data["logs"]), 2)

        response = self.client.get(reverse("admin-log-list"), {"level": "error"})
        self.assertEqual([row["id"] for row in response.data["logs"]], [self.error.id])

        response = self.client.get(reverse("admin-log-list"), {"source": "crime-sync", "search": "synchronised"})
        self.assertEqual([row["id"] for row in response.data["logs"]], [self.info.id])

    def test_levels_and_sources(self) -> None:
        response = self.client.get(reverse("admin-log-levels"))
        self.assertEqual(response.data, ["debug", "info", "warning", "error"])

        response = self.client.get(reverse("admin-log-sources"))
        self.assertIn("crime-sync", response.data)
        self.assertIn("authentication", response.data)

    def test_delete_one_and_clear(self) -> None:
        response = self.client.delete(reverse("admin-log-detail", args=[self.info.id]))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(SystemLog.objects.count(), 2)

        response = self.client.delete(reverse("admin-log-clear"))
        self.assertEqual(response.data["deleted"], 2)
        self.assertFalse(SystemLog.objects.exists())

    def test_prune_task_drops_old_entries(self) -> None:
        SystemLog.objects.filter(pk=self.info.pk).update(created_at=timezone.now() - timedelta(days=90))
        result = prune_system_logs()
        self.assertEqual(result, {"deleted": 1})
        self.assertFalse(SystemLog.objects.filter(pk=self.info.pk).exists())
