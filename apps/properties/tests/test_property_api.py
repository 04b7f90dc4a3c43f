"""Tests for property listing, search and details."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.properties.models import Property
from apps.users.models import User


def make_property(owner, **overrides) -> Property:
    data = {
        "owner": owner,
        "title": "Bright apartment",
        "description": "Two rooms close to the sea",
        "price": 250000,
        "address": "Mannerheimintie 1",
        "city": "Helsinki",
        "area": 60,
        "bedrooms": 2,
        "bathrooms": 1,
        "property_type": Property.PropertyType.APARTMENT,
        "listing_type": Property.ListingType.BUY,
    }
    data.update(overrides)
    return Property.objects.create(**data)


class PropertyAPITests(APITestCase):
    def setUp(self) -> None:
        self.agent = User.objects.create_user(
            email="agent@example.com",
            username="agent",
            name="Anna Agent",
            phone="+358401234567",
            password="secret1",
            role=User.RoleChoices.AGENT,
        )
        self.user = User.objects.create_user(email="user@example.com", password="secret1")
        self.flat = make_property(
            self.agent,
            features=["Sauna", "Balcony"],
            images=["https://img.example.com/1.jpg"],
            latitude="60.169900",
            longitude="24.938400",
            featured=True,
        )
        self.house = make_property(
            self.agent,
            title="Family house",
            description="Quiet street",
            price=480000,
            city="Espoo",
            area=140,
            bedrooms=4,
            property_type=Property.PropertyType.HOUSE,
            features=["Saunas nearby"],
            latitude="60.205200",
            longitude="24.655900",
        )
        self.rental = make_property(
            self.agent,
            title="Studio for rent",
            price=900,
            city="Tampere",
            area=25,
            bedrooms=1,
            property_type=Property.PropertyType.STUDIO,
            listing_type=Property.ListingType.RENT,
        )

    def ids(self, response) -> list[int]:
        return [row["id"] for row in response.data["properties"]]

    def test_list_returns_properties_and_total(self) -> None:
        response = self.client.get(reverse("property-list"), {"limit": 2})
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["total"], 3)
        self.assertEqual(len(response.data["properties"]), 2)

        response = self.client.get(reverse("property-list"), {"limit": 2, "page": 2})
        self.assertEqual(len(response.data["properties"]), 1)

    def test_filter_by_type_and_price(self) -> None:
        response = self.client.get(
            reverse("property-list"), {"propertyType": "apartment,house", "maxPrice": 300000}
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(self.ids(response), [self.flat.id])

        response = self.client.get(reverse("property-list"), {"listingType": "rent"})
        self.assertEqual(self.ids(response), [self.rental.id])

    def test_bedrooms_plus_means_at_least(self) -> None:
        response = self.client.get(reverse("property-list"), {"bedrooms": "2+", "sortBy": "price"})
        self.assertEqual(self.ids(response), [self.house.id, self.flat.id])

        response = self.client.get(reverse("property-list"), {"bedrooms": "2"})
        self.assertEqual(self.ids(response), [self.flat.id])

    def test_amenities_match_whole_feature(self) -> None:
        response = self.client.get(reverse("property-list"), {"amenities": "sauna"})
        self.assertEqual(self.ids(response), [self.flat.id])

        response = self.client.get(reverse("property-list"), {"amenities": "sauna,garage"})
        self.assertEqual(response.data["total"], 0)

    def test_amenities_with_non_ascii_feature(self) -> None:
        self.house.features = ["Näköala", "Sauna"]
        self.house.save()

        response = self.client.get(reverse("property-list"), {"amenities": "Näköala"})
        self.assertEqual(self.ids(response), [self.house.id])

    def test_only_with_photos(self) -> None:
        response = self.client.get(reverse("property-list"), {"onlyWithPhotos": "true"})
        self.assertEqual(self.ids(response), [self.flat.id])

    def test_sort_by_price_ascending(self) -> None:
        response = self.client.get(reverse("property-list"), {"sortBy": "price", "sortDir": "asc"})
        self.assertEqual(self.ids(response), [self.rental.id, self.flat.id, self.house.id])

    def test_radius_filter(self) -> None:
        # Espoo centre lies about 16 km from the Helsinki listing
        params = {"lat": "60.1699", "lng": "24.9384", "radius": "5"}
        response = self.client.get(reverse("property-list"), params)
        self.assertEqual(self.ids(response), [self.flat.id])

        params["radius"] = "30"
        response = self.client.get(reverse("property-list"), params)
        self.assertEqual(sorted(self.ids(response)), sorted([self.flat.id, self.house.id]))

    def test_featured(self) -> None:
        self.house.set_featured(True)
        self.house.status = Property.Status.SOLD
        self.house.save()
        response = self.client.get(reverse("property-featured"))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([row["id"] for row in response.data], [self.flat.id])

    def test_search_requires_query(self) -> None:
        response = self.client.get(reverse("property-search"))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.get(reverse("property-search"), {"q": "espoo"})
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([row["id"] for row in response.data], [self.house.id])

    def test_recommendations_same_city(self) -> None:
        neighbour = make_property(self.agent, title="Another flat in Helsinki")
        response = self.client.get(reverse("property-recommendations", args=[self.flat.id]))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([row["id"] for row in response.data], [neighbour.id])

    def test_recommendations_limit(self) -> None:
        for number in range(3):
            make_property(self.agent, title=f"Helsinki flat {number}")

        response = self.client.get(reverse("property-recommendations", args=[self.flat.id]))
        self.assertEqual(len(response.data), 3)

        response = self.client.get(reverse("property-recommendations", args=[self.flat.id]), {"limit": 2})
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(len(response.data), 2)

    def test_types(self) -> None:
        response = self.client.get(reverse("property-types"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn({"value": "villa", "label": "Villa"}, response.data)

    def test_by_user(self) -> None:
        response = self.client.get(reverse("property-by-user", args=[self.agent.id]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 3)

        response = self.client.get(reverse("property-by-user", args=[999999]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_detail_includes_owner_contacts_and_municipality(self) -> None:
        response = self.client.get(reverse("property-detail", args=[self.flat.id]))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["owner_details"]["email"], "agent@example.com")
        self.assertEqual(response.data["owner_details"]["name"], "Anna Agent")
        self.assertEqual(response.data["municipality_code"], "091")
        self.assertTrue(response.data["slug"].startswith("bright-apartment"))

    def test_plain_user_cannot_publish(self) -> None:
        payload = {
            "title": "My flat",
            "description": "Nice",
            "price": "100000",
            "address": "Street 1",
            "city": "Oulu",
            "area": 40,
            "property_type": "apartment",
            "listing_type": "buy",
        }
        self.client.force_authenticate(self.user)
        response = self.client.post(reverse("property-list"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        self.client.force_authenticate(self.agent)
        response = self.client.post(
            reverse("property-list"), {**payload, "featured": True}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["owner_id"], self.agent.id)
        self.assertFalse(response.data["featured"])
        self.assertEqual(response.data["municipality_code"], "564")

    def test_only_owner_can_edit(self) -> None:
        other_agent = User.objects.create_user(
            email="other@example.com", password="secret1", role=User.RoleChoices.AGENT
        )
        self.client.force_authenticate(other_agent)
        url = reverse("property-detail", args=[self.flat.id])
        response = self.client.patch(url, {"price": "1"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        self.client.force_authenticate(self.agent)
        response = self.client.patch(url, {"price": "199000.00"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["price"], "199000.00")

    def test_lat_lng_must_come_together(self) -> None:
        self.client.force_authenticate(self.agent)
        response = self.client.patch(
            reverse("property-detail", args=[self.rental.id]), {"latitude": "61.5"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
