"""Tests for the property catalogue and management endpoints."""

from __future__ import annotations

from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.properties.models import Property
from apps.users.models import User


class PropertyAPITests(APITestCase):
    def setUp(self) -> None:
        self.admin = User.objects.create_user(
            username="admin",
            email="admin@example.com",
            password="AdminPass123",
            role=User.Role.ADMIN,
        )
        self.customer = User.objects.create_user(
            username="ion",
            email="ion@example.com",
            password="CustomerPass123",
            role=User.Role.CUSTOMER,
        )
        self.available = Property.objects.create(
            location="Strada Republicii 3, Cluj",
            latitude=46.76,
            longitude=23.58,
            rooms_number=2,
            initial_price=Decimal("900.00"),
            property_type=Property.PropertyType.STUDIO,
        )
        self.rented = Property.objects.create(
            location="Strada Motilor 8, Cluj",
            latitude=46.77,
            longitude=23.58,
            rooms_number=4,
            initial_price=Decimal("2000.00"),
            property_type=Property.PropertyType.HOUSE,
            is_rented=True,
        )
        self.list_url = reverse("property-list")

    def test_catalogue_lists_only_available_properties(self) -> None:
        response = self.client.get(self.list_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([item["location"] for item in response.data], [self.available.location])

    def test_admin_sees_rented_properties(self) -> None:
        self.client.force_authenticate(self.admin)

        response = self.client.get(self.list_url)

        self.assertEqual(len(response.data), 2)

    def test_filter_by_type_and_price(self) -> None:
        self.client.force_authenticate(self.admin)

        by_type = self.client.get(self.list_url, {"property_type": "house"})
        by_price = self.client.get(self.list_url, {"price_max": "1000"})

        self.assertEqual([item["id"] for item in by_type.data], [str(self.rented.id)])
        self.assertEqual([item["id"] for item in by_price.data], [str(self.available.id)])

    def test_rented_property_detail_is_hidden_from_customers(self) -> None:
        self.client.force_authenticate(self.customer)

        response = self.client.get(reverse("property-detail", args=[self.rented.id]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_admin_creates_property(self) -> None:
        self.client.force_authenticate(self.admin)
        payload = {
            "location": "Strada Avram Iancu 1, Cluj",
            "latitude": 46.77,
            "longitude": 23.6,
            "rooms_number": 2,
            "initial_price": "1100.00",
            "property_type": "apartment",
            "property_status": "renovated",
        }

        response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["price_after_offer"], "1100.00")
        self.assertFalse(response.data["is_rented"])

    def test_duplicate_location_is_conflict(self) -> None:
        self.client.force_authenticate(self.admin)
        payload = {
            "location": self.available.location,
            "latitude": 46.77,
            "longitude": 23.6,
            "rooms_number": 2,
            "initial_price": "1100.00",
        }

        response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT, response.data)

    def test_invalid_coordinates_are_bad_request(self) -> None:
        self.client.force_authenticate(self.admin)
        payload = {
            "location": "Somewhere",
            "latitude": 120,
            "longitude": 23.6,
            "rooms_number": 2,
            "initial_price": "1100.00",
        }

        response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["detail"], "Invalid latitude or longitude values.")

    def test_partial_update_keeps_flags(self) -> None:
        self.client.force_authenticate(self.admin)

        response = self.client.patch(
            reverse("property-detail", args=[self.rented.id]), {"rooms_number": 5}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["rooms_number"], 5)
        self.assertTrue(response.data["is_rented"])

    def test_customer_cannot_create_property(self) -> None:
        self.client.force_authenticate(self.customer)

        response = self.client.post(self.list_url, {"location": "x"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
