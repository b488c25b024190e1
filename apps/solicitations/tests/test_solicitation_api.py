"""Integration tests for solicitation API endpoints."""

from __future__ import annotations

from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.properties.models import Property
from apps.solicitations.models import Solicitation
from apps.users.models import User


class SolicitationAPITests(APITestCase):
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
        self.property = Property.objects.create(
            location="Strada Horea 12, Cluj",
            latitude=46.77,
            longitude=23.59,
            rooms_number=1,
            initial_price=Decimal("700.00"),
        )
        self.my_url = reverse("my-solicitation-list")

    def test_customer_requests_property_once(self) -> None:
        self.client.force_authenticate(self.customer)
        payload = {"property_id": str(self.property.id)}

        first = self.client.post(self.my_url, payload, format="json")
        self.assertEqual(first.status_code, status.HTTP_201_CREATED, first.data)

        second = self.client.post(self.my_url, payload, format="json")
        self.assertEqual(second.status_code, status.HTTP_409_CONFLICT, second.data)
        self.assertEqual(second.data["detail"], "You have already requested this property.")

    def test_anonymous_request_is_rejected(self) -> None:
        response = self.client.post(self.my_url, {"property_id": str(self.property.id)}, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertFalse(Solicitation.objects.exists())

    def test_rented_property_conflicts(self) -> None:
        Property.objects.filter(pk=self.property.pk).update(is_rented=True)
        self.client.force_authenticate(self.customer)

        response = self.client.post(self.my_url, {"property_id": str(self.property.id)}, format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT, response.data)
        self.assertEqual(response.data["detail"], "Property is not available!")

    def test_admin_lists_and_deletes_requests(self) -> None:
        self.client.force_authenticate(self.customer)
        created = self.client.post(self.my_url, {"property_id": str(self.property.id)}, format="json")

        self.client.force_authenticate(self.admin)
        listing = self.client.get(reverse("solicitation-list"))
        self.assertEqual(listing.status_code, status.HTTP_200_OK)
        self.assertEqual(len(listing.data), 1)

        deleted = self.client.delete(reverse("solicitation-detail", args=[created.data["id"]]))
        self.assertEqual(deleted.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Solicitation.objects.exists())
