"""Integration tests for contract API endpoints."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.contracts.models import Contract
from apps.properties.models import Property
from apps.users.models import User


class ContractAPITests(APITestCase):
    """Covers creation, conflicts, validation and owner scoping of contracts."""

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
        self.other_customer = User.objects.create_user(
            username="maria",
            email="maria@example.com",
            password="CustomerPass123",
            role=User.Role.CUSTOMER,
        )
        self.property = Property.objects.create(
            location="Bulevardul Eroilor 5, Cluj",
            latitude=46.77,
            longitude=23.59,
            rooms_number=3,
            initial_price=Decimal("1200.00"),
        )
        self.list_url = reverse("contract-list")

    def _payload(self, **overrides) -> dict[str, str]:
        payload = {
            "user_id": str(self.customer.id),
            "property_id": str(self.property.id),
            "start_date": (timezone.now() + timedelta(days=1)).isoformat(),
            "duration": 12,
            "details": "Twelve month lease",
        }
        payload.update(overrides)
        return payload

    def test_admin_can_create_contract(self) -> None:
        self.client.force_authenticate(self.admin)

        response = self.client.post(self.list_url, self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["property"], self.property.id)
        self.property.refresh_from_db()
        self.assertTrue(self.property.is_rented)

    def test_second_contract_for_same_property_conflicts(self) -> None:
        self.client.force_authenticate(self.admin)
        self.client.post(self.list_url, self._payload(), format="json")

        response = self.client.post(
            self.list_url, self._payload(user_id=str(self.other_customer.id)), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT, response.data)
        self.assertEqual(response.data["code"], "conflict")
        self.assertEqual(Contract.objects.count(), 1)

    def test_past_start_date_is_bad_request(self) -> None:
        self.client.force_authenticate(self.admin)
        payload = self._payload(start_date=(timezone.now() - timedelta(hours=1)).isoformat())

        response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["detail"], "Start date cannot be in the past")

    def test_missing_start_date_is_bad_request(self) -> None:
        self.client.force_authenticate(self.admin)
        payload = self._payload()
        payload.pop("start_date")

        response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["detail"], "Start date not valid")

    def test_delete_releases_property(self) -> None:
        self.client.force_authenticate(self.admin)
        created = self.client.post(self.list_url, self._payload(), format="json")

        response = self.client.delete(reverse("contract-detail", args=[created.data["id"]]))

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.property.refresh_from_db()
        self.assertFalse(self.property.is_rented)

    def test_unknown_contract_is_not_found(self) -> None:
        self.client.force_authenticate(self.admin)

        response = self.client.delete(reverse("contract-detail", args=["00000000-0000-0000-0000-000000000000"]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["code"], "not_found")

    def test_customer_cannot_manage_contracts(self) -> None:
        self.client.force_authenticate(self.customer)

        response = self.client.post(self.list_url, self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_customer_sees_only_own_contracts(self) -> None:
        self.client.force_authenticate(self.admin)
        created = self.client.post(self.list_url, self._payload(), format="json")
        contract_id = created.data["id"]

        self.client.force_authenticate(self.customer)
        own = self.client.get(reverse("my-contract-list"))
        self.assertEqual(own.status_code, status.HTTP_200_OK)
        self.assertEqual([item["id"] for item in own.data], [contract_id])

        self.client.force_authenticate(self.other_customer)
        foreign = self.client.get(reverse("my-contract-detail", args=[contract_id]))
        self.assertEqual(foreign.status_code, status.HTTP_404_NOT_FOUND)
