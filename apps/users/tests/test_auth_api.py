"""API tests for authentication and user management endpoints."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.models import User


class AuthAPITests(APITestCase):
    def _register_payload(self, **overrides) -> dict[str, str]:
        payload = {
            "username": "ionpop",
            "email": "ion@example.com",
            "phone_number": "+40712345678",
            "first_name": "Ion",
            "last_name": "Pop",
            "password": "StrongPass123",
            "password_confirm": "StrongPass123",
        }
        payload.update(overrides)
        return payload

    def test_register_returns_tokens_and_customer_role(self) -> None:
        response = self.client.post(reverse("auth:register"), self._register_payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertIn("tokens", response.data)
        self.assertEqual(response.data["user"]["role"], User.Role.CUSTOMER)
        self.assertTrue(User.objects.filter(username="ionpop").exists())

    def test_register_rejects_bad_phone(self) -> None:
        response = self.client.post(
            reverse("auth:register"), self._register_payload(phone_number="+77001234567"), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertIn("+40", response.data["detail"])

    def test_register_duplicate_username_conflicts(self) -> None:
        self.client.post(reverse("auth:register"), self._register_payload(), format="json")

        response = self.client.post(
            reverse("auth:register"), self._register_payload(email="other@example.com"), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT, response.data)

    def test_login_and_me(self) -> None:
        self.client.post(reverse("auth:register"), self._register_payload(), format="json")

        login = self.client.post(
            reverse("auth:login"), {"username": "ionpop", "password": "StrongPass123"}, format="json"
        )
        self.assertEqual(login.status_code, status.HTTP_200_OK, login.data)

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['tokens']['access']}")
        me = self.client.get(reverse("user-me"))
        self.assertEqual(me.status_code, status.HTTP_200_OK, me.data)
        self.assertEqual(me.data["username"], "ionpop")

    def test_login_with_wrong_password(self) -> None:
        self.client.post(reverse("auth:register"), self._register_payload(), format="json")

        response = self.client.post(
            reverse("auth:login"), {"username": "ionpop", "password": "wrong"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_admin_manages_users(self) -> None:
        admin = User.objects.create_user(
            username="admin", email="admin@example.com", password="AdminPass123", role=User.Role.ADMIN
        )
        self.client.force_authenticate(admin)
        payload = self._register_payload()
        payload.pop("password_confirm")

        created = self.client.post(reverse("user-list"), payload, format="json")
        self.assertEqual(created.status_code, status.HTTP_201_CREATED, created.data)

        detail_url = reverse("user-detail", args=[created.data["id"]])
        patched = self.client.patch(detail_url, {"first_name": "Vasile"}, format="json")
        self.assertEqual(patched.status_code, status.HTTP_200_OK, patched.data)
        self.assertEqual(patched.data["first_name"], "Vasile")

        deleted = self.client.delete(detail_url)
        self.assertEqual(deleted.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(User.objects.filter(username="ionpop").exists())
