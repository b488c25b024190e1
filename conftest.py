"""Shared pytest fixtures."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from itertools import count

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from apps.properties.models import Property
from apps.users.models import User

_sequence = count(1)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def admin_user(db) -> User:
    return User.objects.create_user(
        username="admin",
        email="admin@example.com",
        password="AdminPass123",
        first_name="Ana",
        last_name="Popescu",
        phone_number="+40700000001",
        role=User.Role.ADMIN,
    )


@pytest.fixture
def make_customer(db):
    def _make(username: str | None = None) -> User:
        n = next(_sequence)
        username = username or f"customer{n}"
        return User.objects.create_user(
            username=username,
            email=f"{username}@example.com",
            password="CustomerPass123",
            first_name="Ion",
            last_name="Ionescu",
            phone_number=f"+40711{n:06d}",
            role=User.Role.CUSTOMER,
        )

    return _make


@pytest.fixture
def customer(make_customer) -> User:
    return make_customer()


@pytest.fixture
def make_property(db):
    def _make(price: str | Decimal = "1000.00", **overrides) -> Property:
        n = next(_sequence)
        initial_price = Decimal(str(price))
        fields = {
            "location": f"Strada Memorandumului {n}, Cluj",
            "latitude": 46.77,
            "longitude": 23.59,
            "rooms_number": 2,
            "initial_price": initial_price,
            "price_after_offer": initial_price,
        }
        fields.update(overrides)
        return Property.objects.create(**fields)

    return _make


@pytest.fixture
def tomorrow():
    return timezone.now() + timedelta(days=1)
