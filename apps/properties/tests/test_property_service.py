"""Service-level tests for property management."""

from __future__ import annotations

import uuid
from decimal import Decimal

import pytest

from apps.properties.models import Property
from apps.properties.services import PropertyService
from shared.domain.exceptions import DomainValidationError, DuplicateLocation, PropertyNotFound

pytestmark = pytest.mark.django_db


def _payload(**overrides):
    payload = {
        "location": "Calea Dorobantilor 20, Cluj",
        "latitude": 46.78,
        "longitude": 23.60,
        "rooms_number": 3,
        "initial_price": Decimal("1500.00"),
    }
    payload.update(overrides)
    return payload


def test_new_property_starts_available_without_offer():
    prop = PropertyService.create(**_payload())

    assert prop.is_rented is False
    assert prop.is_offer_applied is False
    assert prop.price_after_offer == Decimal("1500.00")
    assert prop.property_type == Property.PropertyType.APARTMENT


@pytest.mark.parametrize(
    "overrides",
    [
        {"location": ""},
        {"location": "x" * 51},
        {"rooms_number": 0},
        {"rooms_number": "three"},
        {"rooms_number": None},
        {"initial_price": Decimal("0")},
        {"initial_price": "not-a-price"},
        {"latitude": 91},
        {"longitude": -181},
        {"latitude": "north"},
    ],
)
def test_invalid_fields_are_rejected(overrides):
    with pytest.raises(DomainValidationError):
        PropertyService.create(**_payload(**overrides))

    assert not Property.objects.exists()


def test_duplicate_location_conflicts():
    PropertyService.create(**_payload())

    with pytest.raises(DuplicateLocation):
        PropertyService.create(**_payload())


def test_update_never_touches_rented_flag(make_property):
    prop = make_property(is_rented=True)

    PropertyService.update(prop.pk, rooms_number=5, is_rented=False)

    prop.refresh_from_db()
    assert prop.rooms_number == 5
    assert prop.is_rented is True


def test_update_without_offer_follows_initial_price(make_property):
    prop = make_property(price="800.00")

    PropertyService.update(prop.pk, initial_price=Decimal("950.00"))

    prop.refresh_from_db()
    assert prop.price_after_offer == Decimal("950.00")


def test_update_to_taken_location_conflicts(make_property):
    taken = make_property()
    prop = make_property()

    with pytest.raises(DuplicateLocation):
        PropertyService.update(prop.pk, location=taken.location)


def test_update_keeps_image_when_none_given(make_property):
    prop = make_property(image_url="https://img.example.com/a.jpg")

    PropertyService.update(prop.pk, rooms_number=4, image_url="")

    prop.refresh_from_db()
    assert prop.image_url == "https://img.example.com/a.jpg"


def test_catalogue_hides_rented_properties(make_property):
    available = make_property()
    make_property(is_rented=True)

    assert list(PropertyService.list_available()) == [available]
    assert PropertyService.list_all().count() == 2


def test_unknown_property_operations():
    missing = uuid.uuid4()
    with pytest.raises(PropertyNotFound):
        PropertyService.get(missing)
    with pytest.raises(PropertyNotFound):
        PropertyService.update(missing, rooms_number=2)
    with pytest.raises(PropertyNotFound):
        PropertyService.delete(missing)


def test_delete_cascades_contract_and_requests(customer, make_property, tomorrow):
    from apps.contracts.models import Contract
    from apps.contracts.services import ContractService
    from apps.solicitations.models import Solicitation
    from apps.solicitations.services import SolicitationService

    prop = make_property()
    SolicitationService.create(customer, prop.pk)
    ContractService.create(
        user_id=customer.pk, property_id=prop.pk, start_date=tomorrow, duration=6, details="Lease"
    )

    PropertyService.delete(prop.pk)

    assert not Property.objects.filter(pk=prop.pk).exists()
    assert not Contract.objects.exists()
    assert not Solicitation.objects.exists()
