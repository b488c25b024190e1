"""Tests for the shared domain and application building blocks."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

import pytest
from rest_framework import status
from rest_framework.exceptions import NotAuthenticated

from shared.application.message_bus import MessageBus
from shared.domain.base import DomainEvent
from shared.domain.exceptions import (
    AuthenticationRequired,
    ConflictError,
    DomainValidationError,
    PropertyAlreadyRented,
    PropertyNotFound,
)
from shared.domain.value_objects import Discount, GeoPoint
from shared.infrastructure.exception_handler import GENERIC_FAILURE_MESSAGE, domain_exception_handler


@dataclass(kw_only=True)
class SomethingHappened(DomainEvent):
    label: str


class TestDiscount:
    def test_apply_rounds_half_up(self):
        assert Discount(Decimal("50")).apply(Decimal("10.05")) == Decimal("5.03")

    def test_accepts_numbers_and_strings(self):
        assert Discount(10).percent == Decimal("10")
        assert Discount("12.5").apply(Decimal("200")) == Decimal("175.00")

    def test_percent_is_kept_to_cents(self):
        discount = Discount(Decimal("33.335"))

        assert discount.percent == Decimal("33.34")
        assert discount.apply(Decimal("1000")) == Decimal("666.60")

    @pytest.mark.parametrize("percent", [0, -1, Decimal("100.01"), Decimal("0.004"), Decimal("NaN"), None])
    def test_rejects_out_of_range(self, percent):
        with pytest.raises(ValueError):
            Discount(percent)


def test_geo_point_bounds():
    GeoPoint(-90, 180)
    with pytest.raises(ValueError):
        GeoPoint(90.5, 0)


class TestExceptionHandler:
    @pytest.mark.parametrize(
        "exc, expected_status, expected_code",
        [
            (PropertyNotFound(), status.HTTP_404_NOT_FOUND, "not_found"),
            (DomainValidationError("bad"), status.HTTP_400_BAD_REQUEST, "validation_error"),
            (PropertyAlreadyRented(), status.HTTP_409_CONFLICT, "conflict"),
            (AuthenticationRequired(), status.HTTP_401_UNAUTHORIZED, "not_authenticated"),
        ],
    )
    def test_domain_errors_map_to_status(self, exc, expected_status, expected_code):
        response = domain_exception_handler(exc, {})

        assert response.status_code == expected_status
        assert response.data == {"detail": exc.message, "code": expected_code}

    def test_subclasses_keep_specific_message(self):
        response = domain_exception_handler(PropertyAlreadyRented(), {})

        assert isinstance(PropertyAlreadyRented(), ConflictError)
        assert response.data["detail"] == "Property is already rented!"

    def test_framework_errors_use_default_handling(self):
        response = domain_exception_handler(NotAuthenticated(), {})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_unexpected_errors_become_generic_failure(self, caplog):
        response = domain_exception_handler(RuntimeError("boom"), {})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data["detail"] == GENERIC_FAILURE_MESSAGE
        assert "boom" in caplog.text


class TestMessageBus:
    def test_publishes_to_every_handler_once(self):
        bus = MessageBus()
        seen = []

        def first(event):
            seen.append(("first", event.label))

        def second(event):
            seen.append(("second", event.label))

        bus.register_event_handler(SomethingHappened, first)
        bus.register_event_handler(SomethingHappened, first)
        bus.register_event_handler(SomethingHappened, second)
        bus.publish_events([SomethingHappened(label="x")])

        assert seen == [("first", "x"), ("second", "x")]

    def test_failing_handler_does_not_stop_others(self):
        bus = MessageBus()
        seen = []

        def broken(event):
            raise RuntimeError("handler failed")

        def working(event):
            seen.append(event.label)

        bus.register_event_handler(SomethingHappened, broken)
        bus.register_event_handler(SomethingHappened, working)
        bus.publish_events([SomethingHappened(label="y")])

        assert seen == ["y"]

    def test_event_serialises_base_fields(self):
        data = SomethingHappened(label="z").to_dict()

        assert data["event_type"] == "SomethingHappened"
        assert data["aggregate_id"] is None
