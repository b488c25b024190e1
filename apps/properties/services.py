"""Property management service.

Validates and persists the descriptive attributes of a property. The
``is_rented`` and ``is_offer_applied`` flags are never written here: the
contract and offer services own them. When the initial price changes the
derived ``price_after_offer`` is recomputed from the current offer.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any

from django.db import IntegrityError  # type: ignore
from django.db.models import QuerySet  # type: ignore

from shared.application.uow import DjangoUnitOfWork, lock_for_update
from shared.domain.exceptions import DomainValidationError, DuplicateLocation, PropertyNotFound
from shared.domain.value_objects import Discount, GeoPoint

from .models import LOCATION_MAX_LENGTH, Property

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    "location",
    "latitude",
    "longitude",
    "rooms_number",
    "initial_price",
    "property_type",
    "property_status",
)


def _validate(location: str | None, latitude, longitude, rooms_number, initial_price) -> Decimal:
    """Field-level checks shared by create and update; returns the price as Decimal."""
    if not location:
        logger.error("Location is missing")
        raise DomainValidationError("Location is required.")
    if len(location) > LOCATION_MAX_LENGTH:
        logger.error(f"Location is too long: {location}")
        raise DomainValidationError(f"Location must be {LOCATION_MAX_LENGTH} characters or less.")

    try:
        rooms = int(rooms_number)
    except (TypeError, ValueError):
        logger.error(f"Invalid rooms number format: {rooms_number}")
        raise DomainValidationError("Rooms number must be an integer greater than 0.")
    if rooms <= 0:
        logger.error(f"Invalid rooms number: {rooms_number}")
        raise DomainValidationError("Rooms number must be greater than 0.")

    try:
        price = Decimal(str(initial_price))
    except (InvalidOperation, TypeError, ValueError):
        logger.error(f"Invalid initial price format: {initial_price}")
        raise DomainValidationError("Initial price must be numeric and greater than 0.")
    if not price.is_finite() or price <= 0:
        logger.error(f"Invalid initial price: {initial_price}")
        raise DomainValidationError("Initial price must be greater than 0.")

    try:
        GeoPoint(latitude, longitude)
    except (TypeError, ValueError):
        logger.error(f"Invalid latitude or longitude: Latitude={latitude}, Longitude={longitude}")
        raise DomainValidationError("Invalid latitude or longitude values.")

    return price


class PropertyService:
    """Create, update, delete and look up properties."""

    @classmethod
    def list_all(cls) -> QuerySet:
        return Property.objects.all()

    @classmethod
    def list_available(cls) -> QuerySet:
        """Catalogue shown to customers: only properties that are not rented."""
        return Property.objects.filter(is_rented=False)

    @classmethod
    def get(cls, property_id) -> Property:
        prop = Property.objects.filter(pk=property_id).first()
        if prop is None:
            logger.error(f"Property with id {property_id} was not found in db")
            raise PropertyNotFound(f"Property with id {property_id} not found!")
        return prop

    @classmethod
    def create(
        cls,
        *,
        location: str,
        latitude: float,
        longitude: float,
        rooms_number: int,
        initial_price,
        property_type: str = Property.PropertyType.APARTMENT,
        property_status: str = Property.PropertyStatus.NEW,
        image_url: str = "",
    ) -> Property:
        price = _validate(location, latitude, longitude, rooms_number, initial_price)

        if Property.objects.filter(location=location).exists():
            logger.error(f"Property with location {location} already exists")
            raise DuplicateLocation()

        try:
            with DjangoUnitOfWork():
                prop = Property.objects.create(
                    location=location,
                    latitude=latitude,
                    longitude=longitude,
                    rooms_number=rooms_number,
                    initial_price=price,
                    price_after_offer=price,
                    is_rented=False,
                    is_offer_applied=False,
                    property_type=property_type,
                    property_status=property_status,
                    image_url=image_url or "",
                )
        except IntegrityError:
            logger.error(f"Property with location {location} already exists")
            raise DuplicateLocation()

        logger.debug(f"Property with id {prop.id} was inserted in db")
        logger.info("Property created successfully")
        return prop

    @classmethod
    def update(cls, property_id, **changes: Any) -> Property:
        """
        Update descriptive fields of a property.

        Missing keys keep their current value. ``image_url`` is only replaced
        by a non-empty value. Rented and offer flags are not accepted.
        """
        with DjangoUnitOfWork():
            prop = lock_for_update(Property.objects.filter(pk=property_id)).first()
            if prop is None:
                logger.error(f"Property with id {property_id} was not found in db")
                raise PropertyNotFound(f"Property with id {property_id} not found!")

            merged = {name: changes.get(name, getattr(prop, name)) for name in UPDATABLE_FIELDS}
            price = _validate(
                merged["location"],
                merged["latitude"],
                merged["longitude"],
                merged["rooms_number"],
                merged["initial_price"],
            )
            merged["initial_price"] = price

            if (
                merged["location"] != prop.location
                and Property.objects.filter(location=merged["location"]).exclude(pk=prop.pk).exists()
            ):
                logger.error(f"Property with location {merged['location']} already exists")
                raise DuplicateLocation()

            for name, value in merged.items():
                setattr(prop, name, value)
            if changes.get("image_url"):
                prop.image_url = changes["image_url"]

            prop.price_after_offer = cls.current_price(prop)
            prop.save()

        logger.debug(f"Property with id {property_id} was updated successfully")
        logger.info(f"Property with id {property_id} was updated successfully")
        return prop

    @classmethod
    def delete(cls, property_id) -> None:
        """Remove a property; its contract, offer and solicitations cascade."""
        with DjangoUnitOfWork():
            prop = lock_for_update(Property.objects.filter(pk=property_id)).first()
            if prop is None:
                logger.error(f"Property with id {property_id} was not found in db")
                raise PropertyNotFound(f"Property with id {property_id} not found!")
            prop.delete()
        logger.info(f"Property with id {property_id} was deleted successfully")

    @staticmethod
    def current_price(prop: Property) -> Decimal:
        """Price the customer pays: initial price reduced by the active offer, if any."""
        from apps.offers.models import Offer

        offer = Offer.objects.filter(property_id=prop.pk).only("percent").first()
        if offer is None:
            return Decimal(str(prop.initial_price))
        return Discount(offer.percent).apply(prop.initial_price)
