"""Price offer service.

An offer exists exactly while its property is flagged ``is_offer_applied``
and listed at the discounted ``price_after_offer``. Every change to an offer
rewrites those property fields in the same transaction.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from django.db import IntegrityError  # type: ignore
from django.db.models import QuerySet  # type: ignore

from apps.properties.models import Property
from shared.application.uow import DjangoUnitOfWork, lock_for_update
from shared.domain.exceptions import DomainValidationError, OfferAlreadyApplied, OfferNotFound, PropertyNotFound
from shared.domain.value_objects import Discount

from .events import OfferApplied, OfferWithdrawn
from .models import Offer

logger = logging.getLogger(__name__)


def _discount(percent) -> Discount:
    try:
        return Discount(percent)
    except (ValueError, ArithmeticError) as exc:
        logger.error(f"Invalid offer percent: {percent}")
        raise DomainValidationError(str(exc))


class OfferService:
    """Create, update, delete and look up price offers."""

    @classmethod
    def list_all(cls) -> QuerySet:
        return Offer.objects.select_related("property")

    @classmethod
    def get(cls, offer_id) -> Offer:
        offer = cls.list_all().filter(pk=offer_id).first()
        if offer is None:
            logger.error(f"Offer with id {offer_id} was not found in db")
            raise OfferNotFound(f"Offer with id {offer_id} not found!")
        return offer

    @classmethod
    def create(cls, *, property_id, percent) -> Offer:
        """
        Apply a discount to a property that has none yet.

        The property is saved first with its discounted price and offer flag,
        then the offer row is inserted.
        """
        discount = _discount(percent)

        with DjangoUnitOfWork() as uow:
            prop = lock_for_update(Property.objects.filter(pk=property_id)).first()
            if prop is None:
                logger.error(f"Property with id {property_id} was not found in db")
                raise PropertyNotFound(f"Property with id {property_id} not found!")
            if prop.is_offer_applied or Offer.objects.filter(property_id=prop.pk).exists():
                logger.error(f"Property with id {property_id} already has an offer")
                raise OfferAlreadyApplied()

            prop.price_after_offer = discount.apply(prop.initial_price)
            prop.is_offer_applied = True
            prop.save(update_fields=["price_after_offer", "is_offer_applied", "updated_at"])

            try:
                offer = Offer.objects.create(property=prop, percent=discount.percent)
            except IntegrityError:
                logger.error(f"Offer for property {property_id} already exists")
                raise OfferAlreadyApplied()

            uow.add_event(
                OfferApplied(
                    aggregate_id=prop.pk,
                    offer_id=offer.pk,
                    property_id=prop.pk,
                    percent=discount.percent,
                    price_after_offer=prop.price_after_offer,
                )
            )

        logger.debug(f"Offer with id {offer.id} was inserted in db")
        logger.info(f"Offer created successfully for property {property_id}")
        return offer

    @classmethod
    def update(cls, offer_id, *, percent) -> Offer:
        discount = _discount(percent)

        with DjangoUnitOfWork() as uow:
            offer = lock_for_update(Offer.objects.filter(pk=offer_id)).first()
            if offer is None:
                logger.error(f"Offer with id {offer_id} was not found in db")
                raise OfferNotFound(f"Offer with id {offer_id} not found!")

            offer.percent = discount.percent
            offer.save(update_fields=["percent", "updated_at"])

            prop = lock_for_update(Property.objects.filter(pk=offer.property_id)).first()
            if prop is None:
                logger.warning(f"Property with id {offer.property_id} of offer {offer_id} no longer exists")
            else:
                prop.price_after_offer = discount.apply(prop.initial_price)
                prop.is_offer_applied = True
                prop.save(update_fields=["price_after_offer", "is_offer_applied", "updated_at"])
                uow.add_event(
                    OfferApplied(
                        aggregate_id=prop.pk,
                        offer_id=offer.pk,
                        property_id=prop.pk,
                        percent=discount.percent,
                        price_after_offer=prop.price_after_offer,
                    )
                )

        logger.info(f"Offer with id {offer_id} was updated successfully")
        return offer

    @classmethod
    def delete(cls, offer_id) -> None:
        """Remove an offer and put its property back at the initial price."""
        with DjangoUnitOfWork() as uow:
            offer = lock_for_update(Offer.objects.filter(pk=offer_id)).first()
            if offer is None:
                logger.error(f"Offer with id {offer_id} was not found in db")
                raise OfferNotFound(f"Offer with id {offer_id} not found!")

            deleted_id = offer.pk
            property_id = offer.property_id
            offer.delete()

            prop = lock_for_update(Property.objects.filter(pk=property_id)).first()
            if prop is None:
                logger.warning(f"Property with id {property_id} of offer {offer_id} no longer exists")
            else:
                prop.price_after_offer = Decimal(str(prop.initial_price))
                prop.is_offer_applied = False
                prop.save(update_fields=["price_after_offer", "is_offer_applied", "updated_at"])
                uow.add_event(OfferWithdrawn(aggregate_id=prop.pk, offer_id=deleted_id, property_id=prop.pk))

        logger.info(f"Offer with id {offer_id} was deleted successfully")
