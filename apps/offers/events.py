"""
Offer Domain Events
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from shared.domain.base import DomainEvent


@dataclass(kw_only=True)
class OfferApplied(DomainEvent):
    """
    Event: An offer was created or its percent changed

    Carries the price the property is now listed at.
    """
    offer_id: UUID
    property_id: UUID
    percent: Decimal
    price_after_offer: Decimal

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(
            offer_id=str(self.offer_id),
            property_id=str(self.property_id),
            percent=str(self.percent),
            price_after_offer=str(self.price_after_offer),
        )
        return data


@dataclass(kw_only=True)
class OfferWithdrawn(DomainEvent):
    """
    Event: An offer was removed and the property is back at its initial price
    """
    offer_id: UUID
    property_id: UUID

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(offer_id=str(self.offer_id), property_id=str(self.property_id))
        return data
