"""Event handlers for the offers domain."""

import logging

from shared.application.message_bus import message_bus

from .events import OfferApplied, OfferWithdrawn

logger = logging.getLogger(__name__)


def log_offer_applied(event: OfferApplied):
    logger.info(
        f"Offer {event.offer_id} of {event.percent}% applied to property {event.property_id}, "
        f"price is now {event.price_after_offer}"
    )


def log_offer_withdrawn(event: OfferWithdrawn):
    logger.info(f"Offer {event.offer_id} withdrawn from property {event.property_id}")


def register_handlers():
    message_bus.register_event_handler(OfferApplied, log_offer_applied)
    message_bus.register_event_handler(OfferWithdrawn, log_offer_withdrawn)
