"""Event handlers for the contracts domain."""

import logging

from shared.application.message_bus import message_bus

from .events import PropertyReleased, PropertyRented

logger = logging.getLogger(__name__)


def log_property_rented(event: PropertyRented):
    logger.info(
        f"Property {event.property_id} rented to user {event.user_id} under contract {event.contract_id}"
    )


def log_property_released(event: PropertyReleased):
    logger.info(f"Property {event.property_id} released by removal of contract {event.contract_id}")


def register_handlers():
    message_bus.register_event_handler(PropertyRented, log_property_rented)
    message_bus.register_event_handler(PropertyReleased, log_property_released)
