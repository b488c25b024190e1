"""Event handlers for the solicitations domain."""

import logging

from shared.application.message_bus import message_bus

from .events import SolicitationSubmitted

logger = logging.getLogger(__name__)


def log_solicitation_submitted(event: SolicitationSubmitted):
    logger.info(
        f"User {event.user_id} requested property {event.property_id} (solicitation {event.solicitation_id})"
    )


def register_handlers():
    message_bus.register_event_handler(SolicitationSubmitted, log_solicitation_submitted)
