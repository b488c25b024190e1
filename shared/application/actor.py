"""
Acting user helpers

Customer-scoped service calls receive the acting user explicitly; these
helpers reject calls made without an authenticated one.
"""

import logging

from shared.domain.exceptions import AuthenticationRequired

logger = logging.getLogger(__name__)


def require_actor(actor):
    """Return the actor, or raise AuthenticationRequired when nobody is logged in."""
    if actor is None or not getattr(actor, 'is_authenticated', False):
        logger.error("User not logged in")
        raise AuthenticationRequired()
    return actor
