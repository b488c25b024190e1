"""Solicitation service.

Customers request available properties; a customer may request a given
property only once. The database unique constraint backs the duplicate check
for requests that race each other.
"""

from __future__ import annotations

import logging

from django.db import IntegrityError  # type: ignore
from django.db.models import QuerySet  # type: ignore
from django.utils import timezone  # type: ignore

from apps.properties.models import Property
from shared.application.actor import require_actor
from shared.application.uow import DjangoUnitOfWork, lock_for_update
from shared.domain.exceptions import (
    DuplicateSolicitation,
    PropertyNotAvailable,
    PropertyNotFound,
    SolicitationNotFound,
)

from .events import SolicitationSubmitted
from .models import Solicitation

logger = logging.getLogger(__name__)


class SolicitationService:
    """Submit, withdraw and look up rental requests."""

    @classmethod
    def list_all(cls) -> QuerySet:
        return Solicitation.objects.select_related("user", "property")

    @classmethod
    def list_for_owner(cls, actor) -> QuerySet:
        actor = require_actor(actor)
        return cls.list_all().filter(user_id=actor.pk)

    @classmethod
    def get(cls, solicitation_id) -> Solicitation:
        solicitation = cls.list_all().filter(pk=solicitation_id).first()
        if solicitation is None:
            logger.error(f"Solicitation with id {solicitation_id} was not found in db")
            raise SolicitationNotFound(f"Solicitation with id {solicitation_id} not found!")
        return solicitation

    @classmethod
    def get_for_owner(cls, solicitation_id, actor) -> Solicitation:
        solicitation = cls.list_for_owner(actor).filter(pk=solicitation_id).first()
        if solicitation is None:
            logger.error(f"Solicitation with id {solicitation_id} was not found for user {actor.pk}")
            raise SolicitationNotFound(f"Solicitation with id {solicitation_id} not found!")
        return solicitation

    @classmethod
    def create(cls, actor, property_id) -> Solicitation:
        """
        Record that ``actor`` wants to rent the property, stamped with the current time.

        Raises:
            AuthenticationRequired: no logged in user.
            DuplicateSolicitation: the user already requested this property.
            PropertyNotFound: unknown property.
            PropertyNotAvailable: the property is rented.
        """
        actor = require_actor(actor)

        if Solicitation.objects.filter(user_id=actor.pk, property_id=property_id).exists():
            logger.error(f"User {actor.pk} has already requested property {property_id}")
            raise DuplicateSolicitation()

        with DjangoUnitOfWork() as uow:
            prop = lock_for_update(Property.objects.filter(pk=property_id)).first()
            if prop is None:
                logger.error(f"Property with id {property_id} was not found in db")
                raise PropertyNotFound(f"Property with id {property_id} not found!")
            if prop.is_rented:
                logger.error(f"Property with id {property_id} is not available")
                raise PropertyNotAvailable()

            try:
                solicitation = Solicitation.objects.create(
                    user_id=actor.pk,
                    property_id=prop.pk,
                    requested_at=timezone.now(),
                )
            except IntegrityError:
                logger.error(f"User {actor.pk} has already requested property {property_id}")
                raise DuplicateSolicitation()

            uow.add_event(
                SolicitationSubmitted(
                    aggregate_id=prop.pk,
                    solicitation_id=solicitation.pk,
                    property_id=prop.pk,
                    user_id=actor.pk,
                )
            )

        logger.debug(f"Solicitation with id {solicitation.id} was inserted in db")
        logger.info(f"Solicitation created successfully for property {property_id}")
        return solicitation

    @classmethod
    def delete(cls, solicitation_id) -> None:
        deleted, _ = Solicitation.objects.filter(pk=solicitation_id).delete()
        if not deleted:
            logger.error(f"Solicitation with id {solicitation_id} was not found in db")
            raise SolicitationNotFound(f"Solicitation with id {solicitation_id} not found!")
        logger.info(f"Solicitation with id {solicitation_id} was deleted successfully")

    @classmethod
    def delete_for_owner(cls, solicitation_id, actor) -> None:
        """Withdraw one of the actor's own requests."""
        actor = require_actor(actor)
        deleted, _ = Solicitation.objects.filter(pk=solicitation_id, user_id=actor.pk).delete()
        if not deleted:
            logger.error(f"Solicitation with id {solicitation_id} was not found for user {actor.pk}")
            raise SolicitationNotFound(f"Solicitation with id {solicitation_id} not found!")
        logger.info(f"Solicitation with id {solicitation_id} was withdrawn by user {actor.pk}")
