"""Rental contract service.

Creating a contract and marking its property rented happen in one unit of
work, as do removing a contract and releasing its property. The rented flag
is claimed with a conditional UPDATE so that two concurrent requests for the
same property cannot both succeed.
"""

from __future__ import annotations

import logging
from datetime import datetime

from django.db import IntegrityError  # type: ignore
from django.db.models import QuerySet  # type: ignore
from django.utils import timezone  # type: ignore

from apps.properties.models import Property
from apps.users.models import User
from shared.application.actor import require_actor
from shared.application.uow import DjangoUnitOfWork, lock_for_update
from shared.domain.exceptions import (
    ContractNotFound,
    DomainValidationError,
    PropertyAlreadyRented,
    PropertyNotFound,
    UserNotFound,
)

from .events import PropertyReleased, PropertyRented
from .models import Contract

logger = logging.getLogger(__name__)


def _validate_start_date(start_date: datetime | None) -> datetime:
    if start_date is None:
        logger.error("Start date is missing")
        raise DomainValidationError("Start date not valid")
    if timezone.is_naive(start_date):
        start_date = timezone.make_aware(start_date)
    if start_date < timezone.now():
        logger.error(f"Start date {start_date} is in the past")
        raise DomainValidationError("Start date cannot be in the past")
    return start_date


def _validate_terms(duration, details) -> None:
    try:
        months = int(duration)
    except (TypeError, ValueError):
        logger.error(f"Invalid contract duration format: {duration}")
        raise DomainValidationError("Duration must be an integer greater than 0.")
    if months <= 0:
        logger.error(f"Invalid contract duration: {duration}")
        raise DomainValidationError("Duration must be greater than 0.")
    if not details or not str(details).strip():
        logger.error("Contract details are missing")
        raise DomainValidationError("Details are required.")


class ContractService:
    """Create, update, delete and look up rental contracts."""

    @classmethod
    def list_all(cls) -> QuerySet:
        return Contract.objects.select_related("user", "property")

    @classmethod
    def list_for_owner(cls, actor) -> QuerySet:
        actor = require_actor(actor)
        return cls.list_all().filter(user_id=actor.pk)

    @classmethod
    def get(cls, contract_id) -> Contract:
        contract = cls.list_all().filter(pk=contract_id).first()
        if contract is None:
            logger.error(f"Contract with id {contract_id} was not found in db")
            raise ContractNotFound(f"Contract with id {contract_id} not found!")
        return contract

    @classmethod
    def get_for_owner(cls, contract_id, actor) -> Contract:
        """Same as ``get`` but contracts of other users are reported as missing."""
        contract = cls.list_for_owner(actor).filter(pk=contract_id).first()
        if contract is None:
            logger.error(f"Contract with id {contract_id} was not found for user {actor.pk}")
            raise ContractNotFound(f"Contract with id {contract_id} not found!")
        return contract

    @classmethod
    def create(cls, *, user_id, property_id, start_date: datetime | None, duration: int, details: str) -> Contract:
        """
        Sign a contract for an available property.

        Raises:
            DomainValidationError: start date missing or in the past, bad terms.
            UserNotFound / PropertyNotFound: unknown references.
            PropertyAlreadyRented: the property already has a contract.
        """
        start_date = _validate_start_date(start_date)
        _validate_terms(duration, details)

        if not User.objects.filter(pk=user_id).exists():
            logger.error(f"User with id {user_id} was not found in db")
            raise UserNotFound(f"User with id {user_id} not found!")

        with DjangoUnitOfWork() as uow:
            prop = lock_for_update(Property.objects.filter(pk=property_id)).first()
            if prop is None:
                logger.error(f"Property with id {property_id} was not found in db")
                raise PropertyNotFound(f"Property with id {property_id} not found!")
            if prop.is_rented:
                logger.error(f"Property with id {property_id} is already rented")
                raise PropertyAlreadyRented()

            claimed = Property.objects.filter(pk=prop.pk, is_rented=False).update(is_rented=True)
            if not claimed:
                logger.error(f"Property with id {property_id} was rented concurrently")
                raise PropertyAlreadyRented()

            try:
                contract = Contract.objects.create(
                    user_id=user_id,
                    property_id=prop.pk,
                    start_date=start_date,
                    duration=duration,
                    details=details,
                )
            except IntegrityError:
                logger.error(f"Contract for property {property_id} already exists")
                raise PropertyAlreadyRented()

            uow.add_event(
                PropertyRented(
                    aggregate_id=prop.pk,
                    contract_id=contract.pk,
                    property_id=prop.pk,
                    user_id=contract.user_id,
                )
            )

        logger.debug(f"Contract with id {contract.id} was inserted in db")
        logger.info(f"Contract created successfully for property {property_id}")
        return contract

    @classmethod
    def update(cls, contract_id, *, start_date: datetime | None, duration: int, details: str) -> Contract:
        """Change the terms of a contract; the user and property stay as they are."""
        start_date = _validate_start_date(start_date)
        _validate_terms(duration, details)

        with DjangoUnitOfWork():
            contract = lock_for_update(Contract.objects.filter(pk=contract_id)).first()
            if contract is None:
                logger.error(f"Contract with id {contract_id} was not found in db")
                raise ContractNotFound(f"Contract with id {contract_id} not found!")

            contract.start_date = start_date
            contract.duration = duration
            contract.details = details
            contract.save(update_fields=["start_date", "duration", "details", "updated_at"])

        logger.info(f"Contract with id {contract_id} was updated successfully")
        return contract

    @classmethod
    def delete(cls, contract_id) -> None:
        with DjangoUnitOfWork() as uow:
            contract = lock_for_update(Contract.objects.filter(pk=contract_id)).first()
            if contract is None:
                logger.error(f"Contract with id {contract_id} was not found in db")
                raise ContractNotFound(f"Contract with id {contract_id} not found!")

            deleted_id = contract.pk
            property_id = contract.property_id
            contract.delete()

            released = Property.objects.filter(pk=property_id).update(is_rented=False)
            if released:
                uow.add_event(
                    PropertyReleased(aggregate_id=property_id, contract_id=deleted_id, property_id=property_id)
                )
            else:
                logger.warning(f"Property with id {property_id} of contract {contract_id} no longer exists")

        logger.info(f"Contract with id {contract_id} was deleted successfully")
