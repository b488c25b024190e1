"""User directory service.

Validates account data the same way for administrator-created users and
self-registered customers. Deleting a user also releases every property the
user was renting, since their contracts go away with them.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from django.db import IntegrityError  # type: ignore
from django.db.models import Q, QuerySet  # type: ignore

from apps.properties.models import Property
from shared.application.uow import DjangoUnitOfWork, lock_for_update
from shared.domain.exceptions import DomainValidationError, DuplicateUser, UserNotFound

from .models import User

logger = logging.getLogger(__name__)

NAME_RE = re.compile(r"^[a-zA-Z]+$")
EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
PHONE_RE = re.compile(r"^\+40\d{9}$")
MAX_NAME_LENGTH = 30
MAX_CREDENTIAL_LENGTH = 30


def _is_valid_name(name: str | None) -> bool:
    return bool(name) and bool(NAME_RE.match(name)) and len(name) <= MAX_NAME_LENGTH


def _is_valid_credential(value: str | None) -> bool:
    return bool(value) and len(value) <= MAX_CREDENTIAL_LENGTH


def _validate(data: dict[str, Any], *, password_required: bool) -> None:
    first_name, last_name = data.get("first_name"), data.get("last_name")
    if not _is_valid_name(first_name) or not _is_valid_name(last_name):
        logger.error(f"Invalid first name or last name. First name: {first_name}, Last name: {last_name}")
        raise DomainValidationError(
            f"First name and last name must contain only letters and be at most {MAX_NAME_LENGTH} characters long."
        )

    password = data.get("password")
    password_ok = _is_valid_credential(password) if (password_required or password is not None) else True
    if not _is_valid_credential(data.get("username")) or not password_ok:
        logger.error(f"Invalid username or password. Username: {data.get('username')}")
        raise DomainValidationError(
            f"Username and password are required and must be at most {MAX_CREDENTIAL_LENGTH} characters long."
        )

    email = data.get("email")
    if not email or not EMAIL_RE.match(email):
        logger.error(f"Invalid email format: {email}")
        raise DomainValidationError("Invalid email format")

    phone_number = data.get("phone_number")
    if not phone_number or not PHONE_RE.match(phone_number):
        logger.error(f"Invalid phone number format: {phone_number}")
        raise DomainValidationError(
            "Invalid phone number format. Phone number must start with '+40' followed by 9 digits."
        )


def _ensure_unique(username: str, email: str, exclude_pk=None) -> None:
    clash = User.objects.filter(Q(username=username) | Q(email__iexact=email))
    if exclude_pk is not None:
        clash = clash.exclude(pk=exclude_pk)
    if clash.exists():
        logger.error(f"User with username {username} or email {email} already exists")
        raise DuplicateUser()


class UserService:
    """Create, update, delete and look up users."""

    @classmethod
    def list_all(cls) -> QuerySet:
        return User.objects.all()

    @classmethod
    def get(cls, user_id) -> User:
        user = User.objects.filter(pk=user_id).first()
        if user is None:
            logger.error(f"User with id {user_id} was not found in db")
            raise UserNotFound(f"User with id {user_id} not found!")
        return user

    @classmethod
    def create(
        cls,
        *,
        username: str,
        password: str,
        email: str,
        first_name: str,
        last_name: str,
        phone_number: str,
        role: str = User.Role.CUSTOMER,
    ) -> User:
        data = {
            "username": username,
            "password": password,
            "email": email,
            "first_name": first_name,
            "last_name": last_name,
            "phone_number": phone_number,
        }
        _validate(data, password_required=True)
        _ensure_unique(username, email)

        try:
            with DjangoUnitOfWork():
                user = User.objects.create_user(
                    username=username,
                    email=email,
                    password=password,
                    first_name=first_name,
                    last_name=last_name,
                    phone_number=phone_number,
                    role=role,
                )
        except IntegrityError:
            logger.error(f"User with username {username} or email {email} already exists")
            raise DuplicateUser()

        logger.debug(f"User with id {user.id} was inserted in db")
        logger.info("User created successfully")
        return user

    @classmethod
    def update(cls, user_id, **changes: Any) -> User:
        """
        Update profile fields and optionally the password and role.

        Fields left out keep their current value; a password is only changed
        when one is supplied.
        """
        with DjangoUnitOfWork():
            user = lock_for_update(User.objects.filter(pk=user_id)).first()
            if user is None:
                logger.error(f"User with id {user_id} was not found in db")
                raise UserNotFound(f"User with id {user_id} not found!")

            data = {
                name: changes.get(name, getattr(user, name))
                for name in ("username", "email", "first_name", "last_name", "phone_number", "role")
            }
            data["password"] = changes.get("password")
            _validate(data, password_required=False)
            _ensure_unique(data["username"], data["email"], exclude_pk=user.pk)

            for name in ("username", "email", "first_name", "last_name", "phone_number", "role"):
                setattr(user, name, data[name])
            if data["password"]:
                user.set_password(data["password"])
            try:
                user.save()
            except IntegrityError:
                logger.error(f"User with username {data['username']} or email {data['email']} already exists")
                raise DuplicateUser()

        logger.debug(f"User with id {user_id} was updated successfully")
        logger.info(f"User with id {user_id} was updated successfully")
        return user

    @classmethod
    def delete(cls, user_id) -> None:
        """Delete a user; their contracts, solicitations and reviews cascade."""
        with DjangoUnitOfWork():
            user = lock_for_update(User.objects.filter(pk=user_id)).first()
            if user is None:
                logger.error(f"User with id {user_id} was not found in db")
                raise UserNotFound(f"User with id {user_id} not found!")

            released = Property.objects.filter(rental_contract__user_id=user.pk).update(is_rented=False)
            user.delete()

        logger.info(f"User with id {user_id} was deleted successfully, {released} properties released")
