"""User domain models for the building management back office.

The platform differentiates two roles: administrators, who manage the
property portfolio, contracts and offers, and customers, who browse
properties, request rentals and leave reviews. Contracts, reviews and
solicitations reference their owning user by foreign key.
"""

from __future__ import annotations

import uuid
from typing import Any

from django.contrib.auth.models import AbstractUser, UserManager  # type: ignore
from django.core.validators import RegexValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


PHONE_VALIDATOR = RegexValidator(
    regex=r"^\+40\d{9}$",
    message=_("Invalid phone number format. Phone number must start with '+40' followed by 9 digits."),
)


class CustomUserManager(UserManager):
    """User manager: new accounts are customers unless stated otherwise."""

    use_in_migrations = True

    def create_user(self, username: str, email: str | None = None, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("role", CustomUser.Role.CUSTOMER)
        return super().create_user(username, email, password, **extra_fields)

    def create_superuser(self, username: str, email: str | None = None, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("role", CustomUser.Role.ADMIN)
        return super().create_superuser(username, email, password, **extra_fields)


class CustomUser(AbstractUser):
    """Platform user holding either the administrator or the customer role."""

    class Role(models.TextChoices):
        ADMIN = "admin", _("Administrator")
        CUSTOMER = "customer", _("Customer")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(_("Email"), unique=True)
    phone_number = models.CharField(
        _("Phone number"),
        max_length=12,
        blank=True,
        validators=[PHONE_VALIDATOR],
    )
    role = models.CharField(
        _("Role"),
        max_length=20,
        choices=Role.choices,
        default=Role.CUSTOMER,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CustomUserManager()

    REQUIRED_FIELDS = ["email"]

    class Meta:
        verbose_name = _("User")
        verbose_name_plural = _("Users")
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.username} ({self.get_role_display()})"

    def is_admin(self) -> bool:
        return self.role == self.Role.ADMIN or self.is_superuser

    def is_customer(self) -> bool:
        return self.role == self.Role.CUSTOMER


# Short alias used by services and tests
User = CustomUser
