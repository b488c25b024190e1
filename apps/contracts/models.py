"""Rental contract model."""

from __future__ import annotations

import uuid

from django.conf import settings  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Contract(models.Model):
    """
    Rental agreement between a customer and a property.

    A property has at most one contract; while it exists the property is
    marked rented. The user and property links are fixed at creation.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    start_date = models.DateTimeField(_("Start date"))
    duration = models.PositiveIntegerField(
        _("Duration (months)"),
        validators=[MinValueValidator(1)],
    )
    details = models.TextField(_("Details"))
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="contracts",
    )
    property = models.OneToOneField(
        "properties.Property",
        on_delete=models.CASCADE,
        related_name="rental_contract",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Contract")
        verbose_name_plural = _("Contracts")
        ordering = ["-start_date"]

    def __str__(self) -> str:
        return f"Contract {self.id} for {self.property_id}"
