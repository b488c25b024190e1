"""Rental request model."""

from __future__ import annotations

import uuid

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Solicitation(models.Model):
    """A customer's request to rent a property. One per (user, property) pair."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    requested_at = models.DateTimeField(_("Requested at"), default=timezone.now)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="solicitations",
    )
    property = models.ForeignKey(
        "properties.Property",
        on_delete=models.CASCADE,
        related_name="solicitations",
    )

    class Meta:
        verbose_name = _("Solicitation")
        verbose_name_plural = _("Solicitations")
        ordering = ["-requested_at"]
        constraints = [
            models.UniqueConstraint(fields=["user", "property"], name="unique_solicitation_per_user_property"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} -> {self.property_id}"
