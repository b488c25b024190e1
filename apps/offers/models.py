"""Price offer model."""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Offer(models.Model):
    """Percentage discount on a property's initial price. At most one per property."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    percent = models.DecimalField(
        _("Discount percent"),
        max_digits=5,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01")), MaxValueValidator(Decimal("100"))],
    )
    property = models.OneToOneField(
        "properties.Property",
        on_delete=models.CASCADE,
        related_name="price_offer",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Offer")
        verbose_name_plural = _("Offers")
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.percent}% off {self.property_id}"
