"""Property domain models for the building management back office.

A property is a rentable unit. Besides its descriptive attributes it carries
two state flags that mirror other records: ``is_rented`` is true exactly
while a rental contract exists for it, and ``is_offer_applied`` is true
exactly while a price offer exists for it. Those flags and
``price_after_offer`` are written only by the contract and offer services.
"""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

LOCATION_MAX_LENGTH = 50


class Property(models.Model):
    """A rentable unit of the managed portfolio."""

    class PropertyType(models.TextChoices):
        APARTMENT = "apartment", _("Apartment")
        HOUSE = "house", _("House")
        STUDIO = "studio", _("Studio")
        OFFICE = "office", _("Office")
        COMMERCIAL = "commercial", _("Commercial space")

    class PropertyStatus(models.TextChoices):
        NEW = "new", _("New")
        RENOVATED = "renovated", _("Renovated")
        NEEDS_RENOVATION = "needs_renovation", _("Needs renovation")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    location = models.CharField(max_length=LOCATION_MAX_LENGTH, unique=True)
    latitude = models.FloatField(
        validators=[MinValueValidator(-90.0), MaxValueValidator(90.0)],
    )
    longitude = models.FloatField(
        validators=[MinValueValidator(-180.0), MaxValueValidator(180.0)],
    )
    rooms_number = models.PositiveSmallIntegerField(validators=[MinValueValidator(1)])
    initial_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    price_after_offer = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        help_text=_("Initial price reduced by the active offer, equal to it otherwise."),
    )
    is_rented = models.BooleanField(default=False)
    is_offer_applied = models.BooleanField(default=False)
    property_type = models.CharField(
        max_length=20,
        choices=PropertyType.choices,
        default=PropertyType.APARTMENT,
    )
    property_status = models.CharField(
        max_length=20,
        choices=PropertyStatus.choices,
        default=PropertyStatus.NEW,
    )
    image_url = models.URLField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Property")
        verbose_name_plural = _("Properties")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["is_rented"], name="properties__is_rent_6c1f2a_idx"),
            models.Index(fields=["property_type", "property_status"], name="properties__propert_9b0d4e_idx"),
        ]

    def __str__(self) -> str:
        return self.location

    def save(self, *args, **kwargs):  # type: ignore
        if self.price_after_offer is None:
            self.price_after_offer = self.initial_price
        super().save(*args, **kwargs)
