import uuid
from decimal import Decimal

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Property",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("location", models.CharField(max_length=50, unique=True)),
                (
                    "latitude",
                    models.FloatField(
                        validators=[
                            django.core.validators.MinValueValidator(-90.0),
                            django.core.validators.MaxValueValidator(90.0),
                        ]
                    ),
                ),
                (
                    "longitude",
                    models.FloatField(
                        validators=[
                            django.core.validators.MinValueValidator(-180.0),
                            django.core.validators.MaxValueValidator(180.0),
                        ]
                    ),
                ),
                (
                    "rooms_number",
                    models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1)]),
                ),
                (
                    "initial_price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.01"))],
                    ),
                ),
                (
                    "price_after_offer",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Initial price reduced by the active offer, equal to it otherwise.",
                        max_digits=12,
                    ),
                ),
                ("is_rented", models.BooleanField(default=False)),
                ("is_offer_applied", models.BooleanField(default=False)),
                (
                    "property_type",
                    models.CharField(
                        choices=[
                            ("apartment", "Apartment"),
                            ("house", "House"),
                            ("studio", "Studio"),
                            ("office", "Office"),
                            ("commercial", "Commercial space"),
                        ],
                        default="apartment",
                        max_length=20,
                    ),
                ),
                (
                    "property_status",
                    models.CharField(
                        choices=[
                            ("new", "New"),
                            ("renovated", "Renovated"),
                            ("needs_renovation", "Needs renovation"),
                        ],
                        default="new",
                        max_length=20,
                    ),
                ),
                ("image_url", models.URLField(blank=True, max_length=500)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Property",
                "verbose_name_plural": "Properties",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["is_rented"], name="properties__is_rent_6c1f2a_idx"),
                    models.Index(fields=["property_type", "property_status"], name="properties__propert_9b0d4e_idx"),
                ],
            },
        ),
    ]
