"""Serializers for the properties domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import LOCATION_MAX_LENGTH, Property


class PropertySerializer(serializers.ModelSerializer):
    property_type_display = serializers.ReadOnlyField(source="get_property_type_display")
    property_status_display = serializers.ReadOnlyField(source="get_property_status_display")

    class Meta:
        model = Property
        fields = [
            "id",
            "location",
            "latitude",
            "longitude",
            "rooms_number",
            "initial_price",
            "price_after_offer",
            "is_rented",
            "is_offer_applied",
            "property_type",
            "property_type_display",
            "property_status",
            "property_status_display",
            "image_url",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class PropertyWriteSerializer(serializers.Serializer):
    """
    Input shape for create/update.

    Only types and formats are checked here; range rules and location
    uniqueness are enforced by ``PropertyService``. The rented and offer
    flags are not part of the input.
    """

    location = serializers.CharField(max_length=LOCATION_MAX_LENGTH)
    latitude = serializers.FloatField()
    longitude = serializers.FloatField()
    rooms_number = serializers.IntegerField()
    initial_price = serializers.DecimalField(max_digits=12, decimal_places=2)
    property_type = serializers.ChoiceField(
        choices=Property.PropertyType.choices,
        required=False,
        default=Property.PropertyType.APARTMENT,
    )
    property_status = serializers.ChoiceField(
        choices=Property.PropertyStatus.choices,
        required=False,
        default=Property.PropertyStatus.NEW,
    )
    image_url = serializers.URLField(max_length=500, required=False, allow_blank=True)
