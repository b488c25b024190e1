"""Serializers for the offers domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Offer


class OfferSerializer(serializers.ModelSerializer):
    property = serializers.ReadOnlyField(source="property_id")
    property_location = serializers.ReadOnlyField(source="property.location")
    initial_price = serializers.DecimalField(
        source="property.initial_price", max_digits=12, decimal_places=2, read_only=True
    )
    price_after_offer = serializers.DecimalField(
        source="property.price_after_offer", max_digits=12, decimal_places=2, read_only=True
    )

    class Meta:
        model = Offer
        fields = [
            "id",
            "percent",
            "property",
            "property_location",
            "initial_price",
            "price_after_offer",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class OfferPercentSerializer(serializers.Serializer):
    """Range (0, 100] is checked by ``OfferService``."""

    percent = serializers.DecimalField(max_digits=5, decimal_places=2)


class OfferCreateSerializer(OfferPercentSerializer):
    property_id = serializers.UUIDField()
