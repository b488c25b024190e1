"""Serializers for the solicitations domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Solicitation


class SolicitationSerializer(serializers.ModelSerializer):
    user = serializers.ReadOnlyField(source="user_id")
    username = serializers.ReadOnlyField(source="user.username")
    property = serializers.ReadOnlyField(source="property_id")
    property_location = serializers.ReadOnlyField(source="property.location")

    class Meta:
        model = Solicitation
        fields = ["id", "requested_at", "user", "username", "property", "property_location"]
        read_only_fields = fields


class SolicitationCreateSerializer(serializers.Serializer):
    property_id = serializers.UUIDField()
