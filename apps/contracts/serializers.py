"""Serializers for the contracts domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Contract


class ContractSerializer(serializers.ModelSerializer):
    user = serializers.ReadOnlyField(source="user_id")
    property = serializers.ReadOnlyField(source="property_id")
    property_location = serializers.ReadOnlyField(source="property.location")
    username = serializers.ReadOnlyField(source="user.username")

    class Meta:
        model = Contract
        fields = [
            "id",
            "start_date",
            "duration",
            "details",
            "user",
            "username",
            "property",
            "property_location",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ContractTermsSerializer(serializers.Serializer):
    """Terms accepted on update. A missing start date is rejected by the service."""

    start_date = serializers.DateTimeField(required=False, allow_null=True, default=None)
    duration = serializers.IntegerField()
    details = serializers.CharField(allow_blank=True)


class ContractCreateSerializer(ContractTermsSerializer):
    user_id = serializers.UUIDField()
    property_id = serializers.UUIDField()
