"""Serializers for user-related API endpoints."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Public representation of a user; the password never leaves the server."""

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "email",
            "first_name",
            "last_name",
            "phone_number",
            "role",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class UserWriteSerializer(serializers.Serializer):
    """
    Input for administrator create/update.

    Field formats (names, phone, email pattern) are enforced by
    ``UserService`` so both entry points report the same messages.
    """

    username = serializers.CharField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)
    email = serializers.CharField()
    first_name = serializers.CharField()
    last_name = serializers.CharField()
    phone_number = serializers.CharField()
    role = serializers.ChoiceField(choices=User.Role.choices, required=False)
