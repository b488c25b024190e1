"""Serializers for authentication flows (register, login)."""

from __future__ import annotations

from typing import Any

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

from .services import UserService

User = get_user_model()


class RegisterSerializer(serializers.Serializer):
    username = serializers.CharField()
    email = serializers.CharField()
    phone_number = serializers.CharField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)
    password_confirm = serializers.CharField(write_only=True, trim_whitespace=False)
    first_name = serializers.CharField()
    last_name = serializers.CharField()

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        if attrs.get("password") != attrs.get("password_confirm"):
            raise serializers.ValidationError({"password_confirm": "Passwords do not match."})
        return attrs

    def create(self, validated_data: dict[str, Any]):  # type: ignore
        validated_data.pop("password_confirm", None)
        # Self-registration always yields a customer account
        return UserService.create(role=User.Role.CUSTOMER, **validated_data)


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        username = attrs.get("username", "")
        password = attrs.get("password", "")

        user = User.objects.filter(username=username).first()
        if user is None or not user.check_password(password) or not user.is_active:
            raise serializers.ValidationError({"username": "Incorrect password or username."})

        attrs["user"] = user
        return attrs
