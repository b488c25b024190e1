"""Serializers for reviews.

Provide both read and write serializers for the ``Review`` model. Message
length rules are applied by ``ReviewService``; the author of a customer
review is taken from the request in the view.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Review


class ReviewSerializer(serializers.ModelSerializer):
    user = serializers.ReadOnlyField(source='user_id')
    username = serializers.ReadOnlyField(source='user.username')

    class Meta:
        model = Review
        fields = ['id', 'message', 'date', 'user', 'username']
        read_only_fields = fields


class ReviewMessageSerializer(serializers.Serializer):
    message = serializers.CharField(allow_blank=True, trim_whitespace=False)


class ReviewCreateSerializer(ReviewMessageSerializer):
    """Admin variant naming the author explicitly."""

    user_id = serializers.UUIDField()
