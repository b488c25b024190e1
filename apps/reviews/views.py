"""API views for managing reviews."""

from __future__ import annotations

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.permissions import IsAdminRole, IsCustomerRole

from .serializers import ReviewCreateSerializer, ReviewMessageSerializer, ReviewSerializer
from .services import ReviewService

UUID_LOOKUP = r'[0-9a-fA-F-]{36}'


class ReviewViewSet(
    mixins.ListModelMixin,
    viewsets.GenericViewSet,
):
    """Administrators manage every review."""

    serializer_class = ReviewSerializer
    permission_classes = [permissions.IsAuthenticated, IsAdminRole]
    lookup_value_regex = UUID_LOOKUP

    def get_queryset(self):  # type: ignore
        return ReviewService.list_all()

    def retrieve(self, request, pk=None):  # type: ignore
        return Response(ReviewSerializer(ReviewService.get(pk)).data)

    def create(self, request):  # type: ignore
        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        review = ReviewService.create(
            serializer.validated_data['user_id'], serializer.validated_data['message']
        )
        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):  # type: ignore
        serializer = ReviewMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        review = ReviewService.update(pk, serializer.validated_data['message'])
        return Response(ReviewSerializer(review).data)

    def destroy(self, request, pk=None):  # type: ignore
        ReviewService.delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


class CustomerReviewViewSet(
    mixins.ListModelMixin,
    viewsets.GenericViewSet,
):
    """Reviews written by the requesting customer."""

    serializer_class = ReviewSerializer
    permission_classes = [permissions.IsAuthenticated, IsCustomerRole]
    lookup_value_regex = UUID_LOOKUP

    def get_queryset(self):  # type: ignore
        return ReviewService.list_for_owner(self.request.user)

    def retrieve(self, request, pk=None):  # type: ignore
        return Response(ReviewSerializer(ReviewService.get_for_owner(pk, request.user)).data)

    def create(self, request):  # type: ignore
        serializer = ReviewMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        review = ReviewService.create_for_customer(request.user, serializer.validated_data['message'])
        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):  # type: ignore
        serializer = ReviewMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        review = ReviewService.update_for_owner(pk, request.user, serializer.validated_data['message'])
        return Response(ReviewSerializer(review).data)

    def destroy(self, request, pk=None):  # type: ignore
        ReviewService.delete_for_owner(pk, request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)
