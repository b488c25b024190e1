"""Offer API views."""

from __future__ import annotations

from rest_framework import mixins, status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.permissions import IsAdminOrReadOnly

from .serializers import OfferCreateSerializer, OfferPercentSerializer, OfferSerializer
from .services import OfferService


class OfferViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """Offers are public to read; administrators create, change and withdraw them."""

    serializer_class = OfferSerializer
    permission_classes = [IsAdminOrReadOnly]
    lookup_value_regex = r"[0-9a-fA-F-]{36}"

    def get_queryset(self):  # type: ignore
        return OfferService.list_all()

    def retrieve(self, request, pk=None):  # type: ignore
        return Response(OfferSerializer(OfferService.get(pk)).data)

    def create(self, request):  # type: ignore
        serializer = OfferCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        offer = OfferService.create(**serializer.validated_data)
        return Response(OfferSerializer(offer).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):  # type: ignore
        serializer = OfferPercentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        offer = OfferService.update(pk, **serializer.validated_data)
        return Response(OfferSerializer(OfferService.get(offer.pk)).data)

    def destroy(self, request, pk=None):  # type: ignore
        OfferService.delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
