"""Property API views."""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import mixins, status, viewsets  # type: ignore
from rest_framework.filters import OrderingFilter  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.permissions import IsAdminOrReadOnly, is_admin
from shared.domain.exceptions import PropertyNotFound

from .filters import PropertyFilterSet
from .serializers import PropertySerializer, PropertyWriteSerializer
from .services import PropertyService


class PropertyViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """Catalogue for everyone, management for administrators."""

    serializer_class = PropertySerializer
    permission_classes = [IsAdminOrReadOnly]
    lookup_value_regex = r"[0-9a-fA-F-]{36}"
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = PropertyFilterSet
    ordering_fields = [
        "initial_price",
        "price_after_offer",
        "rooms_number",
        "created_at",
    ]

    def get_queryset(self):  # type: ignore
        if is_admin(self.request.user):
            return PropertyService.list_all()
        return PropertyService.list_available()

    def get_serializer_class(self):  # type: ignore
        if self.action in {"create", "update", "partial_update"}:
            return PropertyWriteSerializer
        return PropertySerializer

    def retrieve(self, request, pk=None):  # type: ignore
        prop = PropertyService.get(pk)
        if prop.is_rented and not is_admin(request.user):
            # Rented units are hidden from the public catalogue
            raise PropertyNotFound(f"Property with id {pk} not found!")
        return Response(PropertySerializer(prop).data)

    def create(self, request):  # type: ignore
        serializer = PropertyWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        prop = PropertyService.create(**serializer.validated_data)
        return Response(PropertySerializer(prop).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None, partial: bool = False):  # type: ignore
        serializer = PropertyWriteSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        prop = PropertyService.update(pk, **serializer.validated_data)
        return Response(PropertySerializer(prop).data)

    def partial_update(self, request, pk=None):  # type: ignore
        return self.update(request, pk=pk, partial=True)

    def destroy(self, request, pk=None):  # type: ignore
        PropertyService.delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
