"""Solicitation API views."""

from __future__ import annotations

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.permissions import IsAdminRole, IsCustomerRole

from .serializers import SolicitationCreateSerializer, SolicitationSerializer
from .services import SolicitationService

UUID_LOOKUP = r"[0-9a-fA-F-]{36}"


class SolicitationViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """Administrators review and discard rental requests."""

    serializer_class = SolicitationSerializer
    permission_classes = [permissions.IsAuthenticated, IsAdminRole]
    lookup_value_regex = UUID_LOOKUP

    def get_queryset(self):  # type: ignore
        return SolicitationService.list_all()

    def retrieve(self, request, pk=None):  # type: ignore
        return Response(SolicitationSerializer(SolicitationService.get(pk)).data)

    def destroy(self, request, pk=None):  # type: ignore
        SolicitationService.delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


class CustomerSolicitationViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """A customer's own rental requests."""

    serializer_class = SolicitationSerializer
    permission_classes = [permissions.IsAuthenticated, IsCustomerRole]
    lookup_value_regex = UUID_LOOKUP

    def get_queryset(self):  # type: ignore
        return SolicitationService.list_for_owner(self.request.user)

    def retrieve(self, request, pk=None):  # type: ignore
        solicitation = SolicitationService.get_for_owner(pk, request.user)
        return Response(SolicitationSerializer(solicitation).data)

    def create(self, request):  # type: ignore
        serializer = SolicitationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        solicitation = SolicitationService.create(request.user, serializer.validated_data["property_id"])
        return Response(SolicitationSerializer(solicitation).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, pk=None):  # type: ignore
        SolicitationService.delete_for_owner(pk, request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)
