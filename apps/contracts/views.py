"""Contract API views."""

from __future__ import annotations

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.permissions import IsAdminRole, IsCustomerRole

from .serializers import ContractCreateSerializer, ContractSerializer, ContractTermsSerializer
from .services import ContractService

UUID_LOOKUP = r"[0-9a-fA-F-]{36}"


class ContractViewSet(viewsets.ViewSet):
    """Contract management for administrators."""

    permission_classes = [permissions.IsAuthenticated, IsAdminRole]
    lookup_value_regex = UUID_LOOKUP

    def list(self, request):  # type: ignore
        return Response(ContractSerializer(ContractService.list_all(), many=True).data)

    def retrieve(self, request, pk=None):  # type: ignore
        return Response(ContractSerializer(ContractService.get(pk)).data)

    def create(self, request):  # type: ignore
        serializer = ContractCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        contract = ContractService.create(**serializer.validated_data)
        return Response(ContractSerializer(contract).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):  # type: ignore
        serializer = ContractTermsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        contract = ContractService.update(pk, **serializer.validated_data)
        return Response(ContractSerializer(contract).data)

    def destroy(self, request, pk=None):  # type: ignore
        ContractService.delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


class CustomerContractViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """Read-only access for a customer to their own contracts."""

    serializer_class = ContractSerializer
    permission_classes = [permissions.IsAuthenticated, IsCustomerRole]
    lookup_value_regex = UUID_LOOKUP

    def get_queryset(self):  # type: ignore
        return ContractService.list_for_owner(self.request.user)

    def retrieve(self, request, pk=None):  # type: ignore
        contract = ContractService.get_for_owner(pk, request.user)
        return Response(ContractSerializer(contract).data)
