"""User API views."""

from __future__ import annotations

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from .permissions import IsAdminRole
from .serializers import UserSerializer, UserWriteSerializer
from .services import UserService


class UserViewSet(
    mixins.ListModelMixin,
    viewsets.GenericViewSet,
):
    """User management.

    - list/retrieve/create/update/delete are for administrators
    - `me` returns the profile of the current user
    """

    serializer_class = UserSerializer
    permission_classes = [permissions.IsAuthenticated, IsAdminRole]
    lookup_value_regex = r"[0-9a-fA-F-]{36}"

    def get_queryset(self):  # type: ignore
        return UserService.list_all()

    def retrieve(self, request, pk=None):  # type: ignore
        return Response(UserSerializer(UserService.get(pk)).data)

    def create(self, request):  # type: ignore
        serializer = UserWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = UserService.create(**serializer.validated_data)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None, partial: bool = False):  # type: ignore
        serializer = UserWriteSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        user = UserService.update(pk, **serializer.validated_data)
        return Response(UserSerializer(user).data)

    def partial_update(self, request, pk=None):  # type: ignore
        return self.update(request, pk=pk, partial=True)

    def destroy(self, request, pk=None):  # type: ignore
        UserService.delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=["get"], permission_classes=[permissions.IsAuthenticated])
    def me(self, request):
        """Profile of the current user."""
        return Response(UserSerializer(request.user).data)
