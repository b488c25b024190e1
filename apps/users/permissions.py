"""Role-based permission classes shared by every API in the project."""

from __future__ import annotations

from rest_framework import permissions  # type: ignore


def is_admin(user) -> bool:
    if not user or not user.is_authenticated:
        return False
    if getattr(user, "is_staff", False) or getattr(user, "is_superuser", False):
        return True
    return hasattr(user, "is_admin") and user.is_admin()


class IsAdminRole(permissions.BasePermission):
    """Only administrators (role=admin, staff or superusers)."""

    def has_permission(self, request, view) -> bool:  # type: ignore
        return is_admin(request.user)


class IsAdminOrReadOnly(permissions.BasePermission):
    """Anyone may read, only administrators may write."""

    def has_permission(self, request, view) -> bool:  # type: ignore
        if request.method in permissions.SAFE_METHODS:
            return True
        return is_admin(request.user)


class IsCustomerRole(permissions.BasePermission):
    """Authenticated customers acting on their own records."""

    def has_permission(self, request, view) -> bool:  # type: ignore
        user = request.user
        if not user.is_authenticated:
            return False
        return hasattr(user, "is_customer") and user.is_customer()
