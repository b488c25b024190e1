"""URL routing for the solicitations domain."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import CustomerSolicitationViewSet, SolicitationViewSet

router = DefaultRouter()
router.register(r"my", CustomerSolicitationViewSet, basename="my-solicitation")
router.register(r"", SolicitationViewSet, basename="solicitation")

urlpatterns = [
    path("", include(router.urls)),
]
