"""URL routing for the contracts domain."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import ContractViewSet, CustomerContractViewSet

router = DefaultRouter()
router.register(r"my", CustomerContractViewSet, basename="my-contract")
router.register(r"", ContractViewSet, basename="contract")

urlpatterns = [
    path("", include(router.urls)),
]
