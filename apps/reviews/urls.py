"""URL routing for the reviews domain."""

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import CustomerReviewViewSet, ReviewViewSet

router = DefaultRouter()
router.register(r'my', CustomerReviewViewSet, basename='my-review')
router.register(r'', ReviewViewSet, basename='review')

urlpatterns = [path('', include(router.urls))]
