"""URL configuration for the Building Management project.

The `urlpatterns` list routes URLs to views. It includes the Django admin,
the OpenAPI schema and the application‑level routers provided by Django
Rest Framework in each app.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView  # type: ignore

# API versioning. v1 is our initial version; future versions can be added here.

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/v1/schema/', SpectacularAPIView.as_view(), name='schema'),
    # Application URLs
    path('api/v1/auth/', include(('apps.users.auth_urls', 'auth'), namespace='auth')),
    path('api/v1/users/', include('apps.users.urls')),
    path('api/v1/properties/', include('apps.properties.urls')),
    path('api/v1/contracts/', include('apps.contracts.urls')),
    path('api/v1/offers/', include('apps.offers.urls')),
    path('api/v1/solicitations/', include('apps.solicitations.urls')),
    path('api/v1/reviews/', include('apps.reviews.urls')),
]
