"""FilterSet definitions for property listing."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Property


class PropertyFilterSet(django_filters.FilterSet):
    """FilterSet for Property with the filters offered by the catalogue."""

    location = django_filters.CharFilter(field_name="location", lookup_expr="icontains")
    property_type = django_filters.ChoiceFilter(choices=Property.PropertyType.choices)
    property_status = django_filters.ChoiceFilter(choices=Property.PropertyStatus.choices)
    is_rented = django_filters.BooleanFilter(field_name="is_rented")
    is_offer_applied = django_filters.BooleanFilter(field_name="is_offer_applied")

    rooms_min = django_filters.NumberFilter(field_name="rooms_number", lookup_expr="gte")
    rooms_max = django_filters.NumberFilter(field_name="rooms_number", lookup_expr="lte")
    # Bounds apply to what the customer actually pays
    price_min = django_filters.NumberFilter(field_name="price_after_offer", lookup_expr="gte")
    price_max = django_filters.NumberFilter(field_name="price_after_offer", lookup_expr="lte")

    class Meta:
        model = Property
        fields = [
            "location",
            "property_type",
            "property_status",
            "is_rented",
            "is_offer_applied",
        ]
