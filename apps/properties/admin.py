"""Admin registrations for properties domain."""

from __future__ import annotations

from django.contrib import admin

from .models import Property


@admin.register(Property)
class PropertyAdmin(admin.ModelAdmin):
    list_display = (
        "location",
        "property_type",
        "property_status",
        "rooms_number",
        "initial_price",
        "price_after_offer",
        "is_rented",
        "is_offer_applied",
    )
    list_filter = ("property_type", "property_status", "is_rented", "is_offer_applied")
    search_fields = ("location",)
    # Flags and derived price are maintained by the contract and offer services
    readonly_fields = ("price_after_offer", "is_rented", "is_offer_applied", "created_at", "updated_at")
