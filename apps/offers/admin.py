"""Admin registrations for offers domain."""

from __future__ import annotations

from django.contrib import admin

from .models import Offer


@admin.register(Offer)
class OfferAdmin(admin.ModelAdmin):
    list_display = ("property", "percent", "created_at")
    search_fields = ("property__location",)
    readonly_fields = ("property", "created_at", "updated_at")
