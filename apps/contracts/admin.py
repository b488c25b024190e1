"""Admin registrations for contracts domain."""

from __future__ import annotations

from django.contrib import admin

from .models import Contract


@admin.register(Contract)
class ContractAdmin(admin.ModelAdmin):
    list_display = ("id", "property", "user", "start_date", "duration")
    list_filter = ("start_date",)
    search_fields = ("property__location", "user__username", "user__email")
    readonly_fields = ("user", "property", "created_at", "updated_at")
