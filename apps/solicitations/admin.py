"""Admin registrations for solicitations domain."""

from __future__ import annotations

from django.contrib import admin

from .models import Solicitation


@admin.register(Solicitation)
class SolicitationAdmin(admin.ModelAdmin):
    list_display = ("property", "user", "requested_at")
    list_filter = ("requested_at",)
    search_fields = ("property__location", "user__username", "user__email")
