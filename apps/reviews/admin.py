"""Admin registrations for reviews domain."""

from __future__ import annotations

from django.contrib import admin

from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ('user', 'date', 'message')
    search_fields = ('message', 'user__username')
    list_filter = ('date',)
