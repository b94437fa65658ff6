"""
Admin configuration for CRM models.
"""

from django.contrib import admin

from .models import Client


@admin.register(Client)
class ClientAdmin(admin.ModelAdmin):
    """Admin interface for Client."""

    list_display = ["name", "email", "phone", "total_spent", "total_orders", "last_purchase"]
    search_fields = ["name", "email", "phone"]
    readonly_fields = ["id", "total_spent", "total_orders", "last_purchase", "join_date"]
