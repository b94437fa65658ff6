"""
Admin configuration for inventory models.
"""

from django.contrib import admin

from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Product."""

    list_display = ["name", "category", "price", "cost", "stock", "min_stock", "created_at"]
    list_filter = ["category", "created_at"]
    search_fields = ["name", "category"]
    readonly_fields = ["id", "created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "name", "category", "color"),
            },
        ),
        (
            "Pricing",
            {
                "fields": ("price", "cost"),
            },
        ),
        (
            "Stock",
            {
                "fields": ("stock", "min_stock"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )
