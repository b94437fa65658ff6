"""
Django admin configuration for sales models.
"""

from django.contrib import admin

from .models import Sale, SaleItem


class SaleItemInline(admin.TabularInline):
    """Inline admin for sale items."""

    model = SaleItem
    extra = 0
    fields = ["product", "product_name", "product_deleted", "quantity", "price"]
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Sale)
class SaleAdmin(admin.ModelAdmin):
    """Read-only admin for committed sales."""

    list_display = [
        "id",
        "client",
        "client_name",
        "total",
        "payment_method",
        "created_by",
        "created_at",
    ]
    list_filter = ["payment_method", "client_deleted", "created_at"]
    search_fields = ["id", "client__name", "client_name"]
    readonly_fields = [
        "id",
        "client",
        "client_name",
        "client_deleted",
        "total",
        "payment_method",
        "created_by",
        "created_at",
    ]
    inlines = [SaleItemInline]
    date_hierarchy = "created_at"

    fieldsets = (
        ("Sale Information", {"fields": ("id", "payment_method", "total", "created_at")}),
        ("Client", {"fields": ("client", "client_name", "client_deleted")}),
        ("Staff", {"fields": ("created_by",)}),
    )

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
