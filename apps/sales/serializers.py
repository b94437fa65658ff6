"""
Serializers for the sales app.
"""

from rest_framework import serializers

from .models import Sale, SaleItem

# camelCase keys accepted from the storefront UI
CAMEL_CASE_KEYS = {
    "clientId": "client_id",
    "paymentMethod": "payment_method",
    "productId": "product_id",
}


def normalize_sale_payload(data):
    """
    Rewrite camelCase request keys to their snake_case names.

    Snake_case keys win when both spellings are present. Values that are not
    mappings are returned untouched so the serializer can reject them.
    """
    if not hasattr(data, "items") or not hasattr(data, "get"):
        return data

    def rename(mapping):
        result = {}
        for key, value in mapping.items():
            target = CAMEL_CASE_KEYS.get(key, key)
            if target != key and target in mapping:
                continue
            result[target] = value
        return result

    payload = rename(data)
    items = payload.get("items")
    if isinstance(items, list):
        payload["items"] = [rename(item) if isinstance(item, dict) else item for item in items]
    return payload


def flatten_errors(errors, prefix=""):
    """
    Flatten nested DRF serializer errors into ``{field, message}`` entries.

    Nested list errors become indexed paths such as ``items[1].quantity``.
    """
    flattened = []

    if isinstance(errors, dict):
        for key, value in errors.items():
            if key == "non_field_errors":
                path = prefix or "request"
            elif isinstance(key, int):
                # Newer DRF reports failing list items keyed by index
                path = f"{prefix}[{key}]"
            else:
                path = f"{prefix}.{key}" if prefix else str(key)
            flattened.extend(flatten_errors(value, path))
    elif isinstance(errors, list):
        for index, value in enumerate(errors):
            if isinstance(value, (dict, list)):
                if value:
                    flattened.extend(flatten_errors(value, f"{prefix}[{index}]"))
            else:
                flattened.append({"field": prefix or "request", "message": str(value)})
    else:
        flattened.append({"field": prefix or "request", "message": str(errors)})

    return flattened


class SaleItemCreateSerializer(serializers.Serializer):
    """Serializer for one line item of a sale request."""

    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1)
    # Shape-checked only; the charged price always comes from the product
    price = serializers.DecimalField(max_digits=None, decimal_places=None)

    def validate_price(self, value):
        if value <= 0:
            raise serializers.ValidationError("Price must be positive.")
        return value


class SaleCreateSerializer(serializers.Serializer):
    """
    Serializer for a point-of-sale sale request.

    Only checks shape and ranges; it never touches the database.
    """

    client_id = serializers.UUIDField(required=False, allow_null=True, default=None)
    payment_method = serializers.ChoiceField(choices=Sale.PAYMENT_METHOD_CHOICES)
    items = SaleItemCreateSerializer(many=True)

    def validate_items(self, value):
        """Validate that at least one item is provided."""
        if not value:
            raise serializers.ValidationError("At least one item is required.")
        return value


class SaleItemDetailSerializer(serializers.ModelSerializer):
    """Serializer for sale item details."""

    product_name = serializers.CharField(source="get_product_display_name", read_only=True)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = SaleItem
        fields = [
            "id",
            "product",
            "product_name",
            "product_deleted",
            "quantity",
            "price",
            "subtotal",
        ]


class SaleDetailSerializer(serializers.ModelSerializer):
    """Serializer for sale details."""

    items = SaleItemDetailSerializer(many=True, read_only=True)
    client_name = serializers.SerializerMethodField()
    created_by_name = serializers.SerializerMethodField()

    class Meta:
        model = Sale
        fields = [
            "id",
            "client",
            "client_name",
            "client_deleted",
            "items",
            "total",
            "payment_method",
            "created_by_name",
            "created_at",
        ]

    def get_client_name(self, obj):
        """Get client name or 'Walk-in' if the sale had no client."""
        name = obj.get_client_display_name()
        if name:
            return name
        return "Walk-in" if not obj.client_deleted else None

    def get_created_by_name(self, obj):
        if obj.created_by is None:
            return None
        return obj.created_by.get_full_name() or obj.created_by.username
