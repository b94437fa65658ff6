"""
Inventory models for the shop catalog.

A product's stock is decremented only by sale commits (through a guarded
conditional update) and adjusted by administrators through the catalog API.
Deleting a product never deletes sales history: sale lines keep a snapshot
of the product name instead.
"""

import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator, RegexValidator
from django.db import models


class Product(models.Model):
    """
    Sellable catalog product.

    Tracks pricing, cost and the current stock count. The database enforces
    ``stock >= 0`` so no write path can oversell.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the product",
    )

    name = models.CharField(
        max_length=100,
        help_text="Product name (e.g., 'Caderno Kraft A5')",
    )

    category = models.CharField(
        max_length=50,
        db_index=True,
        help_text="Product category (e.g., 'Cadernos')",
    )

    # Pricing
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Current unit selling price",
    )

    cost = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Unit cost (what we paid)",
    )

    # Inventory tracking
    stock = models.IntegerField(
        default=0,
        validators=[MinValueValidator(0)],
        help_text="Current quantity in stock",
    )

    min_stock = models.IntegerField(
        default=0,
        validators=[MinValueValidator(0)],
        help_text="Minimum quantity threshold for low stock alerts",
    )

    color = models.CharField(
        max_length=7,
        default="#8B5CF6",
        validators=[
            RegexValidator(r"^#[0-9A-Fa-f]{6}$", "Color must be a hex value like #8B5CF6.")
        ],
        help_text="Display color used by the catalog UI",
    )

    # Timestamps
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="When the product was created",
    )

    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="When the product was last updated",
    )

    class Meta:
        db_table = "products"
        ordering = ["-created_at"]
        verbose_name = "Product"
        verbose_name_plural = "Products"
        constraints = [
            models.CheckConstraint(
                condition=models.Q(stock__gte=0),
                name="product_stock_non_negative",
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.stock} in stock)"

    def is_low_stock(self):
        """Check if product is at or below its minimum stock threshold."""
        return self.stock <= self.min_stock

    def is_out_of_stock(self):
        """Check if product is out of stock."""
        return self.stock == 0
