"""
Sales models for the point-of-sale checkout.

A Sale and its SaleItems are written together by the sale commit and are
never edited afterwards. Products and clients are referenced, not owned:
when one of them is deleted the reference is set to NULL and a snapshot of
its name is frozen on the historical rows (see ``apps.sales.signals``).
"""

import uuid
from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from apps.crm.models import Client
from apps.inventory.models import Product


class Sale(models.Model):
    """
    Committed point-of-sale transaction.

    ``total`` is always computed server-side from the frozen item prices.
    Walk-in sales have no client.
    """

    # Payment method choices
    PIX = "pix"
    CARD = "card"
    CASH = "cash"

    PAYMENT_METHOD_CHOICES = [
        (PIX, "Pix"),
        (CARD, "Card"),
        (CASH, "Cash"),
    ]

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the sale",
    )

    # Relationships
    client = models.ForeignKey(
        Client,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="sales",
        help_text="Client who made the purchase (optional for walk-in sales)",
    )

    client_name = models.CharField(
        max_length=100,
        null=True,
        blank=True,
        help_text="Client's name at the time of the sale",
    )

    client_deleted = models.BooleanField(
        default=False,
        help_text="Whether the referenced client has since been deleted",
    )

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="sales_processed",
        help_text="User who processed the sale",
    )

    # Financial details
    total = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Sum of item price times quantity",
    )

    payment_method = models.CharField(
        max_length=10,
        choices=PAYMENT_METHOD_CHOICES,
        help_text="Payment method used",
    )

    created_at = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        help_text="When the sale was committed",
    )

    class Meta:
        db_table = "sales"
        ordering = ["-created_at"]
        verbose_name = "Sale"
        verbose_name_plural = "Sales"
        indexes = [
            models.Index(fields=["client", "-created_at"], name="sale_client_date_idx"),
            models.Index(fields=["payment_method"], name="sale_payment_idx"),
        ]

    def __str__(self):
        return f"Sale {self.id} - {self.total}"

    def save(self, *args, **kwargs):
        """
        Sales are immutable once created.
        """
        if not self._state.adding:
            raise ValueError("Sales cannot be modified once created")
        super().save(*args, **kwargs)

    def get_client_display_name(self):
        """Return the live client name, or the snapshot if the client was deleted."""
        if self.client is not None:
            return self.client.name
        return self.client_name

    def calculate_total(self):
        """Recompute the total from the stored items."""
        return sum((item.subtotal for item in self.items.all()), Decimal("0.00"))


class SaleItem(models.Model):
    """
    Line item of a sale.

    ``price`` is the product's unit price frozen at the moment of sale and
    does not follow later price changes.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the sale item",
    )

    sale = models.ForeignKey(
        Sale,
        on_delete=models.CASCADE,
        related_name="items",
        help_text="Sale that this item belongs to",
    )

    product = models.ForeignKey(
        Product,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="sale_items",
        help_text="Product that was sold",
    )

    product_name = models.CharField(
        max_length=100,
        null=True,
        blank=True,
        help_text="Product name frozen when the product was deleted",
    )

    product_deleted = models.BooleanField(
        default=False,
        help_text="Whether the referenced product has since been deleted",
    )

    # Quantity and pricing
    quantity = models.IntegerField(
        validators=[MinValueValidator(1)],
        help_text="Quantity sold",
    )

    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Unit price at time of sale",
    )

    class Meta:
        db_table = "sale_items"
        verbose_name = "Sale Item"
        verbose_name_plural = "Sale Items"
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gt=0),
                name="sale_item_quantity_positive",
            ),
        ]

    def __str__(self):
        return f"{self.get_product_display_name()} x {self.quantity}"

    @property
    def subtotal(self):
        return self.price * self.quantity

    def get_product_display_name(self):
        """Return the live product name, or the snapshot if the product was deleted."""
        if self.product is not None:
            return self.product.name
        return self.product_name
