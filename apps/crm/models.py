"""
CRM models for client loyalty tracking.
"""

import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone


class Client(models.Model):
    """
    Shop client with cumulative purchase statistics.

    ``total_spent``, ``total_orders`` and ``last_purchase`` are maintained
    only by the sale commit, so they always equal the sum and count of the
    client's committed sales.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the client",
    )

    # Contact information
    name = models.CharField(
        max_length=100,
        help_text="Client's full name",
    )

    email = models.EmailField(
        blank=True,
        help_text="Client's email address",
    )

    phone = models.CharField(
        max_length=20,
        blank=True,
        help_text="Client's phone number",
    )

    # Loyalty aggregates
    total_spent = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Total lifetime purchase amount",
    )

    total_orders = models.IntegerField(
        default=0,
        validators=[MinValueValidator(0)],
        help_text="Number of committed sales",
    )

    last_purchase = models.DateTimeField(
        null=True,
        blank=True,
        help_text="When the client last bought something",
    )

    join_date = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        help_text="When the client joined",
    )

    class Meta:
        db_table = "clients"
        ordering = ["-join_date"]
        verbose_name = "Client"
        verbose_name_plural = "Clients"

    def __str__(self):
        return self.name

    def average_ticket(self):
        """Average amount spent per order."""
        if not self.total_orders:
            return Decimal("0.00")
        return (self.total_spent / self.total_orders).quantize(Decimal("0.01"))
