import uuid
from decimal import Decimal

import django.core.validators
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Client",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for the client",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(help_text="Client's full name", max_length=100)),
                (
                    "email",
                    models.EmailField(
                        blank=True, help_text="Client's email address", max_length=254
                    ),
                ),
                (
                    "phone",
                    models.CharField(
                        blank=True, help_text="Client's phone number", max_length=20
                    ),
                ),
                (
                    "total_spent",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0.00"),
                        help_text="Total lifetime purchase amount",
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                (
                    "total_orders",
                    models.IntegerField(
                        default=0,
                        help_text="Number of committed sales",
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                (
                    "last_purchase",
                    models.DateTimeField(
                        blank=True, help_text="When the client last bought something", null=True
                    ),
                ),
                (
                    "join_date",
                    models.DateTimeField(
                        db_index=True,
                        default=django.utils.timezone.now,
                        help_text="When the client joined",
                    ),
                ),
            ],
            options={
                "verbose_name": "Client",
                "verbose_name_plural": "Clients",
                "db_table": "clients",
                "ordering": ["-join_date"],
            },
        ),
    ]
