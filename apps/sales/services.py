"""
Sale commit service.

Turns a validated point-of-sale request into a committed sale as a single
all-or-nothing unit of work:

1. Stock reservation: one guarded decrement per line item, in request order
2. Ledger write: Sale and SaleItems priced from the product rows
3. Client loyalty: spend and order counters of the buying client

Any failure rolls back every step. Nothing is retried.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal

from django.db import DatabaseError, transaction
from django.db.models import F
from django.utils import timezone

from apps.core.audit import schedule_audit_log
from apps.core.permissions import require_admin
from apps.crm.models import Client
from apps.inventory.models import Product

from .exceptions import InsufficientStockError, NotFoundError, PersistenceError, ValidationError
from .models import Sale, SaleItem
from .serializers import SaleCreateSerializer, flatten_errors, normalize_sale_payload

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def round_currency(value):
    """Round a money amount half-up to two decimal places."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def validate_sale_request(data):
    """
    Check the shape of a sale request without touching the database.

    Accepts snake_case or camelCase keys.

    Returns:
        dict: Validated data with ``client_id``, ``payment_method`` and ``items``

    Raises:
        ValidationError: With one ``{field, message}`` entry per problem
    """
    serializer = SaleCreateSerializer(data=normalize_sale_payload(data))
    if not serializer.is_valid():
        raise ValidationError(flatten_errors(serializer.errors))
    return serializer.validated_data


def reserve_stock(items):
    """
    Decrement stock for each line item, or fail on the first one that cannot be served.

    Each decrement is a single conditional UPDATE, so concurrent sales of the
    same product serialize on the row and stock never goes negative.

    Raises:
        NotFoundError: If a product does not exist
        InsufficientStockError: If a product has less stock than requested
    """
    for item in items:
        product_id = item["product_id"]
        quantity = item["quantity"]

        updated = Product.objects.filter(pk=product_id, stock__gte=quantity).update(
            stock=F("stock") - quantity
        )
        if updated:
            continue

        product = Product.objects.filter(pk=product_id).values("name", "stock").first()
        if product is None:
            raise NotFoundError(f"Product {product_id} not found.")
        raise InsufficientStockError(
            product_id,
            quantity,
            available=product["stock"],
            product_name=product["name"],
        )


def write_sale_ledger(user, sale_request, created_at):
    """
    Persist the Sale and its items using the current product prices.

    The client row, when given, stays locked until the transaction ends.

    Returns:
        tuple: (Sale, Client or None)

    Raises:
        NotFoundError: If the client or a product disappeared
    """
    client = None
    client_id = sale_request.get("client_id")
    if client_id is not None:
        client = Client.objects.select_for_update().filter(pk=client_id).first()
        if client is None:
            raise NotFoundError(f"Client {client_id} not found.")

    items = sale_request["items"]
    prices = dict(
        Product.objects.filter(pk__in=[item["product_id"] for item in items]).values_list(
            "pk", "price"
        )
    )

    total = Decimal("0.00")
    for item in items:
        if item["product_id"] not in prices:
            raise NotFoundError(f"Product {item['product_id']} not found.")
        total += prices[item["product_id"]] * item["quantity"]

    sale = Sale.objects.create(
        client=client,
        client_name=client.name if client else None,
        created_by=user,
        total=round_currency(total),
        payment_method=sale_request["payment_method"],
        created_at=created_at,
    )
    SaleItem.objects.bulk_create(
        [
            SaleItem(
                sale=sale,
                product_id=item["product_id"],
                quantity=item["quantity"],
                price=prices[item["product_id"]],
            )
            for item in items
        ]
    )
    return sale, client


def update_client_loyalty(client, amount, purchased_at):
    """
    Add a committed sale to the client's loyalty counters.

    Does nothing for walk-in sales.
    """
    if client is None:
        return 0
    return Client.objects.filter(pk=client.pk).update(
        total_spent=F("total_spent") + amount,
        total_orders=F("total_orders") + 1,
        last_purchase=purchased_at,
    )


class SaleCommit:
    """
    One point-of-sale checkout.

    The caller's role and the request shape are checked on construction.
    ``execute()`` then moves the commit from pending to committed or aborted.
    """

    PENDING = "pending"
    COMMITTED = "committed"
    ABORTED = "aborted"

    def __init__(self, user, data):
        self.user = require_admin(user)
        self.sale_request = validate_sale_request(data)
        self.state = self.PENDING
        self.sale = None

    def execute(self):
        """
        Run the commit.

        Returns:
            Sale: The committed sale

        Raises:
            NotFoundError: If a product or the client does not exist
            InsufficientStockError: If any item cannot be served
            PersistenceError: If the database fails the transaction
        """
        if self.state != self.PENDING:
            raise RuntimeError(f"Sale commit already {self.state}")

        try:
            with transaction.atomic():
                now = timezone.now()
                reserve_stock(self.sale_request["items"])
                sale, client = write_sale_ledger(self.user, self.sale_request, now)
                update_client_loyalty(client, sale.total, now)

                schedule_audit_log(
                    self.user,
                    action="CREATE",
                    entity="Sale",
                    entity_id=sale.id,
                    details=(
                        f"Sale of {sale.total} via {sale.payment_method} "
                        f"with {len(self.sale_request['items'])} item(s)"
                    ),
                )
        except (NotFoundError, InsufficientStockError) as e:
            self.state = self.ABORTED
            logger.warning(f"Sale aborted for user {self.user.pk}: {e}")
            raise
        except DatabaseError as e:
            self.state = self.ABORTED
            logger.error(f"Sale commit failed for user {self.user.pk}: {e}", exc_info=True)
            raise PersistenceError("The sale could not be saved. Please try again later.") from e

        self.state = self.COMMITTED
        self.sale = sale
        logger.info(f"Committed sale {sale.id}: total {sale.total} ({sale.payment_method})")
        return sale


def commit_sale(user, data):
    """
    Validate and commit a sale request.

    Raises:
        PermissionDenied: If the user is not an admin
        ValidationError: If the request is malformed
        NotFoundError, InsufficientStockError, PersistenceError: See ``SaleCommit.execute``
    """
    return SaleCommit(user, data).execute()
