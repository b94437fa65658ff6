"""
Dashboard and sales report data.

All money values are summed as Decimal and rounded half-up to cents before
being returned as floats for JSON output.
"""

from datetime import timedelta
from decimal import Decimal

from django.conf import settings
from django.db.models import F
from django.utils import timezone

from apps.crm.models import Client
from apps.inventory.models import Product
from apps.sales.models import Sale
from apps.sales.services import round_currency

DELETED_PRODUCT_LABEL = "Deleted product"


def _money(value):
    return float(round_currency(value))


def _serialize_recent_sale(sale):
    return {
        "id": str(sale.id),
        "total": _money(sale.total),
        "payment_method": sale.payment_method,
        "client_name": sale.get_client_display_name(),
        "client_deleted": sale.client_deleted,
        "created_at": sale.created_at.isoformat(),
        "items": [
            {
                "id": str(item.id),
                "product_name": item.get_product_display_name(),
                "product_deleted": item.product_deleted,
                "quantity": item.quantity,
                "price": _money(item.price),
            }
            for item in sale.items.all()
        ],
    }


def get_dashboard_data():
    """
    Build the dashboard overview.

    Returns:
        dict: Revenue, sale count, average ticket and new clients for the
        dashboard window, plus low-stock products and the latest sales
    """
    since = timezone.now() - timedelta(days=settings.POS_DASHBOARD_WINDOW_DAYS)

    totals = list(Sale.objects.filter(created_at__gte=since).values_list("total", flat=True))
    revenue = sum(totals, Decimal("0.00"))
    total_sales = len(totals)
    avg_ticket = revenue / total_sales if total_sales else Decimal("0.00")

    new_clients = Client.objects.filter(join_date__gte=since).count()

    low_stock = [
        {
            "id": str(product["id"]),
            "name": product["name"],
            "stock": product["stock"],
            "min_stock": product["min_stock"],
            "color": product["color"],
        }
        for product in Product.objects.filter(stock__lte=F("min_stock"))
        .order_by("stock", "name")
        .values("id", "name", "stock", "min_stock", "color")[:5]
    ]

    recent_sales = (
        Sale.objects.select_related("client")
        .prefetch_related("items__product")
        .order_by("-created_at")[:5]
    )

    return {
        "window_days": settings.POS_DASHBOARD_WINDOW_DAYS,
        "revenue": _money(revenue),
        "total_sales": total_sales,
        "avg_ticket": _money(avg_ticket),
        "new_clients": new_clients,
        "low_stock": low_stock,
        "recent_sales": [_serialize_recent_sale(sale) for sale in recent_sales],
    }


def get_reports_data(days=30):
    """
    Build the sales reports for the last ``days`` days.

    Args:
        days: Window length, between 1 and ``POS_REPORT_MAX_DAYS``

    Returns:
        dict: KPIs, daily revenue and cost, quantity per category, sale count
        per payment method and the top five products by revenue

    Raises:
        ValueError: If ``days`` is out of range
    """
    if not isinstance(days, int) or not 1 <= days <= settings.POS_REPORT_MAX_DAYS:
        raise ValueError(f"days must be between 1 and {settings.POS_REPORT_MAX_DAYS}")

    since = timezone.now() - timedelta(days=days)
    sales = (
        Sale.objects.filter(created_at__gte=since)
        .prefetch_related("items__product")
        .order_by("created_at")
    )

    daily = {}
    categories = {}
    methods = {}
    products = {}
    total_revenue = Decimal("0.00")
    total_orders = 0

    for sale in sales:
        total_orders += 1
        total_revenue += sale.total
        methods[sale.payment_method] = methods.get(sale.payment_method, 0) + 1

        day = timezone.localtime(sale.created_at).date().isoformat()
        if day not in daily:
            daily[day] = {"revenue": Decimal("0.00"), "cost": Decimal("0.00")}
        daily[day]["revenue"] += sale.total

        for item in sale.items.all():
            product = item.product
            # Cost of deleted products is unknown and counts as zero
            if product is not None:
                daily[day]["cost"] += product.cost * item.quantity

            category = product.category if product is not None else DELETED_PRODUCT_LABEL
            categories[category] = categories.get(category, 0) + item.quantity

            name = item.get_product_display_name() or DELETED_PRODUCT_LABEL
            if name not in products:
                products[name] = {"name": name, "quantity": 0, "revenue": Decimal("0.00")}
            products[name]["quantity"] += item.quantity
            products[name]["revenue"] += item.price * item.quantity

    avg_ticket = total_revenue / total_orders if total_orders else Decimal("0.00")

    daily_revenue = [
        {"date": day, "revenue": _money(data["revenue"]), "cost": _money(data["cost"])}
        for day, data in daily.items()
    ]

    sales_by_category = sorted(
        ({"category": category, "count": count} for category, count in categories.items()),
        key=lambda entry: entry["count"],
        reverse=True,
    )

    payment_methods = [{"method": method, "count": count} for method, count in methods.items()]

    top_products = sorted(products.values(), key=lambda entry: entry["revenue"], reverse=True)[:5]

    return {
        "days": days,
        "kpis": {
            "revenue": _money(total_revenue),
            "sales": total_orders,
            "avg_ticket": _money(avg_ticket),
            "clients": Client.objects.count(),
        },
        "daily_revenue": daily_revenue,
        "sales_by_category": sales_by_category,
        "payment_methods": payment_methods,
        "top_products": [
            {"name": entry["name"], "quantity": entry["quantity"], "revenue": _money(entry["revenue"])}
            for entry in top_products
        ],
    }
