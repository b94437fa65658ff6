"""
Tests for dashboard and report data.
"""

from datetime import timedelta
from decimal import Decimal

from django.urls import reverse
from django.utils import timezone

import pytest
from rest_framework import status

from apps.crm.models import Client
from apps.inventory.models import Product
from apps.reporting.services import get_dashboard_data, get_reports_data
from apps.sales.models import Sale, SaleItem
from apps.sales.services import commit_sale


def sell(user, items, client=None, payment_method="cash"):
    return commit_sale(
        user,
        {
            "client_id": str(client.id) if client else None,
            "payment_method": payment_method,
            "items": [
                {"product_id": str(p.id), "quantity": q, "price": "1.00"} for p, q in items
            ],
        },
    )


@pytest.fixture
def pen():
    return Product.objects.create(
        name="Caneta Gel",
        category="Canetas",
        price=Decimal("3.35"),
        cost=Decimal("1.00"),
        stock=50,
        min_stock=60,
    )


@pytest.mark.django_db
class TestDashboardData:
    """Test the dashboard overview."""

    def test_empty_dashboard(self):
        data = get_dashboard_data()

        assert data["revenue"] == 0.0
        assert data["total_sales"] == 0
        assert data["avg_ticket"] == 0.0
        assert data["low_stock"] == []
        assert data["recent_sales"] == []

    def test_dashboard_totals(self, admin_user, product, pen, client_record):
        sell(admin_user, [(product, 2)], client=client_record)
        sell(admin_user, [(pen, 1)], payment_method="pix")

        data = get_dashboard_data()

        assert data["revenue"] == 23.35
        assert data["total_sales"] == 2
        assert data["avg_ticket"] == 11.68
        assert data["new_clients"] == 1
        assert [sale["total"] for sale in data["recent_sales"]] == [3.35, 20.0]
        assert data["recent_sales"][1]["client_name"] == "Maria Silva"

    def test_old_sales_are_outside_window(self, product):
        Sale.objects.create(
            total=Decimal("99.00"),
            payment_method=Sale.CASH,
            created_at=timezone.now() - timedelta(days=45),
        )
        Client.objects.create(name="Antiga", join_date=timezone.now() - timedelta(days=60))

        data = get_dashboard_data()

        assert data["revenue"] == 0.0
        assert data["new_clients"] == 0
        assert len(data["recent_sales"]) == 1

    def test_low_stock_lowest_first(self, pen):
        Product.objects.create(
            name="Borracha", category="Escritório", price=Decimal("1.00"), stock=0, min_stock=3
        )
        Product.objects.create(
            name="Régua", category="Escritório", price=Decimal("2.00"), stock=10, min_stock=1
        )

        data = get_dashboard_data()

        assert [p["name"] for p in data["low_stock"]] == ["Borracha", "Caneta Gel"]

    def test_low_stock_limited_to_five(self):
        for index in range(7):
            Product.objects.create(
                name=f"Item {index}", category="Misc", price=Decimal("1.00"), stock=index
            )

        assert len(get_dashboard_data()["low_stock"]) == 1
        Product.objects.update(min_stock=10)
        assert len(get_dashboard_data()["low_stock"]) == 5


@pytest.mark.django_db
class TestReportsData:
    """Test the sales reports."""

    def test_kpis_and_breakdowns(self, admin_user, product, pen, client_record):
        sell(admin_user, [(product, 2), (pen, 3)], payment_method="card")
        sell(admin_user, [(pen, 1)], payment_method="pix")
        sell(admin_user, [(product, 1)], payment_method="card")

        data = get_reports_data(30)

        assert data["kpis"] == {
            "revenue": 43.4,
            "sales": 3,
            "avg_ticket": 14.47,
            "clients": 1,
        }
        assert data["payment_methods"] == [
            {"method": "card", "count": 2},
            {"method": "pix", "count": 1},
        ]
        assert data["sales_by_category"] == [
            {"category": "Canetas", "count": 4},
            {"category": "Cadernos", "count": 3},
        ]
        assert data["top_products"][0] == {
            "name": "Caderno Kraft A5",
            "quantity": 3,
            "revenue": 30.0,
        }
        assert data["top_products"][1] == {"name": "Caneta Gel", "quantity": 4, "revenue": 13.4}

    def test_daily_revenue_and_cost(self, admin_user, product):
        sell(admin_user, [(product, 2)])

        data = get_reports_data(7)

        assert data["daily_revenue"] == [
            {
                "date": timezone.localdate().isoformat(),
                "revenue": 20.0,
                "cost": 8.0,
            }
        ]

    def test_deleted_products_are_grouped(self, admin_user, product, pen):
        sell(admin_user, [(product, 2), (pen, 1)])
        product.delete()

        data = get_reports_data(30)

        categories = {entry["category"]: entry["count"] for entry in data["sales_by_category"]}
        assert categories == {"Deleted product": 2, "Canetas": 1}
        names = [entry["name"] for entry in data["top_products"]]
        assert "Caderno Kraft A5" in names
        assert data["daily_revenue"][0]["cost"] == 1.0

    def test_window_excludes_older_sales(self, product):
        sale = Sale.objects.create(
            total=Decimal("10.00"),
            payment_method=Sale.CASH,
            created_at=timezone.now() - timedelta(days=10),
        )
        SaleItem.objects.create(sale=sale, product=product, quantity=1, price=Decimal("10.00"))

        assert get_reports_data(7)["kpis"]["sales"] == 0
        assert get_reports_data(30)["kpis"]["sales"] == 1

    @pytest.mark.parametrize("days", [0, 366, -5])
    def test_days_out_of_range(self, days):
        with pytest.raises(ValueError):
            get_reports_data(days)


@pytest.mark.django_db
class TestReportingViews:
    """Test the dashboard and report endpoints."""

    def test_dashboard_endpoint(self, viewer_client):
        response = viewer_client.get(reverse("reporting:dashboard"))

        assert response.status_code == status.HTTP_200_OK
        assert response.data["window_days"] == 30

    def test_reports_endpoint(self, viewer_client):
        response = viewer_client.get(reverse("reporting:reports"), {"days": 90})

        assert response.status_code == status.HTTP_200_OK
        assert response.data["days"] == 90

    @pytest.mark.parametrize("days", ["0", "400", "abc"])
    def test_reports_rejects_bad_days(self, viewer_client, days):
        response = viewer_client.get(reverse("reporting:reports"), {"days": days})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_requires_authentication(self, api_client):
        assert api_client.get(reverse("reporting:dashboard")).status_code == 403
        assert api_client.get(reverse("reporting:reports")).status_code == 403
