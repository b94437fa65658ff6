"""
Tests for product catalog CRUD operations.
"""

from decimal import Decimal

from django.urls import reverse

import pytest
from rest_framework import status

from apps.inventory.models import Product


@pytest.mark.django_db
class TestProductList:
    """Test product listing and filters."""

    def test_list_products(self, viewer_client, product):
        Product.objects.create(
            name="Caneta Gel", category="Canetas", price=Decimal("3.00"), stock=20
        )

        response = viewer_client.get(reverse("inventory:product_list"))

        assert response.status_code == status.HTTP_200_OK
        assert response.data["count"] == 2
        assert response.data["results"][0]["name"] == "Caneta Gel"

    def test_search_by_name_or_category(self, viewer_client, product):
        Product.objects.create(
            name="Caneta Gel", category="Canetas", price=Decimal("3.00"), stock=20
        )

        response = viewer_client.get(reverse("inventory:product_list"), {"search": "cadern"})

        assert response.data["count"] == 1
        assert response.data["results"][0]["id"] == str(product.id)

    def test_low_stock_filter(self, viewer_client, product):
        Product.objects.create(
            name="Caneta Gel", category="Canetas", price=Decimal("3.00"), stock=1, min_stock=5
        )

        response = viewer_client.get(reverse("inventory:product_list"), {"low_stock": "true"})

        assert response.data["count"] == 1
        assert response.data["results"][0]["name"] == "Caneta Gel"
        assert response.data["results"][0]["is_low_stock"] is True

    def test_list_requires_authentication(self, api_client):
        response = api_client.get(reverse("inventory:product_list"))

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestProductWrite:
    """Test product create, update and delete."""

    def test_create_product(self, admin_client):
        data = {
            "name": "Agenda 2026",
            "category": "Agendas",
            "price": "49.90",
            "cost": "20.00",
            "stock": 12,
            "min_stock": 3,
            "color": "#F59E0B",
        }

        response = admin_client.post(reverse("inventory:product_list"), data, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        product = Product.objects.get(name="Agenda 2026")
        assert product.price == Decimal("49.90")
        assert product.stock == 12

    @pytest.mark.parametrize(
        "field,value",
        [
            ("name", "   "),
            ("price", "-1.00"),
            ("stock", -3),
            ("min_stock", -1),
            ("color", "purple"),
        ],
    )
    def test_create_product_validation(self, admin_client, field, value):
        data = {"name": "Agenda", "category": "Agendas", "price": "10.00", "stock": 1}
        data[field] = value

        response = admin_client.post(reverse("inventory:product_list"), data, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert field in response.data
        assert Product.objects.count() == 0

    def test_viewer_cannot_create(self, viewer_client):
        data = {"name": "Agenda", "category": "Agendas", "price": "10.00", "stock": 1}

        response = viewer_client.post(reverse("inventory:product_list"), data, format="json")

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Product.objects.count() == 0

    def test_update_product(self, admin_client, product):
        url = reverse("inventory:product_detail", kwargs={"pk": product.id})

        response = admin_client.patch(url, {"price": "12.50", "stock": 8}, format="json")

        assert response.status_code == status.HTTP_200_OK
        product.refresh_from_db()
        assert product.price == Decimal("12.50")
        assert product.stock == 8

    def test_viewer_cannot_update(self, viewer_client, product):
        url = reverse("inventory:product_detail", kwargs={"pk": product.id})

        response = viewer_client.patch(url, {"stock": 100}, format="json")

        assert response.status_code == status.HTTP_403_FORBIDDEN
        product.refresh_from_db()
        assert product.stock == 5

    def test_delete_product(self, admin_client, product):
        url = reverse("inventory:product_detail", kwargs={"pk": product.id})

        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Product.objects.filter(pk=product.id).exists()

    def test_retrieve_product(self, viewer_client, product):
        url = reverse("inventory:product_detail", kwargs={"pk": product.id})

        response = viewer_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data["price"] == "10.00"
        assert response.data["is_low_stock"] is False


@pytest.mark.django_db
class TestProductEditDuringSale:
    """Catalog edits keep stock consumed by sales committed meanwhile."""

    def test_price_edit_keeps_stock_sold_after_load(self, admin_user, product):
        from apps.inventory.serializers import ProductSerializer
        from apps.sales.services import commit_sale

        loaded = Product.objects.get(pk=product.pk)
        commit_sale(
            admin_user,
            {
                "payment_method": "cash",
                "items": [{"product_id": str(product.id), "quantity": 3, "price": "10.00"}],
            },
        )

        serializer = ProductSerializer(loaded, data={"price": "12.00"}, partial=True)
        assert serializer.is_valid(), serializer.errors
        serializer.save()

        product.refresh_from_db()
        assert product.price == Decimal("12.00")
        assert product.stock == 2
        assert serializer.data["stock"] == 2

    def test_explicit_stock_edit_is_saved(self, product):
        from apps.inventory.serializers import ProductSerializer

        serializer = ProductSerializer(product, data={"stock": 40}, partial=True)
        assert serializer.is_valid(), serializer.errors
        serializer.save()

        product.refresh_from_db()
        assert product.stock == 40
