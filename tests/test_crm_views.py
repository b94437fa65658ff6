"""
Tests for client management views.
"""

from decimal import Decimal

from django.urls import reverse

import pytest
from rest_framework import status

from apps.crm.models import Client


@pytest.mark.django_db
class TestClientViews:
    """Test client list, create, update and delete."""

    def test_list_clients(self, viewer_client, client_record):
        Client.objects.create(name="João Souza", email="joao@example.com")

        response = viewer_client.get(reverse("crm:client_list"))

        assert response.status_code == status.HTTP_200_OK
        assert response.data["count"] == 2
        assert response.data["results"][0]["name"] == "João Souza"

    def test_search_clients(self, viewer_client, client_record):
        Client.objects.create(name="João Souza", email="joao@example.com")

        response = viewer_client.get(reverse("crm:client_list"), {"search": "maria"})

        assert response.data["count"] == 1
        assert response.data["results"][0]["id"] == str(client_record.id)

    def test_create_client(self, admin_client):
        response = admin_client.post(
            reverse("crm:client_list"),
            {"name": "Ana Lima", "email": "ana@example.com", "phone": "11 98888-7777"},
            format="json",
        )

        assert response.status_code == status.HTTP_201_CREATED
        client = Client.objects.get(name="Ana Lima")
        assert client.total_orders == 0
        assert client.total_spent == Decimal("0.00")

    def test_loyalty_fields_are_read_only(self, admin_client, client_record):
        url = reverse("crm:client_detail", kwargs={"pk": client_record.id})

        response = admin_client.patch(
            url, {"total_spent": "1000.00", "total_orders": 50, "phone": "123"}, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        client_record.refresh_from_db()
        assert client_record.phone == "123"
        assert client_record.total_spent == Decimal("0.00")
        assert client_record.total_orders == 0

    def test_create_client_requires_name(self, admin_client):
        response = admin_client.post(reverse("crm:client_list"), {"name": " "}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "name" in response.data

    def test_create_client_rejects_bad_email(self, admin_client):
        response = admin_client.post(
            reverse("crm:client_list"), {"name": "Ana", "email": "not-an-email"}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "email" in response.data

    def test_viewer_cannot_create(self, viewer_client):
        response = viewer_client.post(reverse("crm:client_list"), {"name": "Ana"}, format="json")

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Client.objects.count() == 0

    def test_viewer_cannot_delete(self, viewer_client, client_record):
        url = reverse("crm:client_detail", kwargs={"pk": client_record.id})

        response = viewer_client.delete(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Client.objects.filter(pk=client_record.id).exists()

    def test_average_ticket(self, client_record):
        client_record.total_spent = Decimal("100.00")
        client_record.total_orders = 3

        assert client_record.average_ticket() == Decimal("33.33")
        assert Client(name="New").average_ticket() == Decimal("0.00")


@pytest.mark.django_db
class TestClientEditDuringSale:
    """Contact edits keep loyalty counters updated by sales committed meanwhile."""

    def test_phone_edit_keeps_loyalty_counters(self, admin_user, product, client_record):
        from apps.crm.serializers import ClientSerializer
        from apps.sales.services import commit_sale

        loaded = Client.objects.get(pk=client_record.pk)
        commit_sale(
            admin_user,
            {
                "client_id": str(client_record.id),
                "payment_method": "pix",
                "items": [{"product_id": str(product.id), "quantity": 1, "price": "10.00"}],
            },
        )

        serializer = ClientSerializer(loaded, data={"phone": "11 97777-0000"}, partial=True)
        assert serializer.is_valid(), serializer.errors
        serializer.save()

        client_record.refresh_from_db()
        assert client_record.phone == "11 97777-0000"
        assert client_record.total_orders == 1
        assert client_record.total_spent == Decimal("10.00")
        assert client_record.last_purchase is not None
        assert serializer.data["total_orders"] == 1
