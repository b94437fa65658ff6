"""
Pytest configuration and fixtures for the point-of-sale backend.
"""

from decimal import Decimal

import pytest


@pytest.fixture
def api_client():
    """
    Fixture for Django REST framework API client.
    """
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def admin_user(django_user_model):
    """
    Fixture for a shop administrator.
    """
    return django_user_model.objects.create_user(
        username="admin",
        email="admin@lepaiper.com",
        password="testpass123",
        first_name="Ana",
        role="admin",
    )


@pytest.fixture
def viewer_user(django_user_model):
    """
    Fixture for a read-only user.
    """
    return django_user_model.objects.create_user(
        username="viewer",
        email="viewer@lepaiper.com",
        password="testpass123",
        role="viewer",
    )


@pytest.fixture
def admin_client(admin_user):
    """
    Fixture for an API client authenticated as an administrator.
    """
    from rest_framework.test import APIClient

    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def viewer_client(viewer_user):
    """
    Fixture for an API client authenticated as a viewer.
    """
    from rest_framework.test import APIClient

    client = APIClient()
    client.force_authenticate(user=viewer_user)
    return client


@pytest.fixture
def product():
    """
    Fixture for a product with stock 5 and price 10.00.
    """
    from apps.inventory.models import Product

    return Product.objects.create(
        name="Caderno Kraft A5",
        category="Cadernos",
        price=Decimal("10.00"),
        cost=Decimal("4.00"),
        stock=5,
        min_stock=2,
    )


@pytest.fixture
def client_record():
    """
    Fixture for a shop client with no purchases yet.
    """
    from apps.crm.models import Client

    return Client.objects.create(
        name="Maria Silva",
        email="maria@example.com",
        phone="11 99999-0000",
    )
