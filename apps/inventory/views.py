"""
Views for the product catalog.

Any authenticated user can browse the catalog; only admins can change it.
Every change is written to the audit log after it commits.
"""

from django.db import transaction
from django.db.models import F, Q

from rest_framework import generics

from apps.core.audit import schedule_audit_log
from apps.core.permissions import IsAdminOrReadOnly

from .models import Product
from .serializers import ProductSerializer


class ProductListCreateView(generics.ListCreateAPIView):
    """
    API endpoint for listing and creating products.

    Query parameters:
    - search: Search by name or category
    - low_stock: When "true", only products at or below their minimum stock
    """

    serializer_class = ProductSerializer
    permission_classes = [IsAdminOrReadOnly]

    def get_queryset(self):
        queryset = Product.objects.order_by("-created_at")

        search = self.request.query_params.get("search")
        if search:
            queryset = queryset.filter(Q(name__icontains=search) | Q(category__icontains=search))

        if self.request.query_params.get("low_stock") == "true":
            queryset = queryset.filter(stock__lte=F("min_stock"))

        return queryset

    def perform_create(self, serializer):
        product = serializer.save()
        schedule_audit_log(
            self.request.user,
            action="CREATE",
            entity="Product",
            entity_id=product.id,
            details=f"Created product {product.name}",
        )


class ProductDetailView(generics.RetrieveUpdateDestroyAPIView):
    """
    API endpoint for retrieving, updating and deleting a single product.
    """

    serializer_class = ProductSerializer
    permission_classes = [IsAdminOrReadOnly]
    queryset = Product.objects.all()

    def perform_update(self, serializer):
        product = serializer.save()
        schedule_audit_log(
            self.request.user,
            action="UPDATE",
            entity="Product",
            entity_id=product.id,
            details=f"Updated fields: {', '.join(sorted(serializer.validated_data))}",
        )

    @transaction.atomic
    def perform_destroy(self, instance):
        product_id, name = instance.id, instance.name
        instance.delete()
        schedule_audit_log(
            self.request.user,
            action="DELETE",
            entity="Product",
            entity_id=product_id,
            details=f"Deleted product {name}",
        )
