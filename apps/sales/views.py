"""
Views for the point-of-sale checkout and sales history.
"""

import logging

from django.conf import settings

from rest_framework import generics, permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from apps.core.permissions import IsAdminRole

from .exceptions import SaleCommitError
from .models import Sale
from .serializers import SaleDetailSerializer
from .services import commit_sale

logger = logging.getLogger(__name__)


@api_view(["POST"])
@permission_classes([IsAdminRole])
def pos_create_sale(request):
    """
    Commit a sale through the POS.

    Request body (camelCase keys are also accepted):
    {
        "client_id": "uuid" (optional, omit or null for walk-in sales),
        "payment_method": "pix|card|cash",
        "items": [
            {
                "product_id": "uuid",
                "quantity": 1,
                "price": "10.00"
            }
        ]
    }

    The charged price is always the product's current price. Failures return
    ``{"detail", "code", "action"}`` and leave no trace in the database.
    """
    try:
        sale = commit_sale(request.user, request.data)
    except SaleCommitError as e:
        return Response(e.as_dict(), status=e.status_code)

    sale = Sale.objects.select_related("client", "created_by").prefetch_related(
        "items__product"
    ).get(pk=sale.pk)
    return Response(SaleDetailSerializer(sale).data, status=status.HTTP_201_CREATED)


class RecentSalesView(generics.ListAPIView):
    """
    API endpoint for the most recent sales.

    Query parameters:
    - limit: Number of sales to return (default 10, max 100)
    """

    serializer_class = SaleDetailSerializer
    permission_classes = [permissions.IsAuthenticated]
    pagination_class = None

    def get_limit(self):
        limit = settings.POS_RECENT_SALES_LIMIT
        try:
            limit = int(self.request.query_params.get("limit", limit))
        except (TypeError, ValueError):
            limit = settings.POS_RECENT_SALES_LIMIT
        return max(1, min(limit, settings.POS_MAX_RECENT_SALES_LIMIT))

    def get_queryset(self):
        return (
            Sale.objects.select_related("client", "created_by")
            .prefetch_related("items__product")
            .order_by("-created_at")[: self.get_limit()]
        )


class SaleDetailView(generics.RetrieveAPIView):
    """
    API endpoint for a single sale with its items.
    """

    serializer_class = SaleDetailSerializer
    permission_classes = [permissions.IsAuthenticated]
    queryset = Sale.objects.select_related("client", "created_by").prefetch_related(
        "items__product"
    )
