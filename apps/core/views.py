"""
Views for core functionality.
"""

from django.conf import settings

from rest_framework import generics, permissions

from .models import AuditLog
from .serializers import AuditLogSerializer


class AuditLogListView(generics.ListAPIView):
    """
    API endpoint for the most recent audit log entries.

    Query parameters:
    - limit: Number of entries to return (default 50)
    """

    serializer_class = AuditLogSerializer
    permission_classes = [permissions.IsAuthenticated]
    pagination_class = None

    def get_queryset(self):
        limit = settings.POS_AUDIT_LOG_LIMIT
        try:
            limit = max(1, min(int(self.request.query_params.get("limit", limit)), 500))
        except (TypeError, ValueError):
            pass
        return AuditLog.objects.select_related("user").order_by("-created_at")[:limit]
