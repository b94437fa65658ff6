"""
Views for the dashboard and sales reports.
"""

from django.conf import settings

from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from .services import get_dashboard_data, get_reports_data


@api_view(["GET"])
@permission_classes([permissions.IsAuthenticated])
def dashboard(request):
    """
    Get the dashboard overview for the last 30 days.
    """
    return Response(get_dashboard_data(), status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([permissions.IsAuthenticated])
def reports(request):
    """
    Get sales reports for a window of days.

    Query parameters:
    - days: Number of days to cover (1 to 365, default 30)
    """
    raw_days = request.query_params.get("days", settings.POS_REPORT_DEFAULT_DAYS)
    try:
        days = int(raw_days)
    except (TypeError, ValueError):
        days = None

    if days is None or not 1 <= days <= settings.POS_REPORT_MAX_DAYS:
        return Response(
            {"detail": f"days must be an integer between 1 and {settings.POS_REPORT_MAX_DAYS}."},
            status=status.HTTP_400_BAD_REQUEST,
        )

    return Response(get_reports_data(days), status=status.HTTP_200_OK)
