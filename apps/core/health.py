"""
Health check views for uptime monitoring and deployment verification.
"""

import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.cache import never_cache
from django.views.decorators.http import require_GET

logger = logging.getLogger(__name__)


@never_cache
@require_GET
def health_check(request) -> JsonResponse:
    """
    Health check endpoint with a database round trip.

    Returns:
        JsonResponse: {"status": "ok", "db": "connected", "timestamp": ...}
        or status 503 with ``"db": "disconnected"``
    """
    timestamp = timezone.now().isoformat()
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except DatabaseError as e:
        logger.error(f"Database health check failed: {e}")
        return JsonResponse(
            {"status": "error", "db": "disconnected", "timestamp": timestamp}, status=503
        )

    return JsonResponse({"status": "ok", "db": "connected", "timestamp": timestamp})


@never_cache
@require_GET
def liveness_probe(request) -> JsonResponse:
    """
    Liveness probe endpoint.

    Returns 200 while the process is able to serve requests at all.
    """
    return JsonResponse({"status": "alive"})
