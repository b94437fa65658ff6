"""
URL configuration for core app.
"""

from django.urls import path

from . import health, views

app_name = "core"

urlpatterns = [
    path("api/audit-logs/", views.AuditLogListView.as_view(), name="audit_log_list"),
    # Health checks
    path("api/health/", health.health_check, name="health"),
    path("api/health/live/", health.liveness_probe, name="liveness"),
]
