"""
URL configuration for reporting app.
"""

from django.urls import path

from . import views

app_name = "reporting"

urlpatterns = [
    path("api/dashboard/", views.dashboard, name="dashboard"),
    path("api/reports/", views.reports, name="reports"),
]
