"""
URL configuration for CRM app.
"""

from django.urls import path

from . import views

app_name = "crm"

urlpatterns = [
    path("api/clients/", views.ClientListCreateView.as_view(), name="client_list"),
    path("api/clients/<uuid:pk>/", views.ClientDetailView.as_view(), name="client_detail"),
]
