"""
URL configuration for inventory app.
"""

from django.urls import path

from . import views

app_name = "inventory"

urlpatterns = [
    path("api/products/", views.ProductListCreateView.as_view(), name="product_list"),
    path("api/products/<uuid:pk>/", views.ProductDetailView.as_view(), name="product_detail"),
]
