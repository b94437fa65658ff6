"""
URL configuration for sales app.
"""

from django.urls import path

from . import views

app_name = "sales"

urlpatterns = [
    # POS checkout
    path("api/pos/sales/", views.pos_create_sale, name="pos_create_sale"),
    # Sales history
    path("api/sales/recent/", views.RecentSalesView.as_view(), name="recent_sales"),
    path("api/sales/<uuid:pk>/", views.SaleDetailView.as_view(), name="sale_detail"),
]
