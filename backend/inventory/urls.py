# inventory/urls.py
"""
URL configuration for the inventory API.

Endpoints:
- /companies/<company_id>/inventory/ - list/search and create
- /companies/<company_id>/inventory/out-of-stock/ - zero closing stock
- /companies/<company_id>/inventory/reorder/ - items flagged for reorder
- /inventory/<pk>/ - update and delete
"""

from django.urls import path

from .views import (
    CompanyInventoryListCreateView,
    InventoryItemDetailView,
    OutOfStockView,
    ReorderView,
)

app_name = "inventory"

urlpatterns = [
    path(
        "companies/<int:company_id>/inventory/",
        CompanyInventoryListCreateView.as_view(),
        name="company-inventory-list",
    ),
    path(
        "companies/<int:company_id>/inventory/out-of-stock/",
        OutOfStockView.as_view(),
        name="company-inventory-out-of-stock",
    ),
    path(
        "companies/<int:company_id>/inventory/reorder/",
        ReorderView.as_view(),
        name="company-inventory-reorder",
    ),
    path(
        "inventory/<int:pk>/",
        InventoryItemDetailView.as_view(),
        name="inventory-item-detail",
    ),
]
