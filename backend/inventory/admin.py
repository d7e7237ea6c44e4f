from django.contrib import admin

from .models import InventoryItem


@admin.register(InventoryItem)
class InventoryItemAdmin(admin.ModelAdmin):
    list_display = ("product_name", "company", "closing_stock", "reorder_point", "stock_value", "is_reorder")
    list_filter = ("is_reorder",)
    search_fields = ("product_name", "company__name")
    # Stock figures change only through inventory.commands so they stay recomputed.
    readonly_fields = (
        "opening_stock",
        "receipts",
        "issues",
        "closing_stock",
        "reorder_point",
        "stock_value",
        "is_reorder",
    )
