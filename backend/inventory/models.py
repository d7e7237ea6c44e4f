# inventory/models.py
"""
Inventory models.

Raw inputs: opening_stock, receipts, issues, price, minimum_stock,
buffer_stock. Derived (see inventory.valuation): closing_stock,
reorder_point, stock_value, is_reorder. ``qty_in_stock`` is not stored;
it always mirrors closing_stock.
"""

from decimal import Decimal

from django.db import models


class InventoryItemQuerySet(models.QuerySet):
    def for_company(self, company_id):
        return self.filter(company_id=company_id)

    def search(self, product_name: str):
        return self.filter(product_name__icontains=product_name)

    def out_of_stock(self):
        return self.filter(closing_stock=0)

    def needs_reorder(self):
        return self.filter(is_reorder=True)


class InventoryItem(models.Model):
    company = models.ForeignKey(
        "accounts.Company",
        on_delete=models.CASCADE,
        related_name="inventory_items",
    )
    product_name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    price = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))

    # Stock movements
    opening_stock = models.PositiveIntegerField(default=0)
    receipts = models.PositiveIntegerField(default=0)
    issues = models.PositiveIntegerField(default=0)
    closing_stock = models.PositiveIntegerField(default=0)

    # Reorder policy
    minimum_stock = models.PositiveIntegerField(default=0)
    buffer_stock = models.PositiveIntegerField(default=0)
    reorder_point = models.PositiveIntegerField(default=0)

    stock_value = models.DecimalField(max_digits=16, decimal_places=2, default=Decimal("0.00"))
    is_reorder = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = InventoryItemQuerySet.as_manager()

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["company", "product_name"], name="inventory_company_name_idx"),
            models.Index(fields=["company", "is_reorder"], name="inventory_company_reorder_idx"),
        ]

    def __str__(self):
        return self.product_name

    @property
    def qty_in_stock(self) -> int:
        return self.closing_stock
