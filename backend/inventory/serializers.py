# inventory/serializers.py
"""
Serializers for the inventory API.

Derived fields are read-only on output and are not accepted on input.
Every update field is optional: an absent key leaves the stored value
alone, an explicit value (including 0) replaces it.
"""

from decimal import Decimal

from rest_framework import serializers

from .models import InventoryItem
from .valuation import MAX_COUNT, ItemSpec


class InventoryItemSerializer(serializers.ModelSerializer):
    qty_in_stock = serializers.IntegerField(read_only=True)

    class Meta:
        model = InventoryItem
        fields = (
            "id",
            "company",
            "product_name",
            "description",
            "price",
            "opening_stock",
            "receipts",
            "issues",
            "closing_stock",
            "qty_in_stock",
            "minimum_stock",
            "buffer_stock",
            "reorder_point",
            "stock_value",
            "is_reorder",
            "created_at",
            "updated_at",
        )
        read_only_fields = fields


class InventoryItemCreateSerializer(serializers.Serializer):
    product_name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal("0.00"))
    minimum_stock = serializers.IntegerField(min_value=0, max_value=MAX_COUNT, required=False, default=0)
    buffer_stock = serializers.IntegerField(min_value=0, max_value=MAX_COUNT, required=False, default=0)

    def to_spec(self) -> ItemSpec:
        return ItemSpec(**self.validated_data)


class InventoryItemUpdateSerializer(serializers.Serializer):
    product_name = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal("0.00"), required=False)
    opening_stock = serializers.IntegerField(min_value=0, max_value=MAX_COUNT, required=False)
    receipts = serializers.IntegerField(min_value=0, max_value=MAX_COUNT, required=False)
    issues = serializers.IntegerField(min_value=0, max_value=MAX_COUNT, required=False)
    minimum_stock = serializers.IntegerField(min_value=0, max_value=MAX_COUNT, required=False)
    buffer_stock = serializers.IntegerField(min_value=0, max_value=MAX_COUNT, required=False)
