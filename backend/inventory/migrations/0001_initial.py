from decimal import Decimal

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("accounts", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="InventoryItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("product_name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("price", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12)),
                ("opening_stock", models.PositiveIntegerField(default=0)),
                ("receipts", models.PositiveIntegerField(default=0)),
                ("issues", models.PositiveIntegerField(default=0)),
                ("closing_stock", models.PositiveIntegerField(default=0)),
                ("minimum_stock", models.PositiveIntegerField(default=0)),
                ("buffer_stock", models.PositiveIntegerField(default=0)),
                ("reorder_point", models.PositiveIntegerField(default=0)),
                ("stock_value", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=16)),
                ("is_reorder", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("company", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="inventory_items", to="accounts.company")),
            ],
            options={
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["company", "product_name"], name="inventory_company_name_idx"),
                    models.Index(fields=["company", "is_reorder"], name="inventory_company_reorder_idx"),
                ],
            },
        ),
    ]
