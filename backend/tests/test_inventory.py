# tests/test_inventory.py
"""
Tests for inventory commands.

Tests cover:
- Listing, product name search, out-of-stock and reorder lists
- Creation through the valuation engine
- Updates recompute derived fields and are persisted
- Cross-tenant updates and deletes are denied without changes
"""

from decimal import Decimal

import pytest

from accounts.exceptions import AccessDenied, NoCompanyLinked, ResourceNotFound
from inventory.commands import (
    add_inventory_item,
    delete_inventory_item,
    list_inventory,
    list_out_of_stock,
    list_reorder,
    update_inventory_item,
)
from inventory.models import InventoryItem
from inventory.valuation import ItemSpec


@pytest.mark.django_db
class TestListInventory:

    def test_lists_only_own_company(self, owner_actor, company, item, other_item):
        result = list_inventory(owner_actor, company.pk)

        assert [i.pk for i in result.data] == [item.pk]

    def test_search_is_case_insensitive_substring(self, owner_actor, company, item):
        add_inventory_item(owner_actor, company.pk, ItemSpec(product_name="Bolt", price=Decimal("0.10")))

        result = list_inventory(owner_actor, company.pk, product_name="idg")

        assert [i.product_name for i in result.data] == ["Widget"]
        assert list_inventory(owner_actor, company.pk, product_name="WIDGET").data == [item]

    def test_empty_search_lists_everything(self, owner_actor, company, item):
        assert list_inventory(owner_actor, company.pk, product_name="").data == [item]

    def test_other_company_denied(self, owner_actor, other_company):
        with pytest.raises(AccessDenied):
            list_inventory(owner_actor, other_company.pk)

    def test_companyless_user_rejected(self, companyless_actor, company):
        with pytest.raises(NoCompanyLinked):
            list_inventory(companyless_actor, company.pk)

    def test_admin_missing_company_not_found(self, admin_actor):
        with pytest.raises(ResourceNotFound):
            list_inventory(admin_actor, 999999)


@pytest.mark.django_db
class TestStockLists:

    def test_new_item_is_in_both_lists(self, owner_actor, company, item):
        """A blank item has zero stock and the creation-time reorder flag."""
        assert list_out_of_stock(owner_actor, company.pk).data == [item]
        assert list_reorder(owner_actor, company.pk).data == [item]

    def test_stocked_item_leaves_both_lists(self, owner_actor, company, item):
        update_inventory_item(owner_actor, item.pk, {"opening_stock": 20, "receipts": 5, "issues": 10})

        assert list_out_of_stock(owner_actor, company.pk).data == []
        assert list_reorder(owner_actor, company.pk).data == []

    def test_low_stock_item_only_in_reorder_list(self, owner_actor, company, item):
        update_inventory_item(owner_actor, item.pk, {"opening_stock": 3})

        assert list_out_of_stock(owner_actor, company.pk).data == []
        assert list_reorder(owner_actor, company.pk).data == [item]

    def test_emptied_item_only_in_out_of_stock_list(self, owner_actor, company, item):
        update_inventory_item(owner_actor, item.pk, {"opening_stock": 3, "issues": 3})

        assert list_out_of_stock(owner_actor, company.pk).data == [item]
        assert list_reorder(owner_actor, company.pk).data == []

    def test_other_company_lists_denied(self, owner_actor, other_company):
        with pytest.raises(AccessDenied):
            list_out_of_stock(owner_actor, other_company.pk)
        with pytest.raises(AccessDenied):
            list_reorder(owner_actor, other_company.pk)


@pytest.mark.django_db
class TestAddInventoryItem:

    def test_creates_blank_item(self, owner_actor, company):
        result = add_inventory_item(
            owner_actor,
            company.pk,
            ItemSpec(product_name="Widget", price=Decimal("2.00"), minimum_stock=5, buffer_stock=3),
        )

        assert result.success
        item = InventoryItem.objects.get(pk=result.data.pk)
        assert item.company_id == company.pk
        assert item.closing_stock == 0
        assert item.reorder_point == 10
        assert item.stock_value == Decimal("0.00")
        assert item.is_reorder is True

    def test_blank_name_rejected(self, owner_actor, company):
        result = add_inventory_item(owner_actor, company.pk, ItemSpec(product_name=" "))

        assert not result.success
        assert not InventoryItem.objects.exists()

    def test_other_company_denied(self, owner_actor, other_company):
        with pytest.raises(AccessDenied):
            add_inventory_item(owner_actor, other_company.pk, ItemSpec(product_name="Planted"))

        assert not InventoryItem.objects.filter(product_name="Planted").exists()


@pytest.mark.django_db
class TestUpdateInventoryItem:

    def test_update_recomputes_and_persists(self, owner_actor, item):
        result = update_inventory_item(owner_actor, item.pk, {"opening_stock": 20, "receipts": 5, "issues": 10})

        assert result.success
        item.refresh_from_db()
        assert item.closing_stock == 15
        assert item.qty_in_stock == 15
        assert item.reorder_point == 8
        assert item.stock_value == Decimal("30.00")
        assert item.is_reorder is False

    def test_all_zero_update_clears_reorder_flag(self, owner_actor, item):
        update_inventory_item(owner_actor, item.pk, {"opening_stock": 0, "receipts": 0, "issues": 0})

        item.refresh_from_db()
        assert item.closing_stock == 0
        assert item.stock_value == Decimal("0.00")
        assert item.is_reorder is False

    def test_negative_closing_stock_rejected_without_saving(self, owner_actor, item):
        result = update_inventory_item(owner_actor, item.pk, {"opening_stock": 2, "issues": 5})

        assert not result.success
        item.refresh_from_db()
        assert item.opening_stock == 0
        assert item.issues == 0
        assert item.is_reorder is True

    def test_other_company_item_denied_without_changes(self, owner_actor, other_item):
        with pytest.raises(AccessDenied):
            update_inventory_item(owner_actor, other_item.pk, {"opening_stock": 99})

        other_item.refresh_from_db()
        assert other_item.opening_stock == 0

    def test_missing_item_denied_for_user(self, owner_actor):
        with pytest.raises(AccessDenied):
            update_inventory_item(owner_actor, 999999, {"opening_stock": 1})

    def test_missing_item_not_found_for_admin(self, admin_actor):
        with pytest.raises(ResourceNotFound):
            update_inventory_item(admin_actor, 999999, {"opening_stock": 1})

    def test_admin_updates_any_item(self, admin_actor, other_item):
        result = update_inventory_item(admin_actor, other_item.pk, {"opening_stock": 3})

        assert result.success
        assert result.data.stock_value == Decimal("28.50")


@pytest.mark.django_db
class TestDeleteInventoryItem:

    def test_deletes_own_item(self, owner_actor, item):
        assert delete_inventory_item(owner_actor, item.pk).success
        assert not InventoryItem.objects.filter(pk=item.pk).exists()

    def test_other_company_item_denied(self, owner_actor, other_item):
        with pytest.raises(AccessDenied):
            delete_inventory_item(owner_actor, other_item.pk)

        assert InventoryItem.objects.filter(pk=other_item.pk).exists()
