# inventory/commands.py
"""
Command layer for inventory operations.

Every mutation authorizes through accounts.authz and routes stock
changes through inventory.valuation, so derived fields are recomputed
on every write. Updates lock the item row (select_for_update) for the
whole read-modify-write, so concurrent updates to one item serialize
instead of losing each other's changes.
"""

import logging
from typing import Mapping, Optional

from django.db import transaction

from accounts.authz import ActorContext, Operation, load_for, require
from accounts.commands import CommandResult
from accounts.exceptions import ResourceNotFound
from accounts.models import Company
from inventory import valuation
from inventory.models import InventoryItem

logger = logging.getLogger(__name__)


def _require_company(actor: ActorContext, company_id: int, operation: Operation) -> None:
    """Authorize first, then confirm the company exists."""
    require(actor, company_id, operation)
    if not Company.objects.filter(pk=company_id).exists():
        raise ResourceNotFound("Company not found.")


# =============================================================================
# Queries
# =============================================================================

def list_inventory(actor: ActorContext, company_id: int, product_name: Optional[str] = None) -> CommandResult:
    """All items of a company, optionally filtered by a product name substring."""
    _require_company(actor, company_id, Operation.INVENTORY_VIEW)
    items = InventoryItem.objects.for_company(company_id)
    if product_name:
        items = items.search(product_name)
    return CommandResult.ok(data=list(items))


def list_out_of_stock(actor: ActorContext, company_id: int) -> CommandResult:
    _require_company(actor, company_id, Operation.INVENTORY_VIEW)
    return CommandResult.ok(data=list(InventoryItem.objects.for_company(company_id).out_of_stock()))


def list_reorder(actor: ActorContext, company_id: int) -> CommandResult:
    _require_company(actor, company_id, Operation.INVENTORY_VIEW)
    return CommandResult.ok(data=list(InventoryItem.objects.for_company(company_id).needs_reorder()))


# =============================================================================
# Mutations
# =============================================================================

@transaction.atomic
def add_inventory_item(actor: ActorContext, company_id: int, spec: valuation.ItemSpec) -> CommandResult:
    """
    Create a blank item (no stock) in a company.

    Returns:
        CommandResult with the created InventoryItem
    """
    _require_company(actor, company_id, Operation.INVENTORY_CREATE)

    try:
        item = valuation.create_blank(spec, company_id=company_id)
    except valuation.StockValidationError as exc:
        return CommandResult.fail(str(exc))

    item.save()
    logger.info(
        "Inventory item created",
        extra={"item_id": item.pk, "company_id": company_id, "by": actor.username},
    )
    return CommandResult.ok(data=item)


@transaction.atomic
def update_inventory_item(actor: ActorContext, item_id: int, delta: Mapping) -> CommandResult:
    """
    Apply a partial update and recompute derived stock figures.

    ``delta`` holds only the fields the caller supplied. On a validation
    failure nothing is saved.
    """
    item = load_for(
        actor,
        InventoryItem.objects.select_for_update(),
        item_id,
        Operation.INVENTORY_UPDATE,
    )

    try:
        valuation.apply_update(item, delta)
    except valuation.StockValidationError as exc:
        return CommandResult.fail(str(exc))

    item.save()
    logger.info(
        "Inventory item recomputed",
        extra={
            "item_id": item.pk,
            "company_id": item.company_id,
            "closing_stock": item.closing_stock,
            "reorder_point": item.reorder_point,
            "is_reorder": item.is_reorder,
            "by": actor.username,
        },
    )
    return CommandResult.ok(data=item)


@transaction.atomic
def delete_inventory_item(actor: ActorContext, item_id: int) -> CommandResult:
    item = load_for(actor, InventoryItem.objects.all(), item_id, Operation.INVENTORY_DELETE)
    item.delete()
    logger.info("Inventory item deleted", extra={"item_id": item_id, "by": actor.username})
    return CommandResult.ok()
