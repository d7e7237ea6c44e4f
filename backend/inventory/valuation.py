# inventory/valuation.py
"""
Inventory valuation engine.

Recomputes the derived stock figures of an InventoryItem from its raw
inputs. Pure functions over item attributes: nothing here reads or
writes the database, so callers decide when to save.

Contract (after every update):
    closing_stock = opening_stock + receipts - issues
    qty_in_stock  = closing_stock
    reorder_point = minimum_stock + buffer_stock
    stock_value   = closing_stock * price
    is_reorder    = 0 < qty_in_stock < reorder_point

Zero stock is "out of stock", not "reorder". Newly created items are the
exception: they start with zero stock, a bootstrap reorder point of 10
and is_reorder=True until their first update.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Mapping

from inventory.models import InventoryItem

BOOTSTRAP_REORDER_POINT = 10

MONEY_Q = Decimal("0.01")

# Column limits: PositiveIntegerField, DecimalField(12,2) and DecimalField(16,2)
MAX_COUNT = 2147483647
MAX_PRICE = Decimal("9999999999.99")
MAX_STOCK_VALUE = Decimal("99999999999999.99")

COUNT_FIELDS = ("opening_stock", "receipts", "issues", "minimum_stock", "buffer_stock")
TEXT_FIELDS = ("product_name", "description")
UPDATABLE_FIELDS = TEXT_FIELDS + ("price",) + COUNT_FIELDS


class StockValidationError(ValueError):
    """Raised when inputs would break the stock contract."""


@dataclass(frozen=True)
class ItemSpec:
    """Caller-supplied fields for a new item."""
    product_name: str
    description: str = ""
    price: Decimal = Decimal("0.00")
    minimum_stock: int = 0
    buffer_stock: int = 0


def _money(value) -> Decimal:
    return Decimal(str(value)).quantize(MONEY_Q)


def _check_count(field: str, value) -> int:
    if value is None or isinstance(value, bool) or not isinstance(value, int):
        raise StockValidationError(f"{field} must be a whole number.")
    if value < 0:
        raise StockValidationError(f"{field} cannot be negative.")
    if value > MAX_COUNT:
        raise StockValidationError(f"{field} cannot exceed {MAX_COUNT}.")
    return value


def _check_price(value) -> Decimal:
    if value is None:
        raise StockValidationError("price is required.")
    price = _money(value)
    if price < 0:
        raise StockValidationError("price cannot be negative.")
    if price > MAX_PRICE:
        raise StockValidationError(f"price cannot exceed {MAX_PRICE}.")
    return price


def _derive(opening_stock: int, receipts: int, issues: int, price) -> tuple:
    """Closing stock and stock value for the given inputs, or StockValidationError."""
    closing = compute_closing_stock(opening_stock, receipts, issues)
    if closing < 0:
        raise StockValidationError(
            f"Issues ({issues}) exceed opening stock plus receipts ({opening_stock + receipts})."
        )
    if closing > MAX_COUNT:
        raise StockValidationError(f"Closing stock cannot exceed {MAX_COUNT}.")
    value = compute_stock_value(closing, price)
    if value > MAX_STOCK_VALUE:
        raise StockValidationError(f"Stock value cannot exceed {MAX_STOCK_VALUE}.")
    return closing, value


def compute_closing_stock(opening_stock: int, receipts: int, issues: int) -> int:
    return opening_stock + receipts - issues


def compute_stock_value(closing_stock: int, price) -> Decimal:
    return _money(Decimal(closing_stock) * Decimal(str(price)))


def is_reorder_due(qty_in_stock: int, reorder_point: int) -> bool:
    """True only while stock is positive and below the reorder point."""
    return 0 < qty_in_stock < reorder_point


def create_blank(spec: ItemSpec, company_id=None) -> InventoryItem:
    """
    Build an unsaved item with no stock.

    All stock counters and the stock value start at zero, the reorder
    point at BOOTSTRAP_REORDER_POINT, and is_reorder is True
    unconditionally. The first update replaces all of these.
    """
    product_name = (spec.product_name or "").strip()
    if not product_name:
        raise StockValidationError("product_name is required.")

    return InventoryItem(
        company_id=company_id,
        product_name=product_name,
        description=spec.description or "",
        price=_check_price(spec.price),
        opening_stock=0,
        receipts=0,
        issues=0,
        closing_stock=0,
        minimum_stock=_check_count("minimum_stock", spec.minimum_stock),
        buffer_stock=_check_count("buffer_stock", spec.buffer_stock),
        reorder_point=BOOTSTRAP_REORDER_POINT,
        stock_value=Decimal("0.00"),
        is_reorder=True,
    )


def recompute(item: InventoryItem) -> InventoryItem:
    """Rewrite every derived field of ``item`` from its raw inputs."""
    closing, value = _derive(item.opening_stock, item.receipts, item.issues, item.price)
    reorder_point = item.minimum_stock + item.buffer_stock
    if reorder_point > MAX_COUNT:
        raise StockValidationError(f"Reorder point cannot exceed {MAX_COUNT}.")
    item.closing_stock = closing
    item.reorder_point = reorder_point
    item.stock_value = value
    item.is_reorder = is_reorder_due(item.qty_in_stock, item.reorder_point)
    return item


def apply_update(item: InventoryItem, delta: Mapping) -> InventoryItem:
    """
    Apply the fields present in ``delta`` and recompute.

    Only keys present in ``delta`` change; an explicit 0 is applied like
    any other value. Everything is validated before ``item`` is touched,
    so on StockValidationError the item is unchanged.
    """
    unknown = set(delta) - set(UPDATABLE_FIELDS)
    if unknown:
        raise StockValidationError(f"Unknown inventory fields: {', '.join(sorted(unknown))}.")

    cleaned = {}
    for field, value in delta.items():
        if field in COUNT_FIELDS:
            cleaned[field] = _check_count(field, value)
        elif field == "price":
            cleaned[field] = _check_price(value)
        elif field == "product_name":
            name = (value or "").strip()
            if not name:
                raise StockValidationError("product_name cannot be blank.")
            cleaned[field] = name
        else:
            cleaned[field] = value or ""

    merged = {f: cleaned.get(f, getattr(item, f)) for f in ("opening_stock", "receipts", "issues", "price")}
    _derive(**merged)
    if cleaned.get("minimum_stock", item.minimum_stock) + cleaned.get("buffer_stock", item.buffer_stock) > MAX_COUNT:
        raise StockValidationError(f"Reorder point cannot exceed {MAX_COUNT}.")

    for field, value in cleaned.items():
        setattr(item, field, value)
    return recompute(item)
