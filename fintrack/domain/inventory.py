"""Pure functions for inventory items and their listing status.

An item moves one way through Not Listed, On Market and Sold. Sale details
are only present once an item is sold.

All monetary amounts are in cents (Money type).
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum

from fintrack.domain.models import Money


class ItemStatus(str, Enum):
    """Listing status of an inventory item."""

    NOT_LISTED = "Not Listed"
    ON_MARKET = "On Market"
    SOLD = "Sold"


STATUS_ORDER: tuple[ItemStatus, ...] = (ItemStatus.NOT_LISTED, ItemStatus.ON_MARKET, ItemStatus.SOLD)


@dataclass(frozen=True)
class InventoryItem:
    """Immutable inventory item."""

    id: str
    name: str
    status: ItemStatus
    date_bought: str
    purchase_price: Money
    mileage: int = 0
    notes: str = ""
    location_bought: str = ""
    date_sold: str | None = None
    location_sold: str | None = None
    sell_price: Money | None = None


@dataclass(frozen=True)
class InventorySummary:
    """Immutable inventory totals."""

    counts: dict[ItemStatus, int]
    total_cost: Money
    total_sales: Money
    realised_profit: Money


def next_status(status: ItemStatus) -> ItemStatus | None:
    """Get the status that follows the given one.

    Args:
        status: Current status.

    Returns:
        Next status, or None if the item is already sold.
    """
    index = STATUS_ORDER.index(status)
    if index + 1 < len(STATUS_ORDER):
        return STATUS_ORDER[index + 1]
    return None


def calculate_status_change(
    item: InventoryItem,
    new_status: ItemStatus,
    date_sold: str | None = None,
    sell_price: Money | None = None,
    location_sold: str | None = None,
) -> tuple[InventoryItem, str | None]:
    """Calculate an item after a status change.

    Args:
        item: Item to change.
        new_status: Target status.
        date_sold: Sale date (YYYY-MM-DD), used when entering Sold.
        sell_price: Sale price in cents, used when entering Sold.
        location_sold: Where the item was sold, used when entering Sold.

    Returns:
        Tuple of (item, error_message). On error the item is returned unchanged.
    """
    current = STATUS_ORDER.index(item.status)
    target = STATUS_ORDER.index(new_status)

    if target == current:
        return item, f"Item is already {item.status.value}"

    if target < current:
        return item, f"Cannot move from {item.status.value} back to {new_status.value}"

    if new_status is ItemStatus.SOLD:
        return (
            replace(
                item,
                status=new_status,
                date_sold=date_sold,
                sell_price=sell_price,
                location_sold=location_sold,
            ),
            None,
        )

    return replace(item, status=new_status), None


def calculate_item_profit(item: InventoryItem) -> Money | None:
    """Calculate realised profit for a sold item.

    Args:
        item: Inventory item.

    Returns:
        Sell price minus purchase price in cents, or None if not sold.
    """
    if item.status is not ItemStatus.SOLD or item.sell_price is None:
        return None
    return Money(item.sell_price - item.purchase_price)


def summarize_inventory(items: Iterable[InventoryItem]) -> InventorySummary:
    """Summarize inventory counts and value.

    Args:
        items: Inventory items.

    Returns:
        InventorySummary with a count for every status.
    """
    counts = {status: 0 for status in STATUS_ORDER}
    total_cost = 0
    total_sales = 0
    realised_profit = 0

    for item in items:
        counts[item.status] += 1
        total_cost += item.purchase_price
        profit = calculate_item_profit(item)
        if profit is not None:
            total_sales += item.sell_price or 0
            realised_profit += profit

    return InventorySummary(
        counts=counts,
        total_cost=Money(total_cost),
        total_sales=Money(total_sales),
        realised_profit=Money(realised_profit),
    )
