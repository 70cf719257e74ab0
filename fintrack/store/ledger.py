"""In-memory state container for transactions, categories and inventory.

One LedgerStore owns every collection for the lifetime of the process and is
passed by reference to the commands that read or change it. Nothing is
written to disk.

Collections are replaced copy-on-write: each mutation builds a new tuple, so
a snapshot taken before a mutation is never changed by it.
"""

import time
from dataclasses import replace
from typing import Any

from fintrack.domain.inventory import InventoryItem, ItemStatus
from fintrack.domain.ledger import BudgetCategory, Transaction, TransactionInput
from fintrack.domain.models import CategoryName, Money, TransactionId, TransactionType
from fintrack.logging_utils import get_logger

logger = get_logger(__name__)


class IdSource:
    """Issue unique string ids derived from the creation time in milliseconds.

    When the clock has not advanced past the last issued id, the next id is
    the last one plus one.
    """

    def __init__(self, existing: tuple[str, ...] = ()) -> None:
        numeric = [int(value) for value in existing if value.isdecimal()]
        self._last = max(numeric, default=0)

    def next_id(self) -> str:
        now_ms = time.time_ns() // 1_000_000
        self._last = max(now_ms, self._last + 1)
        return str(self._last)


class LedgerStore:
    """Explicit owner of the ledger state."""

    def __init__(
        self,
        transactions: tuple[Transaction, ...] = (),
        categories: tuple[BudgetCategory, ...] = (),
        inventory: tuple[InventoryItem, ...] = (),
        business_name: str = "Financial Tracker",
    ) -> None:
        self._transactions = tuple(transactions)
        self._categories = tuple(categories)
        self._inventory = tuple(inventory)
        self.business_name = business_name

        self._transaction_ids = IdSource(tuple(t.id for t in self._transactions))
        self._category_ids = IdSource(tuple(c.id for c in self._categories))
        self._item_ids = IdSource(tuple(i.id for i in self._inventory))

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """Transactions, most recent first."""
        return self._transactions

    @property
    def categories(self) -> tuple[BudgetCategory, ...]:
        return self._categories

    @property
    def inventory(self) -> tuple[InventoryItem, ...]:
        return self._inventory

    # Transactions

    def add(self, record: TransactionInput) -> Transaction:
        """Record a transaction and place it first.

        No validation is performed: zero or negative amounts, empty
        descriptions and unknown categories are stored as given.

        Args:
            record: Transaction data without an id.

        Returns:
            The stored transaction with its new id.
        """
        transaction = Transaction.from_input(TransactionId(self._transaction_ids.next_id()), record)
        self._transactions = (transaction, *self._transactions)
        logger.debug("Added transaction %s (%s %s)", transaction.id, transaction.type.value, transaction.amount)
        return transaction

    def remove(self, transaction_id: str) -> None:
        """Remove the transaction with the given id. Unknown ids are ignored."""
        remaining = tuple(t for t in self._transactions if t.id != transaction_id)
        if len(remaining) == len(self._transactions):
            logger.debug("No transaction %s to remove", transaction_id)
            return
        self._transactions = remaining
        logger.debug("Removed transaction %s", transaction_id)

    def get_transaction(self, transaction_id: str) -> Transaction | None:
        return next((t for t in self._transactions if t.id == transaction_id), None)

    # Budget categories

    def add_category(
        self,
        name: str,
        budget_amount: Money,
        color: str,
        type: TransactionType | None = None,
    ) -> BudgetCategory:
        """Append a budget category.

        Returns:
            The stored category with its new id.
        """
        category = BudgetCategory(
            id=self._category_ids.next_id(),
            name=CategoryName(name),
            budget_amount=budget_amount,
            color=color,
            type=type,
        )
        self._categories = (*self._categories, category)
        logger.debug("Added category %s (%s)", category.id, category.name)
        return category

    def update_category(self, category_id: str, **changes: Any) -> BudgetCategory | None:
        """Replace fields of a category.

        Renaming a category detaches it from transactions recorded under the
        old name.

        Args:
            category_id: Category to update.
            **changes: Field values to replace (name, budget_amount, color, type).

        Returns:
            The updated category, or None if no category has that id.
        """
        for index, category in enumerate(self._categories):
            if category.id == category_id:
                updated = replace(category, **changes)
                self._categories = (*self._categories[:index], updated, *self._categories[index + 1 :])
                logger.debug("Updated category %s: %s", category_id, sorted(changes))
                return updated
        return None

    def remove_category(self, category_id: str) -> None:
        """Remove a category. Unknown ids are ignored."""
        self._categories = tuple(c for c in self._categories if c.id != category_id)
        logger.debug("Removed category %s", category_id)

    def get_category(self, category_id: str) -> BudgetCategory | None:
        return next((c for c in self._categories if c.id == category_id), None)

    # Inventory

    def add_item(
        self,
        name: str,
        date_bought: str,
        purchase_price: Money,
        mileage: int = 0,
        notes: str = "",
        location_bought: str = "",
    ) -> InventoryItem:
        """Append a new, unlisted inventory item.

        Returns:
            The stored item with its new id.
        """
        item = InventoryItem(
            id=self._item_ids.next_id(),
            name=name,
            status=ItemStatus.NOT_LISTED,
            date_bought=date_bought,
            purchase_price=purchase_price,
            mileage=mileage,
            notes=notes,
            location_bought=location_bought,
        )
        self._inventory = (*self._inventory, item)
        logger.debug("Added inventory item %s (%s)", item.id, item.name)
        return item

    def update_item(self, item: InventoryItem) -> None:
        """Replace the stored item that has the same id. Unknown ids are ignored."""
        self._inventory = tuple(item if existing.id == item.id else existing for existing in self._inventory)
        logger.debug("Updated inventory item %s (%s)", item.id, item.status.value)

    def remove_item(self, item_id: str) -> None:
        """Remove an inventory item. Unknown ids are ignored."""
        self._inventory = tuple(i for i in self._inventory if i.id != item_id)
        logger.debug("Removed inventory item %s", item_id)

    def get_item(self, item_id: str) -> InventoryItem | None:
        return next((i for i in self._inventory if i.id == item_id), None)
