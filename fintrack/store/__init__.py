"""In-memory store layer - owns the application state for one session.

This module re-exports the store and its factory for easy importing.
"""

from fintrack.store.ledger import IdSource, LedgerStore
from fintrack.store.seed import SEED_CATEGORIES, SEED_INVENTORY, SEED_TRANSACTIONS


def create_store(seed: bool = True, business_name: str = "Financial Tracker") -> LedgerStore:
    """Create a store, optionally preloaded with demo data.

    Args:
        seed: Whether to load the demo transactions, categories and inventory.
        business_name: Name shown in the dashboard header.

    Returns:
        A new LedgerStore.
    """
    if not seed:
        return LedgerStore(business_name=business_name)
    return LedgerStore(
        transactions=SEED_TRANSACTIONS,
        categories=SEED_CATEGORIES,
        inventory=SEED_INVENTORY,
        business_name=business_name,
    )


__all__ = [
    "IdSource",
    "LedgerStore",
    "create_store",
]
