"""Pure functions for transaction and budget category aggregation.

This module contains the functional core of the ledger:
- No I/O operations (no files, no console)
- No side effects
- Totals are recomputed from a snapshot on every call
- Easy to test

All monetary amounts are in cents (Money type).

Transactions are joined to budget categories by name equality. Two
categories sharing a name receive the same spend.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from fintrack.domain.models import CategoryName, Description, Money, TransactionId, TransactionType


@dataclass(frozen=True)
class TransactionInput:
    """Transaction data as submitted, before an id is assigned."""

    description: Description
    amount: Money
    type: TransactionType
    category: CategoryName
    date: str  # YYYY-MM-DD


@dataclass(frozen=True)
class Transaction:
    """Immutable recorded transaction."""

    id: TransactionId
    description: Description
    amount: Money
    type: TransactionType
    category: CategoryName
    date: str

    @classmethod
    def from_input(cls, transaction_id: TransactionId, record: TransactionInput) -> "Transaction":
        return cls(
            id=transaction_id,
            description=record.description,
            amount=record.amount,
            type=record.type,
            category=record.category,
            date=record.date,
        )


@dataclass(frozen=True)
class BudgetCategory:
    """Immutable budget category definition."""

    id: str
    name: CategoryName
    budget_amount: Money
    color: str
    type: TransactionType | None = None


def total_by_type(records: Iterable[Transaction], type: TransactionType) -> Money:
    """Sum the amounts of all records of one type.

    Args:
        records: Transactions to aggregate.
        type: Transaction type to include.

    Returns:
        Total in cents (0 for an empty sequence).
    """
    return Money(sum(record.amount for record in records if record.type == type))


def net_profit(records: Sequence[Transaction]) -> Money:
    """Calculate income minus expenses.

    Args:
        records: Transactions to aggregate.

    Returns:
        Net profit in cents (negative when expenses exceed income).
    """
    return Money(total_by_type(records, TransactionType.INCOME) - total_by_type(records, TransactionType.EXPENSE))


def total_budget(categories: Iterable[BudgetCategory]) -> Money:
    """Sum the budget allotment of every category, income and expense alike.

    Args:
        categories: Budget categories.

    Returns:
        Total budget in cents.
    """
    return Money(sum(category.budget_amount for category in categories))


def spend_by_category(
    records: Iterable[Transaction],
    categories: Sequence[BudgetCategory],
) -> dict[str, Money]:
    """Sum transaction amounts per budget category.

    Records are matched to a category when their category field equals the
    category name. Records matching no category contribute to no bucket.

    Args:
        records: Transactions to aggregate.
        categories: Budget categories.

    Returns:
        Dictionary of category id to total in cents (0 for categories without records).
    """
    totals_by_name: dict[CategoryName, int] = {}
    for record in records:
        totals_by_name[record.category] = totals_by_name.get(record.category, 0) + record.amount

    return {category.id: Money(totals_by_name.get(category.name, 0)) for category in categories}


def recent_transactions(records: Sequence[Transaction], limit: int = 5) -> list[Transaction]:
    """Return the first records of a most-recent-first sequence.

    Args:
        records: Transactions, most recent first.
        limit: Maximum number of records to return.

    Returns:
        Up to ``limit`` records.
    """
    if limit <= 0:
        return []
    return list(records[:limit])


def categories_by_type(
    categories: Iterable[BudgetCategory],
    type: TransactionType,
) -> list[BudgetCategory]:
    """Select the categories offered when entering a transaction of a type.

    Categories without a type are offered for both income and expenses.

    Args:
        categories: Budget categories.
        type: Type of the transaction being entered.

    Returns:
        Matching categories in their original order.
    """
    return [category for category in categories if category.type is None or category.type == type]
