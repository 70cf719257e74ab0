"""Pure functions for dashboard and budget report calculations.

This module contains the functional core for reporting operations:
- No I/O operations (no files, no console)
- No side effects
- Pure data transformations
- Easy to test

All monetary amounts are in cents (Money type).
"""

from collections.abc import Sequence
from dataclasses import dataclass

from fintrack.dates import filter_by_month
from fintrack.domain.ledger import (
    BudgetCategory,
    Transaction,
    net_profit,
    spend_by_category,
    total_budget,
    total_by_type,
)
from fintrack.domain.models import CategoryName, Money, Month, TransactionType


@dataclass(frozen=True)
class DashboardSummary:
    """Immutable all-time dashboard figures."""

    total_income: Money
    total_expenses: Money
    total_budget: Money
    net_profit: Money
    transaction_count: int


@dataclass(frozen=True)
class WheelSegment:
    """Immutable budget wheel slice for one expense category."""

    category: CategoryName
    color: str
    spent: Money
    share: float  # percentage of total expenses


@dataclass(frozen=True)
class BudgetWheel:
    """Immutable proportional breakdown of expenses against the budget."""

    segments: list[WheelSegment]
    total_income: Money
    total_expenses: Money
    total_budget: Money
    budget_used: float  # percentage of total budget spent


@dataclass(frozen=True)
class CategoryStatus:
    """Immutable budget status for a single category."""

    category: CategoryName
    type: TransactionType | None
    color: str
    budget: Money
    spent: Money
    remaining: Money
    percentage: float


def calculate_budget_percentage(actual: Money, budget: Money) -> float:
    """Calculate percentage of budget used.

    Args:
        actual: Actual amount in cents.
        budget: Budget amount in cents.

    Returns:
        Percentage of budget used (0-100+).
    """
    if budget <= 0:
        return 0.0
    return (abs(actual) / budget) * 100


def calculate_share(amount: Money, total: Money) -> float:
    """Calculate an amount's share of a total as a percentage."""
    if total <= 0:
        return 0.0
    return (amount / total) * 100


def create_dashboard_summary(
    records: Sequence[Transaction],
    categories: Sequence[BudgetCategory],
) -> DashboardSummary:
    """Create all-time dashboard summary.

    Args:
        records: All transactions.
        categories: All budget categories.

    Returns:
        DashboardSummary with totals.
    """
    return DashboardSummary(
        total_income=total_by_type(records, TransactionType.INCOME),
        total_expenses=total_by_type(records, TransactionType.EXPENSE),
        total_budget=total_budget(categories),
        net_profit=net_profit(records),
        transaction_count=len(records),
    )


def create_budget_wheel(
    records: Sequence[Transaction],
    categories: Sequence[BudgetCategory],
) -> BudgetWheel:
    """Create budget wheel segments for expense categories.

    Only expense records are placed on the wheel. Categories typed as income
    are skipped and categories with no spend are left out.

    Args:
        records: Transactions to chart.
        categories: Budget categories.

    Returns:
        BudgetWheel with segments sorted by spend, largest first.
    """
    expense_records = [record for record in records if record.type == TransactionType.EXPENSE]
    expense_categories = [category for category in categories if category.type != TransactionType.INCOME]

    total_expenses = total_by_type(records, TransactionType.EXPENSE)
    budget = total_budget(categories)
    spending = spend_by_category(expense_records, expense_categories)

    segments = [
        WheelSegment(
            category=category.name,
            color=category.color,
            spent=spending[category.id],
            share=calculate_share(spending[category.id], total_expenses),
        )
        for category in expense_categories
        if spending[category.id] > 0
    ]
    segments.sort(key=lambda segment: segment.spent, reverse=True)

    return BudgetWheel(
        segments=segments,
        total_income=total_by_type(records, TransactionType.INCOME),
        total_expenses=total_expenses,
        total_budget=budget,
        budget_used=calculate_budget_percentage(total_expenses, budget),
    )


def compute_category_status(
    records: Sequence[Transaction],
    categories: Sequence[BudgetCategory],
    month: Month | None = None,
) -> list[CategoryStatus]:
    """Compute budget status per category.

    Args:
        records: All transactions.
        categories: Budget categories.
        month: Month to restrict spending to (YYYY-MM). None means all time.

    Returns:
        List of CategoryStatus in category order.
    """
    if month is not None:
        records = filter_by_month(records, month)

    spending = spend_by_category(records, categories)

    return [
        CategoryStatus(
            category=category.name,
            type=category.type,
            color=category.color,
            budget=category.budget_amount,
            spent=spending[category.id],
            remaining=Money(category.budget_amount - spending[category.id]),
            percentage=calculate_budget_percentage(spending[category.id], category.budget_amount),
        )
        for category in categories
    ]


def calculate_histogram_bar_length(
    amount: Money,
    max_amount: Money,
    bar_width: int,
) -> int:
    """Calculate histogram bar length.

    Args:
        amount: Amount to display.
        max_amount: Maximum amount in dataset.
        bar_width: Maximum bar width in characters.

    Returns:
        Bar length in characters.
    """
    if max_amount <= 0:
        return 0
    return min(bar_width, int((abs(amount) / max_amount) * bar_width))
