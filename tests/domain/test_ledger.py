"""Tests for fintrack.domain.ledger pure functions."""

from fintrack.domain.ledger import (
    BudgetCategory,
    Transaction,
    categories_by_type,
    net_profit,
    recent_transactions,
    spend_by_category,
    total_budget,
    total_by_type,
)
from fintrack.domain.models import CategoryName, Description, Money, TransactionId, TransactionType

INCOME = TransactionType.INCOME
EXPENSE = TransactionType.EXPENSE


def make_txn(txn_id: str, amount: int, type: TransactionType, category: str, date: str = "2025-09-01") -> Transaction:
    return Transaction(
        id=TransactionId(txn_id),
        description=Description(f"Transaction {txn_id}"),
        amount=Money(amount),
        type=type,
        category=CategoryName(category),
        date=date,
    )


def make_category(cat_id: str, name: str, budget: int, type: TransactionType | None = EXPENSE) -> BudgetCategory:
    return BudgetCategory(id=cat_id, name=CategoryName(name), budget_amount=Money(budget), color="#000000", type=type)


class TestTotalByType:
    """Tests for total_by_type."""

    def test_sums_each_type(self) -> None:
        """Should sum income and expenses separately."""
        records = [
            make_txn("1", 2500, INCOME, "Business Income"),
            make_txn("2", 800, EXPENSE, "Office Supplies"),
        ]

        assert total_by_type(records, INCOME) == Money(2500)
        assert total_by_type(records, EXPENSE) == Money(800)

    def test_empty_sequence_is_zero(self) -> None:
        """Should return 0 with no records."""
        assert total_by_type([], INCOME) == Money(0)
        assert total_by_type([], EXPENSE) == Money(0)

    def test_types_cover_all_amounts(self) -> None:
        """Income plus expense totals should equal the sum of every amount."""
        records = [
            make_txn("1", 120, INCOME, "A"),
            make_txn("2", 45, EXPENSE, "B"),
            make_txn("3", 0, EXPENSE, "C"),
            make_txn("4", 999, INCOME, "Unknown"),
        ]

        assert total_by_type(records, INCOME) + total_by_type(records, EXPENSE) == sum(r.amount for r in records)

    def test_unmatched_categories_still_counted(self) -> None:
        """Should count records whose category matches no budget category."""
        records = [make_txn("1", 50, EXPENSE, "Unknown")]

        assert total_by_type(records, EXPENSE) == Money(50)


class TestNetProfit:
    """Tests for net_profit."""

    def test_income_minus_expenses(self) -> None:
        """Should subtract expenses from income."""
        records = [
            make_txn("1", 2500, INCOME, "Business Income"),
            make_txn("2", 800, EXPENSE, "Office Supplies"),
        ]

        assert net_profit(records) == Money(1700)

    def test_empty_is_zero(self) -> None:
        """Should be 0 with no records."""
        assert net_profit([]) == Money(0)

    def test_loss_is_negative(self) -> None:
        """Should go negative when expenses exceed income."""
        records = [
            make_txn("1", 100, INCOME, "Business Income"),
            make_txn("2", 300, EXPENSE, "Marketing"),
        ]

        assert net_profit(records) == Money(-200)


class TestTotalBudget:
    """Tests for total_budget."""

    def test_sums_all_categories_regardless_of_type(self) -> None:
        """Should include income and expense categories."""
        categories = [
            make_category("1", "Marketing", 800),
            make_category("2", "Business Income", 5000, INCOME),
            make_category("3", "Misc", 100, None),
        ]

        assert total_budget(categories) == Money(5900)

    def test_empty_is_zero(self) -> None:
        """Should be 0 with no categories."""
        assert total_budget([]) == Money(0)


class TestSpendByCategory:
    """Tests for spend_by_category."""

    def test_unmatched_record_contributes_nothing(self) -> None:
        """Should drop records whose category matches no category name."""
        categories = [make_category("4", "Marketing", 800)]
        records = [
            make_txn("1", 350, EXPENSE, "Marketing"),
            make_txn("2", 50, EXPENSE, "Unknown"),
        ]

        assert spend_by_category(records, categories) == {"4": Money(350)}

    def test_category_without_records_is_zero(self) -> None:
        """Should map categories with no records to 0."""
        categories = [make_category("1", "Equipment", 2000), make_category("4", "Marketing", 800)]
        records = [make_txn("1", 350, EXPENSE, "Marketing")]

        assert spend_by_category(records, categories) == {"1": Money(0), "4": Money(350)}

    def test_sums_multiple_records(self) -> None:
        """Should sum every record in a category."""
        categories = [make_category("6", "Business Income", 5000, INCOME)]
        records = [
            make_txn("1", 2500, INCOME, "Business Income"),
            make_txn("4", 1200, INCOME, "Business Income"),
        ]

        assert spend_by_category(records, categories) == {"6": Money(3700)}

    def test_categories_sharing_a_name_get_same_total(self) -> None:
        """Should give duplicate-named categories the same spend."""
        categories = [make_category("1", "Marketing", 800), make_category("2", "Marketing", 100)]
        records = [make_txn("1", 350, EXPENSE, "Marketing")]

        assert spend_by_category(records, categories) == {"1": Money(350), "2": Money(350)}

    def test_name_match_is_exact(self) -> None:
        """Should not match names that differ in case."""
        categories = [make_category("4", "Marketing", 800)]
        records = [make_txn("1", 350, EXPENSE, "marketing")]

        assert spend_by_category(records, categories) == {"4": Money(0)}

    def test_no_categories(self) -> None:
        """Should return an empty mapping with no categories."""
        assert spend_by_category([make_txn("1", 10, EXPENSE, "A")], []) == {}


class TestRecentTransactions:
    """Tests for recent_transactions."""

    def test_takes_first_records(self) -> None:
        """Should keep the leading records in order."""
        records = [make_txn(str(i), i, EXPENSE, "A") for i in range(8)]

        recent = recent_transactions(records, 5)

        assert [r.id for r in recent] == ["0", "1", "2", "3", "4"]

    def test_fewer_than_limit(self) -> None:
        """Should return everything when there are fewer records than the limit."""
        records = [make_txn("1", 10, EXPENSE, "A")]

        assert recent_transactions(records, 5) == records

    def test_zero_limit(self) -> None:
        """Should return nothing for a zero limit."""
        assert recent_transactions([make_txn("1", 10, EXPENSE, "A")], 0) == []


class TestCategoriesByType:
    """Tests for categories_by_type."""

    def test_filters_by_type_and_keeps_untyped(self) -> None:
        """Should offer matching and untyped categories."""
        categories = [
            make_category("1", "Marketing", 800),
            make_category("2", "Business Income", 5000, INCOME),
            make_category("3", "Misc", 100, None),
        ]

        assert [c.id for c in categories_by_type(categories, EXPENSE)] == ["1", "3"]
        assert [c.id for c in categories_by_type(categories, INCOME)] == ["2", "3"]
