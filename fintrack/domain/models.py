"""Domain type definitions for fintrack.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in cents (minor units)
- Month: Month in YYYY-MM format
- CategoryName: Name of a budget category
- Description: Transaction description text
- TransactionId: Identifier assigned to a transaction when it is recorded
"""

from enum import Enum
from typing import NewType

# Money amounts are stored as cents (minor units) to avoid floating point errors
Money = NewType("Money", int)

# Month is always in YYYY-MM format (e.g., "2025-09")
Month = NewType("Month", str)

# Category name, also the join key between transactions and budget categories
CategoryName = NewType("CategoryName", str)

# Transaction description text
Description = NewType("Description", str)

TransactionId = NewType("TransactionId", str)


class TransactionType(str, Enum):
    """Direction of a transaction. Amounts are never signed."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionType":
        """Coerce user input such as 'Income' or ' e ' into a transaction type.

        Raises:
            ValueError: If the value names neither type.
        """
        normalised = value.strip().lower()
        for member in cls:
            if member.value == normalised or member.value[0] == normalised:
                return member
        raise ValueError(f"Unsupported transaction type: {value}")
