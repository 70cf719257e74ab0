"""Domain models and types for fintrack.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from the interactive shell
"""

from fintrack.domain.models import (
    CategoryName,
    Description,
    Money,
    Month,
    TransactionId,
    TransactionType,
)

__all__ = ["Money", "Month", "CategoryName", "Description", "TransactionId", "TransactionType"]
