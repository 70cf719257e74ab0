"""Date utilities for fintrack.

Pure functions for date range calculations and formatting, plus date
normalisation for user input.
"""

from collections.abc import Iterable
from datetime import datetime, timedelta

import pandas as pd

from fintrack.domain.ledger import Transaction
from fintrack.domain.models import Month


def month_range(month: Month) -> tuple[str, str, str]:
    """Calculate date range and label for a month.

    Args:
        month: Month in YYYY-MM format.

    Returns:
        Tuple of (since_date, until_date, label) where:
        - since_date: First day of month (YYYY-MM-DD)
        - until_date: First day of next month (YYYY-MM-DD)
        - label: Human-readable month (e.g., "January 2025")
    """
    dt = datetime.strptime(month, "%Y-%m")
    since = dt.strftime("%Y-%m-01")
    next_month = (dt.replace(day=28) + timedelta(days=4)).replace(day=1)
    until = next_month.strftime("%Y-%m-%d")
    label = dt.strftime("%B %Y")
    return since, until, label


def current_month() -> Month:
    """Get the current month in YYYY-MM format."""
    return Month(datetime.now().strftime("%Y-%m"))


def filter_by_month(records: Iterable[Transaction], month: Month) -> list[Transaction]:
    """Select transactions dated within a month.

    Args:
        records: Transactions to filter.
        month: Month in YYYY-MM format.

    Returns:
        Transactions with since_date <= date < until_date, order preserved.
    """
    since, until, _ = month_range(month)
    return [record for record in records if since <= record.date < until]


def normalize_date(raw: str) -> str:
    """Normalise a user-entered date to YYYY-MM-DD.

    Accepts YYYY-MM-DD, DD/MM/YYYY, DD-MM-YYYY and other formats pandas
    understands. ISO input is never read day-first.

    Raises:
        ValueError: If the date cannot be parsed.
    """
    raw = raw.strip()
    try:
        return datetime.strptime(raw, "%Y-%m-%d").strftime("%Y-%m-%d")
    except ValueError:
        pass

    try:
        parsed = pd.to_datetime(raw, dayfirst=True)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{raw}': {e}") from e

    if pd.isna(parsed):
        raise ValueError(f"Could not parse date '{raw}'")
    return parsed.strftime("%Y-%m-%d")


def validate_month(raw: str) -> Month:
    """Validate a YYYY-MM month string.

    Raises:
        ValueError: If the string is not a valid month.
    """
    datetime.strptime(raw.strip(), "%Y-%m")
    return Month(raw.strip())
