"""Transaction commands (list, add, delete, export)."""

import sys
from collections.abc import Sequence
from pathlib import Path

import pandas as pd
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fintrack.dates import normalize_date
from fintrack.domain.ledger import BudgetCategory, Transaction, TransactionInput, categories_by_type
from fintrack.domain.models import CategoryName, Description, Money, TransactionType
from fintrack.store import LedgerStore

console = Console()

EXPORT_COLUMNS = ["Date", "Description", "Category", "Type", "Amount"]


def parse_money(amount_str: str) -> Money | None:
    """Parse money string to cents.

    Args:
        amount_str: String containing amount in major units (e.g. "12.50").

    Returns:
        Money amount in cents, or None if invalid or negative.
    """
    try:
        value = float(amount_str.strip().replace(",", "").lstrip("$£€"))
        if value < 0:
            return None
        return Money(round(value * 100))
    except (ValueError, OverflowError):
        # nan and inf parse as floats but have no integer value
        return None


def prompt_money(prompt: str) -> Money | None:
    """Prompt user for money amount and parse to cents.

    Args:
        prompt: Prompt text to display to user.

    Returns:
        Money amount in cents, or None if invalid input.
    """
    amount_str = typer.prompt(prompt, type=str)
    result = parse_money(amount_str)
    if result is None:
        console.print("[red]Invalid amount[/red]\n")
    return result


def format_money(amount: Money, currency: str = "$") -> str:
    """Format cents for display (e.g. "$1,234.50")."""
    return f"{currency}{amount / 100:,.2f}"


def format_signed_amount(transaction: Transaction, currency: str = "$") -> str:
    """Format a transaction amount with colour and direction sign."""
    if transaction.type == TransactionType.INCOME:
        return f"[green]+{format_money(transaction.amount, currency)}[/green]"
    return f"[red]-{format_money(transaction.amount, currency)}[/red]"


def render_transaction_table(
    transactions: Sequence[Transaction],
    title: str,
    currency: str = "$",
    numbered: bool = False,
) -> None:
    """Print transactions as a table.

    Args:
        transactions: Transactions to show, in display order.
        title: Table title.
        currency: Currency symbol.
        numbered: Whether to add a # column for selection.
    """
    table = Table(title=title)
    if numbered:
        table.add_column("#", style="dim", justify="right")
    table.add_column("Date", style="cyan")
    table.add_column("Description", style="white")
    table.add_column("Category", style="magenta")
    table.add_column("Amount", justify="right")

    for idx, txn in enumerate(transactions, 1):
        category = escape(txn.category) if txn.category else "[dim]-[/dim]"
        row = [txn.date, escape(txn.description), category, format_signed_amount(txn, currency)]
        if numbered:
            row.insert(0, str(idx))
        table.add_row(*row)

    console.print(table)


def list_command(
    store: LedgerStore,
    currency: str = "$",
    limit: int = 50,
    all: bool = False,
    numbered: bool = False,
) -> None:
    """List transactions, most recent first."""
    transactions = store.transactions

    if not transactions:
        console.print("[yellow]No transactions found[/yellow]")
        return

    shown = transactions if all else transactions[:limit]
    title = (
        f"All Transactions ({len(shown)})"
        if len(shown) == len(transactions)
        else f"Transactions (showing {len(shown)} of {len(transactions)})"
    )
    render_transaction_table(shown, title, currency, numbered=numbered)


def select_category(categories: Sequence[BudgetCategory], type: TransactionType) -> CategoryName | None:
    """Prompt for a category by number or free-form name.

    Args:
        categories: Budget categories.
        type: Type of the transaction being entered.

    Returns:
        Chosen category name, or None if the input was empty.
    """
    options = categories_by_type(categories, type)
    for idx, category in enumerate(options, 1):
        console.print(f"  [dim]{idx}.[/dim] {escape(category.name)}")

    choice = typer.prompt("Category (number or name)", type=str, default="").strip()
    if not choice:
        return None
    if choice.isdigit() and 1 <= int(choice) <= len(options):
        return options[int(choice) - 1].name
    return CategoryName(choice)


def prompt_transaction(store: LedgerStore) -> TransactionInput | None:
    """Prompt for the fields of a new transaction.

    Returns:
        TransactionInput, or None if any field was invalid.
    """
    raw_type = typer.prompt("Type (income/expense)", type=str, default="expense")
    try:
        txn_type = TransactionType.from_str(raw_type)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]\n")
        return None

    description = typer.prompt("Description", type=str, default="")

    amount = prompt_money("Amount")
    if amount is None:
        return None

    category = select_category(store.categories, txn_type)
    if category is None:
        console.print("[red]A category is required[/red]\n")
        return None

    raw_date = typer.prompt("Date", type=str, default=pd.Timestamp.today().strftime("%Y-%m-%d"))
    try:
        date = normalize_date(raw_date)
    except ValueError as e:
        console.print(f"[red]Invalid date format: {escape(str(e))}[/red]")
        console.print("[dim]Accepted formats: YYYY-MM-DD, DD/MM/YYYY, DD-MM-YYYY, etc.[/dim]\n")
        return None

    return TransactionInput(
        description=Description(description),
        amount=amount,
        type=txn_type,
        category=category,
        date=date,
    )


def add_command(store: LedgerStore, currency: str = "$") -> Transaction | None:
    """Prompt for a transaction and record it.

    Returns:
        The recorded transaction, or None if input was invalid.
    """
    record = prompt_transaction(store)
    if record is None:
        return None

    transaction = store.add(record)

    console.print("[green]✓[/green] Transaction added:")
    console.print(f"  Date: {transaction.date}")
    console.print(f"  Description: {escape(transaction.description)}")
    console.print(f"  Amount: {format_signed_amount(transaction, currency)}")
    console.print(f"  Category: {escape(transaction.category)}")
    return transaction


def delete_command(store: LedgerStore, currency: str = "$") -> None:
    """Prompt for a transaction to delete from the full list."""
    transactions = store.transactions
    if not transactions:
        console.print("[yellow]No transactions found[/yellow]")
        return

    render_transaction_table(transactions, f"All Transactions ({len(transactions)})", currency, numbered=True)

    choice = typer.prompt(f"\nSelect transaction to delete (1-{len(transactions)}, or q to quit)", type=str, default="q")
    if choice.lower() == "q":
        return

    try:
        idx = int(choice) - 1
    except ValueError:
        console.print("[red]Invalid input[/red]")
        return

    if not 0 <= idx < len(transactions):
        console.print("[red]Invalid selection[/red]")
        return

    txn = transactions[idx]
    if typer.confirm(f"Delete '{txn.description}' ({format_money(txn.amount, currency)})?", default=False):
        store.remove(txn.id)
        console.print("[green]✓[/green] Transaction deleted")


def transactions_to_frame(transactions: Sequence[Transaction]) -> pd.DataFrame:
    """Build an export table from transactions.

    Amounts are in major units.
    """
    rows = [
        {
            "Date": txn.date,
            "Description": txn.description,
            "Category": txn.category,
            "Type": txn.type.value,
            "Amount": txn.amount / 100,
        }
        for txn in transactions
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def export_command(store: LedgerStore, output: str) -> None:
    """Export all transactions to a CSV file."""
    output_path = Path(output).expanduser()

    frame = transactions_to_frame(store.transactions)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(output_path, index=False)
    except OSError as e:
        console.print(f"[red]Export failed: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Exported {len(frame)} transactions to: {escape(str(output_path))}")
