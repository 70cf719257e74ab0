"""Budget manager commands for category budgets and monthly spending."""

from collections.abc import Sequence

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fintrack.commands.transactions import format_money, prompt_money
from fintrack.dates import month_range, validate_month
from fintrack.domain.ledger import BudgetCategory
from fintrack.domain.models import Money, Month, TransactionType
from fintrack.domain.report import CategoryStatus, compute_category_status
from fintrack.store import LedgerStore

console = Console()

DEFAULT_COLORS = ("#ff6b6b", "#4ecdc4", "#45b7d1", "#f9ca24", "#6c5ce7", "#10b981", "#fd79a8", "#e17055")


def format_percentage(status: CategoryStatus) -> str:
    """Format budget usage with color.

    Income categories are green once they reach their target, expense
    categories turn red once they exceed their budget.
    """
    text = f"{status.percentage:.0f}%"
    if status.type == TransactionType.INCOME:
        return f"[green]{text}[/green]" if status.percentage >= 100 else f"[yellow]{text}[/yellow]"
    if status.percentage > 100:
        return f"[red]{text}[/red]"
    elif status.percentage > 90:
        return f"[yellow]{text}[/yellow]"
    return f"[green]{text}[/green]"


def render_budget_status(statuses: Sequence[CategoryStatus], period: str, currency: str = "$") -> None:
    """Render per-category budget status for a period."""
    table = Table(title=f"Budget - {period}", show_header=True, header_style="bold")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Category", style="white")
    table.add_column("Type", style="dim")
    table.add_column("Budget", justify="right")
    table.add_column("Spent", justify="right")
    table.add_column("Remaining", justify="right")
    table.add_column("Used", justify="right")

    for idx, status in enumerate(statuses, 1):
        if status.remaining < 0:
            remaining_display = f"[red]-{format_money(Money(abs(status.remaining)), currency)}[/red]"
        else:
            remaining_display = format_money(status.remaining, currency)

        table.add_row(
            str(idx),
            f"[{status.color}]●[/] {escape(status.category)}",
            status.type.value if status.type else "-",
            format_money(status.budget, currency),
            format_money(status.spent, currency),
            remaining_display,
            format_percentage(status),
        )

    console.print(table)

    expense_statuses = [s for s in statuses if s.type != TransactionType.INCOME]
    total_budget = sum(s.budget for s in expense_statuses)
    total_spent = sum(s.spent for s in expense_statuses)
    console.print(
        f"\n[bold]Expense budget:[/bold] {format_money(Money(total_spent), currency)} "
        f"of {format_money(Money(total_budget), currency)} spent\n"
    )


def budget_command(store: LedgerStore, month: Month, currency: str = "$") -> None:
    """Show budget status for every category in a month."""
    _, _, period = month_range(month)

    if not store.categories:
        console.print("[yellow]No budget categories yet[/yellow]")
        return

    statuses = compute_category_status(store.transactions, store.categories, month)
    render_budget_status(statuses, period, currency)


def prompt_month(current: Month) -> Month:
    """Prompt for a month, keeping the current one on invalid input."""
    raw = typer.prompt("Month (YYYY-MM)", type=str, default=current)
    try:
        return validate_month(raw)
    except ValueError:
        console.print(f"[red]Invalid month: {escape(raw)}. Use YYYY-MM[/red]\n")
        return current


def select_category(categories: Sequence[BudgetCategory]) -> BudgetCategory | None:
    """Prompt for a category by its number in the budget table."""
    choice = typer.prompt(f"Select category (1-{len(categories)}, or q to quit)", type=str, default="q")
    if choice.lower() == "q":
        return None

    try:
        idx = int(choice) - 1
    except ValueError:
        console.print("[red]Invalid input[/red]")
        return None

    if not 0 <= idx < len(categories):
        console.print("[red]Invalid selection[/red]")
        return None
    return categories[idx]


def add_category_command(store: LedgerStore, currency: str = "$") -> BudgetCategory | None:
    """Prompt for a new budget category."""
    name = typer.prompt("Category name", type=str).strip()
    if not name:
        console.print("[red]Category name is required[/red]\n")
        return None

    amount = prompt_money("Budget amount")
    if amount is None:
        return None

    raw_type = typer.prompt("Type (income/expense, blank for both)", type=str, default="")
    category_type = None
    if raw_type.strip():
        try:
            category_type = TransactionType.from_str(raw_type)
        except ValueError as e:
            console.print(f"[red]{escape(str(e))}[/red]\n")
            return None

    color = DEFAULT_COLORS[len(store.categories) % len(DEFAULT_COLORS)]
    category = store.add_category(name, amount, color, category_type)
    console.print(f"[green]✓ Added {escape(category.name)}: {format_money(category.budget_amount, currency)}[/green]\n")
    return category


def edit_category_command(store: LedgerStore, currency: str = "$") -> None:
    """Prompt for a category and change its name or budget amount."""
    category = select_category(store.categories)
    if category is None:
        return

    console.print(f"[dim]Current budget: {format_money(category.budget_amount, currency)}[/dim]")
    name = typer.prompt("Name", type=str, default=category.name).strip() or category.name

    amount = prompt_money("Budget amount")
    if amount is None:
        return

    if name != category.name:
        console.print("[yellow]Transactions recorded under the old name will no longer count towards it[/yellow]")

    store.update_category(category.id, name=name, budget_amount=amount)
    console.print(f"[green]✓ {escape(name)} now budgeted: {format_money(amount, currency)}[/green]\n")


def remove_category_command(store: LedgerStore) -> None:
    """Prompt for a category and remove it."""
    category = select_category(store.categories)
    if category is None:
        return

    if typer.confirm(f"Remove category '{category.name}'?", default=False):
        store.remove_category(category.id)
        console.print(f"[green]✓ Removed {escape(category.name)}[/green]\n")
