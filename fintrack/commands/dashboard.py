"""Dashboard command: summary figures, budget wheel and previews."""

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fintrack.commands.inventory import format_status
from fintrack.commands.transactions import format_money, render_transaction_table
from fintrack.domain.inventory import InventoryItem, summarize_inventory
from fintrack.domain.ledger import recent_transactions
from fintrack.domain.models import Money
from fintrack.domain.report import (
    BudgetWheel,
    DashboardSummary,
    calculate_histogram_bar_length,
    create_budget_wheel,
    create_dashboard_summary,
)
from fintrack.store import LedgerStore

console = Console()

WHEEL_BAR_WIDTH = 30


def format_budget_used(percentage: float) -> str:
    """Format budget usage with color based on percentage.

    Args:
        percentage: Budget usage percentage.

    Returns:
        Colored string for budget display.
    """
    text = f"{percentage:.0f}%"
    if percentage > 100:
        return f"[red]{text}[/red]"
    elif percentage > 90:
        return f"[yellow]{text}[/yellow]"
    else:
        return f"[green]{text}[/green]"


def render_header(business_name: str) -> None:
    console.rule(f"[bold magenta]{escape(business_name)}[/bold magenta]")
    console.print("[dim]Manage your business finances with style![/dim]\n", justify="center")


def render_summary(summary: DashboardSummary, currency: str = "$") -> None:
    """Render all-time totals."""
    profit_style = "green" if summary.net_profit >= 0 else "red"
    profit = format_money(Money(abs(summary.net_profit)), currency)
    if summary.net_profit < 0:
        profit = f"-{profit}"

    console.print(f"  [bold]Total income:[/bold]   [green]{format_money(summary.total_income, currency)}[/green]")
    console.print(f"  [bold]Total expenses:[/bold] [red]{format_money(summary.total_expenses, currency)}[/red]")
    console.print(f"  [bold]Net profit:[/bold]     [{profit_style}]{profit}[/{profit_style}]")
    console.print(f"  [bold]Total budget:[/bold]   {format_money(summary.total_budget, currency)}")
    console.print(f"  [dim]{summary.transaction_count} transactions[/dim]\n")


def render_budget_wheel(wheel: BudgetWheel, currency: str = "$") -> None:
    """Render expense shares as colored bars."""
    console.print("[bold cyan]Budget wheel[/bold cyan]\n")

    if not wheel.segments:
        console.print("  [dim]No expenses recorded yet[/dim]\n")
    else:
        max_amount = wheel.segments[0].spent
        for segment in wheel.segments:
            bar_length = calculate_histogram_bar_length(segment.spent, max_amount, WHEEL_BAR_WIDTH)
            bar = "█" * bar_length
            amount_display = format_money(segment.spent, currency)
            label = escape(f"{segment.category:22}")
            console.print(
                f"  {label} {amount_display:>12} {segment.share:5.1f}%  [{segment.color}]{bar}[/]"
            )
        console.print()

    console.print(
        f"  Spent {format_money(wheel.total_expenses, currency)} of "
        f"{format_money(wheel.total_budget, currency)} budget ({format_budget_used(wheel.budget_used)})\n"
    )


def render_inventory_preview(items: Sequence[InventoryItem], currency: str = "$") -> None:
    """Render inventory counts per status."""
    summary = summarize_inventory(items)

    table = Table(title="Inventory")
    for status in summary.counts:
        table.add_column(format_status(status), justify="center")
    table.add_column("Realised profit", justify="right")

    profit = summary.realised_profit
    profit_display = format_money(Money(abs(profit)), currency)
    profit_display = f"[green]{profit_display}[/green]" if profit >= 0 else f"[red]-{profit_display}[/red]"

    table.add_row(*(str(count) for count in summary.counts.values()), profit_display)
    console.print(table)


def dashboard_command(store: LedgerStore, currency: str = "$", recent_limit: int = 5) -> None:
    """Show all-time totals, the budget wheel and recent activity."""
    transactions = store.transactions
    categories = store.categories

    render_header(store.business_name)
    render_summary(create_dashboard_summary(transactions, categories), currency)
    render_budget_wheel(create_budget_wheel(transactions, categories), currency)
    render_inventory_preview(store.inventory, currency)

    recent = recent_transactions(transactions, recent_limit)
    if recent:
        render_transaction_table(recent, "Recent Transactions", currency)
    else:
        console.print("[yellow]No transactions found[/yellow]")
