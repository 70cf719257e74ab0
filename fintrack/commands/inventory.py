"""Inventory commands for tracking items from purchase to sale."""

from collections.abc import Sequence

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fintrack.commands.transactions import format_money, parse_money, prompt_money
from fintrack.dates import normalize_date
from fintrack.domain.inventory import (
    InventoryItem,
    ItemStatus,
    calculate_item_profit,
    calculate_status_change,
    next_status,
    summarize_inventory,
)
from fintrack.domain.models import Money
from fintrack.store import LedgerStore

console = Console()

STATUS_STYLES = {
    ItemStatus.NOT_LISTED: "dim",
    ItemStatus.ON_MARKET: "yellow",
    ItemStatus.SOLD: "green",
}


def format_status(status: ItemStatus) -> str:
    style = STATUS_STYLES[status]
    return f"[{style}]{status.value}[/{style}]"


def render_inventory_table(items: Sequence[InventoryItem], currency: str = "$", numbered: bool = False) -> None:
    """Print inventory items as a table."""
    table = Table(title=f"Inventory ({len(items)} items)")
    if numbered:
        table.add_column("#", style="dim", justify="right")
    table.add_column("Item", style="white")
    table.add_column("Status", justify="center")
    table.add_column("Bought", style="cyan")
    table.add_column("Cost", justify="right")
    table.add_column("Sold", style="cyan")
    table.add_column("Price", justify="right")
    table.add_column("Profit", justify="right")

    for idx, item in enumerate(items, 1):
        profit = calculate_item_profit(item)
        if profit is None:
            profit_display = "[dim]-[/dim]"
        elif profit >= 0:
            profit_display = f"[green]+{format_money(profit, currency)}[/green]"
        else:
            profit_display = f"[red]-{format_money(Money(abs(profit)), currency)}[/red]"

        row = [
            escape(item.name),
            format_status(item.status),
            f"{item.date_bought}\n[dim]{escape(item.location_bought)}[/dim]" if item.location_bought else item.date_bought,
            format_money(item.purchase_price, currency),
            item.date_sold or "[dim]-[/dim]",
            format_money(item.sell_price, currency) if item.sell_price is not None else "[dim]-[/dim]",
            profit_display,
        ]
        if numbered:
            row.insert(0, str(idx))
        table.add_row(*row)

    console.print(table)


def inventory_command(store: LedgerStore, currency: str = "$", numbered: bool = False) -> None:
    """Show inventory items and totals."""
    items = store.inventory
    if not items:
        console.print("[yellow]No inventory items[/yellow]")
        return

    render_inventory_table(items, currency, numbered=numbered)

    summary = summarize_inventory(items)
    counts = ", ".join(f"{status.value}: {count}" for status, count in summary.counts.items())
    console.print(f"\n  [dim]{counts}[/dim]")
    console.print(f"  [bold]Total cost:[/bold] {format_money(summary.total_cost, currency)}")
    console.print(f"  [bold]Total sales:[/bold] {format_money(summary.total_sales, currency)}")
    realised = summary.realised_profit
    realised_display = format_money(Money(abs(realised)), currency)
    if realised < 0:
        realised_display = f"-{realised_display}"
    console.print(f"  [bold]Realised profit:[/bold] {realised_display}\n")


def add_item_command(store: LedgerStore, currency: str = "$") -> InventoryItem | None:
    """Prompt for a new inventory item and add it as Not Listed."""
    name = typer.prompt("Item name", type=str).strip()
    if not name:
        console.print("[red]Item name is required[/red]\n")
        return None

    try:
        date_bought = normalize_date(typer.prompt("Date bought", type=str))
    except ValueError as e:
        console.print(f"[red]Invalid date format: {escape(str(e))}[/red]\n")
        return None

    purchase_price = prompt_money("Purchase price")
    if purchase_price is None:
        return None

    mileage = typer.prompt("Mileage", type=int, default=0)
    location_bought = typer.prompt("Where bought", type=str, default="")
    notes = typer.prompt("Notes", type=str, default="")

    item = store.add_item(
        name=name,
        date_bought=date_bought,
        purchase_price=purchase_price,
        mileage=mileage,
        notes=notes,
        location_bought=location_bought,
    )
    console.print(f"[green]✓[/green] Added {escape(item.name)} ({format_money(item.purchase_price, currency)})")
    return item


def advance_item_command(store: LedgerStore, currency: str = "$") -> None:
    """Prompt for an item and move it to its next status."""
    items = store.inventory
    if not items:
        console.print("[yellow]No inventory items[/yellow]")
        return

    render_inventory_table(items, currency, numbered=True)

    choice = typer.prompt(f"\nSelect item (1-{len(items)}, or q to quit)", type=str, default="q")
    if choice.lower() == "q":
        return

    try:
        idx = int(choice) - 1
    except ValueError:
        console.print("[red]Invalid input[/red]")
        return

    if not 0 <= idx < len(items):
        console.print("[red]Invalid selection[/red]")
        return

    item = items[idx]
    target = next_status(item.status)
    if target is None:
        console.print(f"[yellow]{escape(item.name)} is already sold[/yellow]")
        return

    date_sold = None
    sell_price = None
    location_sold = None
    if target is ItemStatus.SOLD:
        try:
            date_sold = normalize_date(typer.prompt("Date sold", type=str))
        except ValueError as e:
            console.print(f"[red]Invalid date format: {escape(str(e))}[/red]\n")
            return
        sell_price = parse_money(typer.prompt("Sell price", type=str))
        if sell_price is None:
            console.print("[red]Invalid amount[/red]\n")
            return
        location_sold = typer.prompt("Where sold", type=str, default="")

    updated, error = calculate_status_change(item, target, date_sold, sell_price, location_sold)
    if error:
        console.print(f"[red]{error}[/red]\n")
        return

    store.update_item(updated)
    console.print(f"[green]✓ {escape(updated.name)} is now {updated.status.value}[/green]")


def remove_item_command(store: LedgerStore, currency: str = "$") -> None:
    """Prompt for an item and remove it."""
    items = store.inventory
    if not items:
        console.print("[yellow]No inventory items[/yellow]")
        return

    render_inventory_table(items, currency, numbered=True)

    choice = typer.prompt(f"\nSelect item to remove (1-{len(items)}, or q to quit)", type=str, default="q")
    if choice.lower() == "q":
        return

    try:
        idx = int(choice) - 1
    except ValueError:
        console.print("[red]Invalid input[/red]")
        return

    if not 0 <= idx < len(items):
        console.print("[red]Invalid selection[/red]")
        return

    item = items[idx]
    if typer.confirm(f"Remove '{item.name}'?", default=False):
        store.remove_item(item.id)
        console.print(f"[green]✓ Removed {escape(item.name)}[/green]")
