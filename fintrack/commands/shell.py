"""Interactive session over a single in-memory store.

The session keeps one LedgerStore for its whole lifetime, so transactions
added or deleted here are visible on every tab until the session ends.
"""

from typing import Any

import typer
from rich.console import Console

from fintrack.commands.budget import (
    add_category_command,
    budget_command,
    edit_category_command,
    prompt_month,
    remove_category_command,
)
from fintrack.commands.dashboard import dashboard_command
from fintrack.commands.inventory import (
    add_item_command,
    advance_item_command,
    inventory_command,
    remove_item_command,
)
from fintrack.commands.transactions import add_command, delete_command, export_command, list_command
from fintrack.domain.models import Month
from fintrack.store import LedgerStore

console = Console()

TABS = {
    "d": "dashboard",
    "a": "add",
    "t": "transactions",
    "b": "budget",
    "i": "inventory",
}


def prompt_tab(active: str) -> str | None:
    """Prompt for the next tab.

    Returns:
        Tab name, or None to quit.
    """
    menu = "  ".join(f"[bold]{key}[/bold] {name}" for key, name in TABS.items())
    console.print(f"\n{menu}  [bold]q[/bold] quit")
    choice = typer.prompt("Tab", type=str, default=active[0]).strip().lower()
    if choice == "q":
        return None
    if choice in TABS:
        return TABS[choice]
    if choice in TABS.values():
        return choice
    console.print("[red]Unknown tab[/red]")
    return active


def dashboard_tab(store: LedgerStore, settings: dict[str, Any]) -> str:
    dashboard_command(store, settings["currency"], settings["recent_limit"])
    if typer.confirm("Edit business name?", default=False):
        name = typer.prompt("Business name", type=str, default=store.business_name).strip()
        if name:
            store.business_name = name
    return "dashboard"


def add_tab(store: LedgerStore, settings: dict[str, Any]) -> str:
    console.print("[bold cyan]Add New Transaction[/bold cyan]\n")
    if add_command(store, settings["currency"]) is None:
        return "add"
    console.print()
    return "dashboard"


def transactions_tab(store: LedgerStore, settings: dict[str, Any]) -> str:
    currency = settings["currency"]
    list_command(store, currency, all=True)

    action = typer.prompt("[d]elete, [e]xport, or enter to continue", type=str, default="").strip().lower()
    if action == "d":
        delete_command(store, currency)
    elif action == "e":
        output = typer.prompt("Export to", type=str, default="transactions.csv")
        export_command(store, output)
    return "transactions"


def budget_tab(store: LedgerStore, settings: dict[str, Any]) -> str:
    currency = settings["currency"]
    budget_command(store, settings["month"], currency)

    action = typer.prompt(
        "[m]onth, [e]dit, [a]dd, [r]emove category, or enter to continue", type=str, default=""
    ).strip().lower()
    if action == "m":
        settings["month"] = prompt_month(settings["month"])
    elif action == "e":
        edit_category_command(store, currency)
    elif action == "a":
        add_category_command(store, currency)
    elif action == "r":
        remove_category_command(store)
    return "budget"


def inventory_tab(store: LedgerStore, settings: dict[str, Any]) -> str:
    currency = settings["currency"]
    inventory_command(store, currency)

    action = typer.prompt(
        "[a]dd item, [s]tatus change, [r]emove item, or enter to continue", type=str, default=""
    ).strip().lower()
    if action == "a":
        add_item_command(store, currency)
    elif action == "s":
        advance_item_command(store, currency)
    elif action == "r":
        remove_item_command(store, currency)
    return "inventory"


HANDLERS = {
    "dashboard": dashboard_tab,
    "add": add_tab,
    "transactions": transactions_tab,
    "budget": budget_tab,
    "inventory": inventory_tab,
}


def shell_command(store: LedgerStore, currency: str, month: Month, recent_limit: int = 5) -> None:
    """Run the interactive session until the user quits."""
    settings: dict[str, Any] = {"currency": currency, "month": month, "recent_limit": recent_limit}
    active: str | None = "dashboard"

    while active is not None:
        next_tab = HANDLERS[active](store, settings)
        # A handler that navigates elsewhere skips the tab prompt
        active = next_tab if next_tab != active else prompt_tab(active)

    console.print("[dim]Session ended. Changes are not saved.[/dim]")
