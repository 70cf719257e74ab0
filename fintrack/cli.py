"""CLI entry point for fintrack."""

import logging
import sys
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from fintrack.commands.admin import config_command, init_command
from fintrack.commands.budget import budget_command
from fintrack.commands.dashboard import dashboard_command
from fintrack.commands.inventory import inventory_command
from fintrack.commands.shell import shell_command
from fintrack.commands.transactions import export_command, list_command
from fintrack.config import config_count, config_flag, load_config_or_default
from fintrack.dates import current_month, validate_month
from fintrack.domain.models import Month
from fintrack.logging_utils import configure_logging
from fintrack.store import LedgerStore, create_store

console = Console()

app = typer.Typer(
    name="fintrack",
    help="Financial Tracker - budgets, transactions and inventory for a small business",
    add_completion=False,
)


def load_session() -> tuple[LedgerStore, dict[str, Any]]:
    """Build a store from the configuration.

    Returns:
        Tuple of (store, config), with config values coerced to their types.
    """
    config = load_config_or_default()
    try:
        config["seed_demo_data"] = config_flag(config, "seed_demo_data")
        config["recent_limit"] = config_count(config, "recent_limit")
    except ValueError as e:
        console.print(f"[red]Invalid config value: {escape(str(e))}[/red]")
        console.print("[yellow]Fix it with 'fintrack init --force' or by editing the config file[/yellow]")
        sys.exit(1)

    store = create_store(seed=config["seed_demo_data"], business_name=str(config["business_name"]))
    return store, config


def resolve_month(month: str | None, config: dict[str, Any]) -> Month:
    """Pick the budget month from the option, the config, or today."""
    raw = month or config.get("month") or current_month()
    try:
        return validate_month(str(raw))
    except ValueError:
        console.print(f"[red]Invalid month: {escape(str(raw))}. Use YYYY-MM[/red]")
        sys.exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log store activity to stderr"),
) -> None:
    """Financial Tracker - budgets, transactions and inventory for a small business."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Create the fintrack configuration file."""
    init_command(force)


@app.command(name="config")
def config(
    business_name: str = typer.Option(None, "--business-name", help="Name shown on the dashboard"),
    currency: str = typer.Option(None, "--currency", help="Currency symbol for amounts"),
    month: str = typer.Option(None, "--month", help="Default budget month (YYYY-MM)"),
) -> None:
    """Show or update your configuration."""
    config_command(business_name, currency, month)


@app.command()
def dashboard() -> None:
    """Show your totals, budget wheel and recent transactions."""
    store, config = load_session()
    dashboard_command(store, config["currency"], config["recent_limit"])


@app.command(name="list")
def list_transactions(
    limit: int = typer.Option(50, help="Maximum transactions to show"),
    all: bool = typer.Option(False, "--all", "-a", help="Show all your transactions"),
) -> None:
    """List your transactions, most recent first."""
    store, config = load_session()
    list_command(store, config["currency"], limit, all)


@app.command()
def budget(
    month: str = typer.Option(None, "--month", help="Month to report on (YYYY-MM)"),
) -> None:
    """Show spending against each budget category for a month."""
    store, config = load_session()
    budget_command(store, resolve_month(month, config), config["currency"])


@app.command()
def inventory() -> None:
    """Show your inventory from purchase to sale."""
    store, config = load_session()
    inventory_command(store, config["currency"])


@app.command()
def export(
    output: str = typer.Argument(..., help="CSV file to write"),
) -> None:
    """Export your transactions to CSV."""
    store, _ = load_session()
    export_command(store, output)


@app.command()
def shell(
    month: str = typer.Option(None, "--month", help="Budget month to start on (YYYY-MM)"),
) -> None:
    """Start an interactive session to add, delete and review records."""
    store, config = load_session()
    shell_command(store, config["currency"], resolve_month(month, config), config["recent_limit"])


if __name__ == "__main__":
    app()
