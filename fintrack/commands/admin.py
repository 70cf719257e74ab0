"""Admin commands for initialising and editing configuration."""

import sys

from rich.console import Console
from rich.markup import escape

from fintrack.config import create_default_config, get_config_path, load_config_or_default, update_config
from fintrack.dates import validate_month

console = Console()


def init_command(force: bool = False) -> None:
    """Create the default configuration file."""
    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'fintrack init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
    except OSError as e:
        console.print(f"[red]Filesystem error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Config file created (permissions: 600)")


def config_command(
    business_name: str | None = None,
    currency: str | None = None,
    month: str | None = None,
) -> None:
    """Show configuration, updating any values given."""
    config_path = get_config_path()

    if month:
        try:
            validate_month(month)
        except ValueError:
            console.print(f"[red]Invalid month: {escape(month)}. Use YYYY-MM[/red]")
            sys.exit(1)

    if business_name is None and currency is None and month is None:
        config = load_config_or_default(config_path)
    else:
        try:
            config = update_config(
                {"business_name": business_name, "currency": currency, "month": month},
                config_path,
            )
        except OSError as e:
            console.print(f"[red]Filesystem error: {escape(str(e))}[/red]", style="bold")
            sys.exit(1)
        console.print("[green]✓[/green] Config updated")

    console.print(f"[dim]Config: {config_path}[/dim]\n")
    for key, value in config.items():
        console.print(f"  [bold]{key}[/bold] = {escape(repr(value))}")
