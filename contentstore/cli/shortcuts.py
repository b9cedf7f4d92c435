"""Shortcut management commands."""

import typer
from rich.console import Console
from rich.table import Table

from ..config import Config, ShortcutConfig, load_shortcuts, save_shortcuts

console = Console()
shortcuts_app = typer.Typer(help="Manage search shortcuts")


@shortcuts_app.command("list")
def shortcuts_list() -> None:
    """List all configured shortcuts."""
    config = Config()

    try:
        shortcuts = load_shortcuts(config.shortcuts_path)
    except FileNotFoundError:
        console.print("[red]Shortcuts file not found. Run 'contentstore init' first.[/red]")
        raise typer.Exit(1)

    if not shortcuts:
        console.print("[yellow]No shortcuts configured.[/yellow]")
        return

    table = Table(title="Search Shortcuts")
    table.add_column("Name", style="cyan")
    table.add_column("URL", style="blue")

    for shortcut in shortcuts:
        table.add_row(shortcut.name, shortcut.url)

    console.print(table)


@shortcuts_app.command("add")
def shortcuts_add(
    name: str = typer.Option(..., "--name", "-n", help="Shortcut name"),
    url: str = typer.Option(..., "--url", "-u", help="Target URL"),
) -> None:
    """Add a new shortcut."""
    config = Config()

    try:
        shortcuts = load_shortcuts(config.shortcuts_path)
    except FileNotFoundError:
        shortcuts = []

    if any(s.name == name for s in shortcuts):
        console.print(f"[red]Shortcut '{name}' already exists.[/red]")
        raise typer.Exit(1)

    shortcuts.append(ShortcutConfig(name=name, url=url))
    save_shortcuts(shortcuts, config.shortcuts_path)

    console.print(f"[green]✅ Added shortcut: {name}[/green]")


@shortcuts_app.command("remove")
def shortcuts_remove(
    name: str = typer.Argument(..., help="Shortcut name to remove"),
) -> None:
    """Remove a shortcut."""
    config = Config()

    try:
        shortcuts = load_shortcuts(config.shortcuts_path)
    except FileNotFoundError:
        console.print("[red]Shortcuts file not found.[/red]")
        raise typer.Exit(1)

    original_count = len(shortcuts)
    shortcuts = [s for s in shortcuts if s.name != name]

    if len(shortcuts) == original_count:
        console.print(f"[red]Shortcut '{name}' not found.[/red]")
        raise typer.Exit(1)

    save_shortcuts(shortcuts, config.shortcuts_path)
    console.print(f"[green]✅ Removed shortcut: {name}[/green]")
