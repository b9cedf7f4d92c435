"""Init command implementation."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import Config, ConfigModel, ShortcutConfig, save_config, save_shortcuts
from ..config.loader import default_config_path
from ..db import init_database, validate_connection

console = Console()


def create_default_shortcuts() -> List[ShortcutConfig]:
    """Create default search shortcuts."""
    return [
        ShortcutConfig(name="Blog", url="/blog"),
        ShortcutConfig(name="About", url="/about"),
        ShortcutConfig(name="Imprint", url="/imprint"),
    ]


def init_command(
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        "-c",
        help="Configuration directory (default: next to CONTENTSTORE_CONFIG)",
    ),
    db_host: str = typer.Option("localhost", "--db-host", help="Postgres host"),
    db_port: int = typer.Option(5432, "--db-port", help="Postgres port"),
    db_name: str = typer.Option("contentstore", "--db-name", help="Database name"),
    db_user: str = typer.Option("contentstore", "--db-user", help="Database user"),
    seed_shortcuts: bool = typer.Option(
        True,
        "--seed-shortcuts/--no-seed-shortcuts",
        help="Seed default search shortcuts",
    ),
    skip_db: bool = typer.Option(
        False,
        "--skip-db",
        help="Only write configuration files",
    ),
) -> None:
    """Initialize content store configuration and database."""
    console.print(Panel.fit("Content Store - Initialization", style="bold blue"))

    if config_dir is None:
        config_dir = default_config_path().parent

    # Create configuration directory
    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = config_dir / "config.yaml"
    shortcuts_path = config_dir / "shortcuts.yaml"

    # Create default configuration
    config = ConfigModel(
        postgres={
            "host": db_host,
            "port": db_port,
            "database": db_name,
            "user": db_user,
            "password_env": "CONTENTSTORE_DB_PASSWORD",
        },
    )

    save_config(config, config_path)
    console.print(f"✅ Created config: {config_path}")

    if seed_shortcuts:
        shortcuts = create_default_shortcuts()
        save_shortcuts(shortcuts, shortcuts_path)
        console.print(f"✅ Created shortcuts: {shortcuts_path} (seeded with {len(shortcuts)} entries)")
    else:
        save_shortcuts([], shortcuts_path)
        console.print(f"✅ Created shortcuts: {shortcuts_path} (empty)")

    if skip_db:
        return

    # Validate database connection
    console.print("\n[bold]Testing database connection...[/bold]")
    db_config = Config(config_path).get_db_config()

    if not validate_connection(db_config):
        console.print(
            "[red]❌ Database connection failed![/red]\n"
            "Please ensure Postgres is running and credentials are correct.\n"
            "Set the password via environment variable: "
            "[bold]export CONTENTSTORE_DB_PASSWORD=your_password[/bold]"
        )
        raise typer.Exit(1)

    console.print("✅ Database connection successful")

    console.print("\n[bold]Initializing database schema...[/bold]")
    try:
        init_database(db_config)
        console.print("✅ Database schema initialized")
    except Exception as e:
        console.print(f"[red]❌ Failed to initialize database: {e}[/red]")
        raise typer.Exit(1)

    console.print(
        Panel(
            f"[green]✅ Content store initialized successfully![/green]\n\n"
            f"Configuration: {config_path}\n"
            f"Shortcuts: {shortcuts_path}\n\n"
            f"Next steps:\n"
            f"1. Set database password: [bold]export CONTENTSTORE_DB_PASSWORD=your_password[/bold]\n"
            f"2. Set admin password: [bold]export CONTENTSTORE_ADMIN_PASSWORD=your_password[/bold]",
            style="green",
        )
    )
