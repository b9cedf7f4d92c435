"""Session maintenance commands."""

import typer
from rich.console import Console

from ..config import Config
from ..store import open_store

console = Console()
sessions_app = typer.Typer(help="Manage admin sessions")


@sessions_app.command("purge")
def sessions_purge() -> None:
    """Delete expired sessions."""
    try:
        with open_store(Config()) as store:
            purged = store.purge_expired_sessions()
    except Exception as e:
        console.print(f"[red]❌ Failed to purge sessions: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✅ Purged {purged} expired sessions[/green]")
