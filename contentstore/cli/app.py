"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .articles import articles_app
from .assets import assets_app
from .init import init_command
from .sessions import sessions_app
from .shortcuts import shortcuts_app

app = typer.Typer(
    name="contentstore",
    help="Content store - articles, pages, counters, sessions and assets",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.add_typer(articles_app, name="articles", help="Query articles")
app.add_typer(assets_app, name="assets", help="Store and fetch assets")
app.add_typer(sessions_app, name="sessions", help="Manage admin sessions")
app.add_typer(shortcuts_app, name="shortcuts", help="Manage search shortcuts")


if __name__ == "__main__":
    app()
