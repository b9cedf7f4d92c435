"""Article query commands."""

import typer
from rich.console import Console
from rich.table import Table

from ..config import Config
from ..models import ADMIN
from ..store import open_store

console = Console()
articles_app = typer.Typer(help="Query articles")


@articles_app.command("list")
def articles_list(
    show_all: bool = typer.Option(
        False, "--all", "-a", help="Include unpublished articles (admin view)"
    ),
) -> None:
    """List articles, newest first."""
    try:
        with open_store(Config()) as store:
            articles = store.get_articles(ADMIN if show_all else None)
    except Exception as e:
        console.print(f"[red]❌ Failed to list articles: {e}[/red]")
        raise typer.Exit(1)

    if not articles:
        console.print("[yellow]No articles found.[/yellow]")
        return

    table = Table(title="Articles")
    table.add_column("Slug", style="cyan")
    table.add_column("Title", style="magenta")
    table.add_column("Published", style="green")
    table.add_column("Modified", style="yellow")

    for article in articles:
        table.add_row(
            article.slug,
            article.title,
            article.published_at.strftime("%Y-%m-%d %H:%M") if article.published_at else "-",
            article.modified_at.strftime("%Y-%m-%d %H:%M") if article.modified_at else "-",
        )

    console.print(table)


@articles_app.command("search")
def articles_search(
    query: str = typer.Argument(..., help="Text to look for in titles and shortcuts"),
) -> None:
    """Search published articles and shortcuts."""
    try:
        with open_store(Config()) as store:
            results = store.search(query)
    except Exception as e:
        console.print(f"[red]❌ Search failed: {e}[/red]")
        raise typer.Exit(1)

    if not results:
        console.print("[yellow]No results.[/yellow]")
        return

    table = Table(title=f"Results for '{query}'")
    table.add_column("Name", style="cyan")
    table.add_column("URL", style="blue")

    for result in results:
        table.add_row(result.name, result.url)

    console.print(table)
