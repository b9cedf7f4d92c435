"""Asset commands."""

import mimetypes
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import Config
from ..errors import NotFound
from ..models import BytesUpload
from ..store import open_store

console = Console()
assets_app = typer.Typer(help="Store and fetch assets")


@assets_app.command("put")
def assets_put(
    asset_id: str = typer.Argument(..., help="Asset key, e.g. images/logo.png"),
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="File to upload"),
) -> None:
    """Store a local file as an asset."""
    mime_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    upload = BytesUpload(data=path.read_bytes(), content_type=mime_type)

    try:
        with open_store(Config()) as store:
            store.store_asset(asset_id, upload)
    except Exception as e:
        console.print(f"[red]❌ Failed to store asset: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✅ Stored {asset_id} ({upload.size} bytes, {mime_type})[/green]")


@assets_app.command("get")
def assets_get(
    asset_id: str = typer.Argument(..., help="Asset key"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Destination file"),
) -> None:
    """Fetch an asset and write it to disk."""
    try:
        with open_store(Config()) as store:
            asset = store.get_asset(asset_id)
    except NotFound:
        console.print(f"[red]Asset '{asset_id}' not found.[/red]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]❌ Failed to fetch asset: {e}[/red]")
        raise typer.Exit(1)

    destination = output or Path(asset.filename)
    destination.write_bytes(asset.data.data)
    console.print(f"Wrote {destination} ({asset.size} bytes, {asset.mime_type})")
