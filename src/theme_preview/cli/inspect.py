import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from theme_preview.core.errors import ArchiveError
from theme_preview.session import PreviewSession

console = Console()


def inspect(
    archive: Annotated[Path, typer.Argument(help="Path to the theme .zip archive.")],
    files: Annotated[bool, typer.Option("--files", help="Also list every extracted file.")] = False,
) -> None:
    """Extract a theme archive into memory and report what it contains."""
    session = PreviewSession()
    try:
        summary = asyncio.run(session.load_archive(archive))
    except ArchiveError as exc:
        console.print(f"[red]Upload failed:[/red] {exc}")
        raise typer.Exit(1) from exc

    table = Table(title=f"{archive.name}")
    table.add_column("kind")
    table.add_column("count", justify="right")
    for kind, count in summary.model_dump().items():
        table.add_row(kind, str(count))
    console.print(table)

    if files:
        listing = Table(show_header=True)
        listing.add_column("path")
        listing.add_column("kind")
        listing.add_column("size", justify="right")
        for record in sorted(session.vfs.all_files(), key=lambda r: r.path):
            listing.add_row(record.path, record.kind, str(record.size))
        console.print(listing)
