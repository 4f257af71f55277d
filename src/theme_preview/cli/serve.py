from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

console = Console()


def serve(
    archive: Annotated[Path | None, typer.Argument(help="Theme .zip archive to load at startup.")] = None,
    host: str = "127.0.0.1",
    port: int = 8000,
    watch: Annotated[bool, typer.Option(help="Reload the archive whenever it changes on disk.")] = False,
) -> None:
    """Start the preview server."""
    import uvicorn

    from theme_preview.api.app import create_app

    if watch and archive is None:
        console.print("[red]--watch needs an archive to watch.[/red]")
        raise typer.Exit(1)

    app = create_app(archive=archive, watch=watch)
    console.print(f"[green]Starting preview server on {host}:{port}[/green]")
    console.print(f"  Preview: http://{host}:{port}/preview")
    uvicorn.run(app, host=host, port=port)
