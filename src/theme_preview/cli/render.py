import asyncio
import json
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console

from theme_preview.core.errors import ArchiveError
from theme_preview.models import RenderRequest
from theme_preview.session import PreviewSession

console = Console(stderr=True)


def _parse_context(raw: str | None) -> dict[str, Any]:
    if raw is None:
        return {}
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Context is not valid JSON: {exc}") from exc
    if not isinstance(value, dict):
        raise typer.BadParameter("Context must be a JSON object.")
    return value


def render(
    archive: Annotated[Path, typer.Argument(help="Path to the theme .zip archive.")],
    template: Annotated[str, typer.Option(help="Template name or path (e.g. index, product.liquid).")] = "index",
    context: Annotated[str | None, typer.Option(help="JSON object merged over the mock storefront data.")] = None,
    output: Annotated[Path | None, typer.Option(help="Write the HTML here instead of stdout.")] = None,
) -> None:
    """Render one template of a theme archive to HTML."""
    request = RenderRequest(template=template, context=_parse_context(context))
    session = PreviewSession()

    async def _run() -> str:
        await session.load_archive(archive)
        outcome = await session.render(request)
        return outcome.html

    try:
        html = asyncio.run(_run())
    except ArchiveError as exc:
        console.print(f"[red]Upload failed:[/red] {exc}")
        raise typer.Exit(1) from exc

    if output is None:
        typer.echo(html)
    else:
        output.write_text(html, encoding="utf-8")
        console.print(f"[green]Rendered[/green] {template} to {output}")
