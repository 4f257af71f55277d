import logging
from typing import Annotated

import typer

from theme_preview.cli.inspect import inspect
from theme_preview.cli.render import render
from theme_preview.cli.serve import serve
from theme_preview.config import get_log_level

app = typer.Typer(
    name="theme-preview",
    help="Theme Preview CLI: inspect, render and serve Liquid theme archives.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def configure(
    log_level: Annotated[str | None, typer.Option(help="Logging level (DEBUG, INFO, WARNING, ...).")] = None,
) -> None:
    logging.basicConfig(
        level=(log_level or get_log_level()).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


app.command("inspect")(inspect)
app.command("render")(render)
app.command("serve")(serve)


def main() -> None:
    app()
