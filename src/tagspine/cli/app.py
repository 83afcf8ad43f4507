"""
Root Typer application for the tag-spine CLI.
"""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.markup import escape
from typer import Typer

from tagspine.cli.utils import err_console
from tagspine.core.logging import configure_logging
from tagspine.core.settings import LOG_LEVELS, get_settings

app = Typer(
    name="tagspine",
    help="tag-spine — version fingerprints (entity tags) for projects, documents and glossaries.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from tagspine import __version__

        typer.echo(f"tag-spine {__version__}")
        raise typer.Exit()


def _log_level_callback(value: str | None) -> str | None:
    if value is not None and value.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"must be one of {', '.join(LOG_LEVELS)}")
    return value


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Override TAGSPINE_LOG_LEVEL.", callback=_log_level_callback
    ),
) -> None:
    """tag-spine CLI — compute resource tags against a database."""
    try:
        settings = get_settings()
    except ValidationError as e:
        err_console.print(f"[bold red]Invalid configuration[/bold red]: {escape(str(e))}", highlight=False)
        raise typer.Exit(code=1) from e
    configure_logging(
        level=log_level or settings.log_level,
        json_format=settings.json_logs,
        service="tagspine",
    )


# ── Sub-command registration ─────────────────────────────────────────────

from tagspine.cli.db import app as db_app  # noqa: E402
from tagspine.cli.tags import app as tags_app  # noqa: E402

app.add_typer(tags_app, name="tag", help="Compute resource tags.")
app.add_typer(db_app, name="db", help="Database operations.")
