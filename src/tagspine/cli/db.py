"""
CLI: ``tagspine db`` — database management commands.
"""

from __future__ import annotations

import typer

from tagspine.cli.utils import console
from tagspine.core.settings import get_settings

app = typer.Typer(no_args_is_help=True)


@app.command()
def init(
    database: str | None = typer.Option(None, "--database", "-d", help="Database URL"),
) -> None:
    """Create the tables the SQL provider reads (idempotent)."""
    from tagspine.core.orm import create_schema, create_tag_engine

    url = database or get_settings().database_url
    engine = create_tag_engine(url)
    try:
        create_schema(engine)
    finally:
        engine.dispose()
    console.print(f"Schema ready: {url}", highlight=False, soft_wrap=True)
