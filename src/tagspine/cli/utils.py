"""
CLI utility helpers — service wiring and output formatting.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from tagspine.core.errors import TagSpineError
from tagspine.core.logging import LogContext
from tagspine.core.settings import get_settings
from tagspine.etag.models import Fingerprint
from tagspine.etag.service import TagService

console = Console()
err_console = Console(stderr=True)


# ── Service helper ───────────────────────────────────────────────────────


@contextmanager
def open_service(database: str | None = None) -> Iterator[TagService]:
    """Yield a :class:`TagService` reading from *database* (defaults to settings).

    The session is read-only in practice and closed on exit.
    """
    from tagspine.core.orm import create_tag_engine, tag_session_factory
    from tagspine.etag.providers.sql import SqlVersionProvider

    settings = get_settings()
    engine = create_tag_engine(database or settings.database_url, echo=settings.database_echo)
    try:
        with tag_session_factory(engine)() as session, LogContext(hash_algorithm=settings.hash_algorithm):
            provider = SqlVersionProvider.from_session(session)
            yield TagService.with_algorithm(provider, settings.hash_algorithm)
    finally:
        engine.dispose()


# ── Output helpers ───────────────────────────────────────────────────────


def output_tag(
    compute: Callable[[], Fingerprint],
    *,
    as_json: bool = False,
    resource: dict[str, Any] | None = None,
) -> None:
    """Run *compute* and print the tag, or print the error and exit 1."""
    try:
        tag = compute()
    except TagSpineError as e:
        err_console.print(f"[bold red]Error[/bold red] ({e.category.value}): {escape(e.message)}", highlight=False)
        raise typer.Exit(code=1) from e

    if as_json:
        payload = {**(resource or {}), "tag": tag}
        console.print_json(json.dumps(payload, default=str))
        return
    console.print(tag, highlight=False, soft_wrap=True)
