"""SQLAlchemy engine factory, session factory, and Connection bridge.

This module provides:

* ``create_tag_engine``   -- Create a SA engine from a URL.
* ``tag_session_factory`` -- ``sessionmaker`` producing read-friendly sessions.
* ``SAConnectionBridge``  -- Wraps a SA ``Session`` to satisfy the
  ``tagspine.core.protocols.Connection`` protocol, so repositories written
  against raw connections also run over an ORM session.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import create_engine as _sa_create_engine
from sqlalchemy import event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool


def create_tag_engine(
    url: str = "sqlite:///tagspine.db",
    *,
    echo: bool = False,
    **kwargs: Any,
) -> Engine:
    """Create a SQLAlchemy engine with sane defaults.

    Parameters
    ----------
    url:
        Database URL (``sqlite:///…``, ``postgresql://…``, etc.)
    echo:
        If ``True``, log all SQL.
    **kwargs:
        Extra arguments forwarded to ``sqlalchemy.create_engine``.
    """
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        if url in ("sqlite://", "sqlite:///:memory:"):
            # one shared connection, otherwise every checkout sees an empty database
            kwargs.setdefault("poolclass", StaticPool)

        engine = _sa_create_engine(url, echo=echo, **kwargs)

        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_connection: Any, _rec: Any) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return _sa_create_engine(url, echo=echo, **kwargs)


class TagSession(Session):
    """Session with ``expire_on_commit=False``."""

    def __init__(self, bind: Engine | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("expire_on_commit", False)
        super().__init__(bind=bind, **kwargs)


def tag_session_factory(engine: Engine) -> sessionmaker[TagSession]:
    """Return a ``sessionmaker`` bound to *engine* that produces ``TagSession`` instances."""
    return sessionmaker(bind=engine, class_=TagSession)


def _named_params(sql: str) -> str:
    """Rewrite positional ``?`` placeholders as ``:p0, :p1, …`` for ``text()``."""
    rewritten, idx = [], 0
    for ch in sql:
        if ch == "?":
            rewritten.append(f":p{idx}")
            idx += 1
        else:
            rewritten.append(ch)
    return "".join(rewritten)


class SAConnectionBridge:
    """Adapter that makes a SQLAlchemy ``Session`` look like ``tagspine.core.protocols.Connection``.

    Implements: ``execute``, ``fetchone``, ``fetchall``, ``commit``,
    ``rollback`` and a DB-API style ``description``.

    Holds the last result between ``execute`` and ``fetch*``; one bridge per
    session, never shared across threads.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._last_result: Any = None

    def execute(self, sql: str, parameters: Sequence[Any] | None = None) -> SAConnectionBridge:
        if parameters:
            mapping = {f"p{i}": v for i, v in enumerate(parameters)}
            self._last_result = self._session.execute(text(_named_params(sql)), mapping)
        else:
            self._last_result = self._session.execute(text(sql))
        return self

    # --- fetch ---

    def fetchone(self) -> tuple[Any, ...] | None:
        if self._last_result is None:
            return None
        row = self._last_result.fetchone()
        return tuple(row) if row is not None else None

    def fetchall(self) -> list[tuple[Any, ...]]:
        if self._last_result is None:
            return []
        return [tuple(r) for r in self._last_result.fetchall()]

    # --- transaction ---

    def commit(self) -> None:
        self._session.commit()

    def rollback(self) -> None:
        self._session.rollback()

    # --- properties ---

    @property
    def description(self) -> list[tuple[str, ...]] | None:
        """DB-API 2.0 compatible description from the last result."""
        if self._last_result is None:
            return None
        keys = list(self._last_result.keys())
        return [(k, None, None, None, None, None, None) for k in keys]

    @property
    def session(self) -> Session:
        """Access the underlying SA session."""
        return self._session
