"""Base repository with dialect-aware, read-only database access.

Provides :class:`BaseRepository` — pairs a
:class:`~tagspine.core.protocols.Connection` with a
:class:`~tagspine.core.dialect.Dialect` so repositories can write portable
SQL without referencing a specific database driver.

Architecture::

    ┌────────────────────────────────────────────────────────────────────┐
    │                       BaseRepository                               │
    │                                                                    │
    │   conn: Connection        ← protocol from tagspine.core.protocols  │
    │   dialect: Dialect        ← from tagspine.core.dialect             │
    │                                                                    │
    │   query(sql, params)        → list[dict]                           │
    │   query_one(sql, params)    → dict | None                          │
    │   query_scalar(sql, params) → Any | None                           │
    │   query_column(sql, params) → list[Any]                            │
    └────────────────────────────────────────────────────────────────────┘

Usage:
    >>> class ProjectRepo(BaseRepository):
    ...     def version_of(self, slug: str):
    ...         return self.query_scalar(
    ...             f"SELECT version_num FROM projects WHERE slug = {self.ph(1)}",
    ...             (slug,),
    ...         )
"""

from __future__ import annotations

from typing import Any

from tagspine.core.dialect import Dialect, SQLiteDialect
from tagspine.core.protocols import Connection


class BaseRepository:
    """Dialect-aware base class for read-only repositories.

    Parameters:
        conn: Any object satisfying the :class:`Connection` protocol.
        dialect: SQL dialect to use.  Defaults to :class:`SQLiteDialect`.
    """

    def __init__(self, conn: Connection, dialect: Dialect | None = None) -> None:
        self.conn = conn
        self.dialect: Dialect = dialect or SQLiteDialect()

    @classmethod
    def from_session(
        cls,
        session: Any,
        dialect: Dialect | None = None,
        **kwargs: Any,
    ) -> BaseRepository:
        """Create a repository backed by a SQLAlchemy ORM session.

        Wraps *session* in :class:`~tagspine.core.orm.session.SAConnectionBridge`
        so the same query helpers work over an ORM session. The bridge
        rewrites ``?`` placeholders, so *dialect* defaults to SQLite style.

        Example::

            with tag_session_factory(engine)() as session:
                provider = SqlVersionProvider.from_session(session)
        """
        from tagspine.core.orm.session import SAConnectionBridge

        bridge = SAConnectionBridge(session)
        return cls(conn=bridge, dialect=dialect, **kwargs)  # type: ignore[arg-type]

    # -- Convenience shortcuts ---------------------------------------------

    def ph(self, count: int) -> str:
        """Shortcut for ``self.dialect.placeholders(count)``.

        Embed directly in f-strings:

            f"SELECT * FROM t WHERE id = {self.ph(1)}"
        """
        return self.dialect.placeholders(count)

    # -- Query helpers -----------------------------------------------------

    def execute(self, sql: str, params: tuple = ()) -> Any:
        """Execute a statement and return the raw cursor/result."""
        return self.conn.execute(sql, params)

    def query(self, sql: str, params: tuple = ()) -> list[dict[str, Any]]:
        """Execute a SELECT and return rows as dicts.

        Column names come from ``cursor.description`` (DB-API 2.0) when
        present; otherwise rows must be mapping-like (``sqlite3.Row``).
        """
        cursor = self.conn.execute(sql, params)
        rows = cursor.fetchall()
        if not rows:
            return []

        description = getattr(cursor, "description", None)
        if description:
            columns = [desc[0] for desc in description]
            return [dict(zip(columns, row, strict=False)) for row in rows]

        return [dict(row) for row in rows]

    def query_one(self, sql: str, params: tuple = ()) -> dict[str, Any] | None:
        """Execute a SELECT and return the first row as a dict (or None)."""
        results = self.query(sql, params)
        return results[0] if results else None

    def query_scalar(self, sql: str, params: tuple = ()) -> Any | None:
        """Execute a SELECT and return the first column of the first row."""
        row = self.conn.execute(sql, params).fetchone()
        if row is None:
            return None
        return row[0]

    def query_column(self, sql: str, params: tuple = ()) -> list[Any]:
        """Execute a SELECT and return the first column of every row."""
        return [row[0] for row in self.conn.execute(sql, params).fetchall()]


__all__ = [
    "BaseRepository",
]
