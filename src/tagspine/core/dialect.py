"""SQL dialect abstraction for repository queries.

Repositories build SQL with ``Dialect`` placeholder methods instead of
hard-coding a driver's parameter style.

Examples:
    >>> from tagspine.core.dialect import SQLiteDialect
    >>> SQLiteDialect().placeholders(3)
    '?, ?, ?'
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Dialect(Protocol):
    """SQL dialect contract.

    Every method returns a SQL fragment valid for the target database.
    """

    @property
    def name(self) -> str:
        """Human-readable dialect name (e.g. ``'sqlite'``)."""
        ...

    def placeholder(self, index: int) -> str:
        """Single positional placeholder (0-based index)."""
        ...

    def placeholders(self, count: int) -> str:
        """Comma-separated placeholder list."""
        ...


class SQLiteDialect:
    """``?`` placeholders (sqlite3, and the SQLAlchemy session bridge)."""

    @property
    def name(self) -> str:
        return "sqlite"

    def placeholder(self, index: int) -> str:  # noqa: ARG002
        return "?"

    def placeholders(self, count: int) -> str:
        return ", ".join("?" for _ in range(count))


__all__ = [
    "Dialect",
    "SQLiteDialect",
]
