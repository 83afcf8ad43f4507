"""
Canonical protocol definitions for tag-spine.

Every module that needs a Connection or a VersionProvider imports it from
here.

Architecture:
    ::

        protocols.py
        ├── Connection       — sync DB-API style connection (sqlite3, bridges)
        └── VersionProvider  — read-only repository of version counters

    Consumers:
        repository.py, etag/resolver.py, etag/service.py, etag/providers/

Guardrails:
    ❌ DON'T: Reach for a global session inside resolvers
    ✅ DO: Pass a VersionProvider explicitly to every resolver call

    ❌ DON'T: Add write methods to VersionProvider
    ✅ DO: Keep mutation in the data layer that owns the counters
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tagspine.etag.models import DocumentRecord, GlossaryTermIdentity, IterationRef


@runtime_checkable
class Connection(Protocol):
    """
    Minimal SYNCHRONOUS connection interface for database reads.

    ``sqlite3.Connection`` and :class:`~tagspine.core.orm.session.SAConnectionBridge`
    both satisfy it.

    Example::

        cursor = conn.execute("SELECT version_num FROM projects WHERE slug = ?", ("iok",))
        cursor.fetchone()   # (3,)
    """

    def execute(self, sql: str, params: tuple = ()) -> Any:
        """Execute SQL statement with optional parameters. SYNC."""
        ...

    def commit(self) -> None:
        """Commit transaction. SYNC."""
        ...

    def rollback(self) -> None:
        """Rollback transaction. SYNC."""
        ...


@runtime_checkable
class VersionProvider(Protocol):
    """
    Read-only lookups of version counters.

    Implemented by the data layer that owns the entities. Every ``find_*``
    returns ``None`` on a miss; the resolver turns that into
    :class:`~tagspine.core.errors.NotFoundError`. Implementations are
    responsible for reading each counter atomically.

    Implementations:
        - :class:`~tagspine.etag.providers.sql.SqlVersionProvider`
        - :class:`~tagspine.etag.providers.memory.InMemoryVersionProvider`
    """

    def find_project_version(self, slug: str) -> int | None:
        """Version counter of the project with *slug*."""
        ...

    def list_iteration_versions(self, project_slug: str) -> Sequence[int]:
        """Counters of every iteration of a project, in a stable order.

        Empty when the project has no iterations (or does not exist).
        """
        ...

    def find_iteration_version(self, project_slug: str, iteration_slug: str) -> int | None:
        """Version counter of one iteration of a project."""
        ...

    def find_document(self, iteration: IterationRef, document_id: str) -> DocumentRecord | None:
        """Revision and extension counters of a document within an iteration."""
        ...

    def find_glossary_entry_version(self, entry_id: int) -> int | None:
        """Identity version of a glossary entry."""
        ...

    def find_glossary_term_identity(self, locale: str) -> GlossaryTermIdentity | None:
        """(entry id, locale id) of the single glossary term for *locale*."""
        ...


__all__ = [
    "Connection",
    "VersionProvider",
]
