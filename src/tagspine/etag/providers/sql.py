"""SQL-backed VersionProvider.

Reads version counters with plain, dialect-aware SELECTs over the tables in
:mod:`tagspine.core.orm.tables`. Works over a DB-API connection
(``sqlite3``) or a SQLAlchemy session via :meth:`BaseRepository.from_session`.

Iteration counters are returned ordered by iteration ``id`` (creation
order), so project tags do not depend on the database's natural row order.

An instance is bound to one connection or session and keeps the last result
on its bridge, so it is not thread-safe. Build one per request (or per
thread), as ``tagspine.cli.utils.open_service`` does.
"""

from __future__ import annotations

from tagspine.core.errors import NonUniqueResultError
from tagspine.core.repository import BaseRepository
from tagspine.etag.models import (
    DocumentRecord,
    ExtensionKind,
    GlossaryTermIdentity,
    IterationRef,
)


class SqlVersionProvider(BaseRepository):
    """VersionProvider over the tag-spine SQL schema."""

    def find_project_version(self, slug: str) -> int | None:
        return self.query_scalar(
            f"SELECT version_num FROM projects WHERE slug = {self.ph(1)}",
            (slug,),
        )

    def list_iteration_versions(self, project_slug: str) -> list[int]:
        return self.query_column(
            "SELECT i.version_num FROM project_iterations i "
            "JOIN projects p ON p.id = i.project_id "
            f"WHERE p.slug = {self.ph(1)} ORDER BY i.id",
            (project_slug,),
        )

    def find_iteration_version(self, project_slug: str, iteration_slug: str) -> int | None:
        return self.query_scalar(
            "SELECT i.version_num FROM project_iterations i "
            "JOIN projects p ON p.id = i.project_id "
            f"WHERE i.slug = {self.dialect.placeholder(0)} AND p.slug = {self.dialect.placeholder(1)}",
            (iteration_slug, project_slug),
        )

    def find_document(self, iteration: IterationRef, document_id: str) -> DocumentRecord | None:
        row = self.query_one(
            "SELECT d.revision AS revision, h.version_num AS po_header_version "
            "FROM documents d "
            "JOIN project_iterations i ON i.id = d.iteration_id "
            "JOIN projects p ON p.id = i.project_id "
            "LEFT JOIN po_headers h ON h.document_id = d.id "
            f"WHERE d.doc_id = {self.dialect.placeholder(0)} "
            f"AND i.slug = {self.dialect.placeholder(1)} "
            f"AND p.slug = {self.dialect.placeholder(2)}",
            (document_id, iteration.iteration_slug, iteration.project_slug),
        )
        if row is None:
            return None
        extensions = {}
        if row["po_header_version"] is not None:
            extensions[ExtensionKind.PO_HEADER] = row["po_header_version"]
        return DocumentRecord(revision=row["revision"], extensions=extensions)

    def find_glossary_entry_version(self, entry_id: int) -> int | None:
        return self.query_scalar(
            f"SELECT version_num FROM glossary_entries WHERE id = {self.ph(1)}",
            (entry_id,),
        )

    def find_glossary_term_identity(self, locale: str) -> GlossaryTermIdentity | None:
        rows = self.query(
            "SELECT entry_id, locale_id FROM glossary_terms "
            f"WHERE locale_id = {self.ph(1)} ORDER BY id",
            (locale,),
        )
        if len(rows) > 1:
            raise NonUniqueResultError(f"glossary term with locale '{locale}'", len(rows))
        if not rows:
            return None
        return GlossaryTermIdentity(entry_id=rows[0]["entry_id"], locale_id=rows[0]["locale_id"])


__all__ = [
    "SqlVersionProvider",
]
