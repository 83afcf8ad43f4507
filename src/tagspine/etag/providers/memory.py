"""In-process VersionProvider.

Holds projects, iterations, documents and glossary rows in dicts guarded by
a lock, so each counter read is atomic with respect to concurrent bumps.
Mutation helpers mimic the data layer: every ``bump_*`` increments the
owning entity's counter by one.

Example:
    provider = InMemoryVersionProvider()
    provider.add_project("iok", version=1)
    provider.add_iteration("iok", "1.0", version=4)
    provider.bump_iteration("iok", "1.0")
    provider.list_iteration_versions("iok")   # [5]
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from tagspine.core.errors import NonUniqueResultError
from tagspine.etag.models import (
    DocumentRecord,
    ExtensionKind,
    GlossaryTermIdentity,
    IterationRef,
)


@dataclass
class _Document:
    revision: int
    extensions: dict[ExtensionKind, int] = field(default_factory=dict)


@dataclass
class _Iteration:
    version: int
    documents: dict[str, _Document] = field(default_factory=dict)


@dataclass
class _Project:
    version: int
    # insertion order is creation order
    iterations: dict[str, _Iteration] = field(default_factory=dict)


class InMemoryVersionProvider:
    """Thread-safe in-memory implementation of the VersionProvider protocol."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._projects: dict[str, _Project] = {}
        self._glossary_entries: dict[int, int] = {}
        self._glossary_terms: list[GlossaryTermIdentity] = []

    # -- Seeding / mutation --------------------------------------------------

    def add_project(self, slug: str, *, version: int = 0) -> None:
        with self._lock:
            self._projects[slug] = _Project(version=version)

    def add_iteration(self, project_slug: str, iteration_slug: str, *, version: int = 0) -> None:
        with self._lock:
            self._projects[project_slug].iterations[iteration_slug] = _Iteration(version=version)

    def add_document(
        self,
        iteration: IterationRef,
        document_id: str,
        *,
        revision: int = 1,
        extensions: dict[ExtensionKind, int] | None = None,
    ) -> None:
        with self._lock:
            self._iteration(iteration).documents[document_id] = _Document(
                revision=revision, extensions=dict(extensions or {})
            )

    def add_glossary_entry(self, entry_id: int, *, version: int = 0) -> None:
        with self._lock:
            self._glossary_entries[entry_id] = version

    def add_glossary_term(self, entry_id: int, locale_id: str) -> None:
        with self._lock:
            self._glossary_terms.append(GlossaryTermIdentity(entry_id, locale_id))

    def bump_project(self, slug: str) -> int:
        with self._lock:
            project = self._projects[slug]
            project.version += 1
            return project.version

    def bump_iteration(self, project_slug: str, iteration_slug: str) -> int:
        with self._lock:
            iteration = self._iteration(IterationRef(project_slug, iteration_slug))
            iteration.version += 1
            return iteration.version

    def bump_document(self, iteration: IterationRef, document_id: str) -> int:
        with self._lock:
            document = self._iteration(iteration).documents[document_id]
            document.revision += 1
            return document.revision

    def bump_extension(self, iteration: IterationRef, document_id: str, kind: ExtensionKind) -> int:
        """Bump (or attach at version 1) an extension of a document."""
        with self._lock:
            document = self._iteration(iteration).documents[document_id]
            document.extensions[kind] = document.extensions.get(kind, 0) + 1
            return document.extensions[kind]

    def bump_glossary_entry(self, entry_id: int) -> int:
        with self._lock:
            self._glossary_entries[entry_id] += 1
            return self._glossary_entries[entry_id]

    def _iteration(self, ref: IterationRef) -> _Iteration:
        return self._projects[ref.project_slug].iterations[ref.iteration_slug]

    # -- VersionProvider -----------------------------------------------------

    def find_project_version(self, slug: str) -> int | None:
        with self._lock:
            project = self._projects.get(slug)
            return project.version if project else None

    def list_iteration_versions(self, project_slug: str) -> list[int]:
        with self._lock:
            project = self._projects.get(project_slug)
            if project is None:
                return []
            return [it.version for it in project.iterations.values()]

    def find_iteration_version(self, project_slug: str, iteration_slug: str) -> int | None:
        with self._lock:
            project = self._projects.get(project_slug)
            if project is None:
                return None
            iteration = project.iterations.get(iteration_slug)
            return iteration.version if iteration else None

    def find_document(self, iteration: IterationRef, document_id: str) -> DocumentRecord | None:
        with self._lock:
            project = self._projects.get(iteration.project_slug)
            it = project.iterations.get(iteration.iteration_slug) if project else None
            document = it.documents.get(document_id) if it else None
            if document is None:
                return None
            return DocumentRecord(revision=document.revision, extensions=dict(document.extensions))

    def find_glossary_entry_version(self, entry_id: int) -> int | None:
        with self._lock:
            return self._glossary_entries.get(entry_id)

    def find_glossary_term_identity(self, locale: str) -> GlossaryTermIdentity | None:
        with self._lock:
            matches = [term for term in self._glossary_terms if term.locale_id == locale]
        if len(matches) > 1:
            raise NonUniqueResultError(f"glossary term with locale '{locale}'", len(matches))
        return matches[0] if matches else None
