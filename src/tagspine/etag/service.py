"""
TagService: the operations the HTTP layer calls to get resource tags.

Manifesto:
    Conditional requests need a cheap answer to "has this changed?":
    - **Composite:** A project tag covers every iteration under it
    - **Deterministic:** No writes in between → byte-identical tags
    - **Honest misses:** A missing entity raises NotFoundError, never a tag

    The service is a stateless value object wiring a VersionProvider to a
    TagComposer. It is as shareable as its provider: the in-memory provider
    is thread-safe, while a SqlVersionProvider wraps one session and must be
    built per request (or per thread).

Architecture:
    ::

        caller ──► TagService.generate_*_tag
                      │
                      ├─► resolver.resolve_*(provider, …)   (may raise NotFoundError)
                      │
                      └─► TagComposer.compose_*(signals)    (total)
                              │
                              ▼
                         Fingerprint (str)

Examples:
    >>> from tagspine.etag.providers import InMemoryVersionProvider
    >>> provider = InMemoryVersionProvider()
    >>> provider.add_project("iok", version=3)
    >>> service = TagService(provider)
    >>> service.generate_project_tag("missing")
    Traceback (most recent call last):
    ...
    tagspine.core.errors.NotFoundError: Project 'missing' not found.

    ``service.generate_project_tag("iok")`` returns a 32-character MD5 hex
    digest of ``"3:"``.

Guardrails:
    ❌ DON'T: Compare an incoming tag here
    ✅ DO: Return the fingerprint; the HTTP layer compares it

Tags:
    etag, fingerprint, cache-validation, conditional-request
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from tagspine.core.hashing import TagHasher
from tagspine.core.logging import get_logger
from tagspine.core.protocols import VersionProvider
from tagspine.etag import resolver
from tagspine.etag.composer import TagComposer
from tagspine.etag.models import ExtensionKind, Fingerprint, IterationRef, ResourceKind

logger = get_logger(__name__)


class TagService:
    """Generates fingerprints for projects, iterations, documents and glossaries.

    Parameters:
        provider: Repository capability the resolver reads counters from.
        composer: Tag composer; defaults to one using the default hasher.
    """

    def __init__(self, provider: VersionProvider, composer: TagComposer | None = None) -> None:
        self.provider = provider
        self.composer = composer or TagComposer()

    @classmethod
    def with_algorithm(cls, provider: VersionProvider, algorithm: str) -> TagService:
        """Build a service hashing with *algorithm* (raises InvalidConfigError if unsupported)."""
        return cls(provider, TagComposer(TagHasher(algorithm)))

    def _generated(self, kind: ResourceKind, identifier: object, tag: Fingerprint) -> Fingerprint:
        logger.debug("tag_generated", resource_kind=kind.value, identifier=str(identifier), tag=tag)
        return tag

    def generate_project_tag(self, slug: str) -> Fingerprint:
        """Tag covering the project and every one of its iterations."""
        signals = resolver.resolve_project(self.provider, slug)
        return self._generated(ResourceKind.PROJECT, slug, self.composer.compose_project(signals))

    def generate_iteration_tag(self, project_slug: str, iteration_slug: str) -> Fingerprint:
        version = resolver.resolve_iteration(self.provider, project_slug, iteration_slug)
        return self._generated(
            ResourceKind.ITERATION,
            IterationRef(project_slug, iteration_slug),
            self.composer.compose_iteration(version),
        )

    def generate_document_tag(
        self,
        iteration: IterationRef,
        document_id: str,
        extension_kinds: Iterable[str | ExtensionKind] = (),
    ) -> Fingerprint:
        """Numeric tag from the document revision and requested extension counters."""
        signals = resolver.resolve_document(self.provider, iteration, document_id, extension_kinds)
        return self._generated(ResourceKind.DOCUMENT, document_id, self.composer.compose_document(signals))

    def generate_glossary_tag(self, entry_ids: Sequence[int]) -> Fingerprint:
        """Tag over the entries' versions in the given order (order matters)."""
        signals = resolver.resolve_glossary_entries(self.provider, entry_ids)
        return self._generated(
            ResourceKind.GLOSSARY_ENTRY, list(entry_ids), self.composer.compose_glossary(signals)
        )

    def generate_glossary_term_tag(self, locale: str) -> Fingerprint:
        identity = resolver.resolve_glossary_term(self.provider, locale)
        return self._generated(
            ResourceKind.GLOSSARY_TERM, locale, self.composer.compose_glossary_term(identity)
        )


__all__ = [
    "TagService",
]
