"""Version Resolver: identifiers → raw version signals.

A thin adapter over a :class:`~tagspine.core.protocols.VersionProvider`.
Every function takes the provider as its first argument; there is no ambient
session. A lookup miss raises :class:`~tagspine.core.errors.NotFoundError`
immediately; nothing is cached or retried.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from tagspine.core.errors import NotFoundError, ResourceKind
from tagspine.core.logging import get_logger
from tagspine.core.protocols import VersionProvider
from tagspine.etag.models import (
    DocumentSignals,
    ExtensionKind,
    GlossarySignals,
    GlossaryTermIdentity,
    IterationRef,
    ProjectSignals,
)

logger = get_logger(__name__)


def _not_found(kind: ResourceKind, identifier: object) -> NotFoundError:
    logger.info("tag_resource_not_found", resource_kind=kind.value, identifier=str(identifier))
    return NotFoundError(kind, identifier)


def resolve_project(provider: VersionProvider, slug: str) -> ProjectSignals:
    """Project counter plus the counters of all its iterations.

    Iteration order is whatever stable order the provider returns
    (ascending internal id for the bundled providers).
    """
    version = provider.find_project_version(slug)
    if version is None:
        raise _not_found(ResourceKind.PROJECT, slug)
    iterations = tuple(provider.list_iteration_versions(slug))
    return ProjectSignals(version=version, iteration_versions=iterations)


def resolve_iteration(provider: VersionProvider, project_slug: str, iteration_slug: str) -> int:
    version = provider.find_iteration_version(project_slug, iteration_slug)
    if version is None:
        raise _not_found(ResourceKind.ITERATION, IterationRef(project_slug, iteration_slug))
    return version


def resolve_document(
    provider: VersionProvider,
    iteration: IterationRef,
    document_id: str,
    extension_kinds: Iterable[str | ExtensionKind] = (),
) -> DocumentSignals:
    """Document revision plus the counter of each requested, recognized extension.

    A requested extension the document does not carry contributes 0;
    unrecognized kinds are ignored. A single kind may be passed bare
    (``"gettext"`` or ``ExtensionKind.PO_HEADER``).
    """
    if isinstance(extension_kinds, str):
        # ExtensionKind is a str too; never iterate one character by character
        extension_kinds = (extension_kinds,)

    record = provider.find_document(iteration, document_id)
    if record is None:
        raise _not_found(ResourceKind.DOCUMENT, document_id)

    requested = {kind for kind in map(ExtensionKind.parse, extension_kinds) if kind is not None}
    extension_versions = {kind: record.extensions.get(kind, 0) for kind in requested}
    return DocumentSignals(revision=record.revision, extension_versions=extension_versions)


def resolve_glossary_entries(provider: VersionProvider, entry_ids: Sequence[int]) -> GlossarySignals:
    """Identity versions of the entries, in caller order.

    Stops at the first id that does not resolve and names it in the error.
    """
    versions: list[int] = []
    for entry_id in entry_ids:
        version = provider.find_glossary_entry_version(entry_id)
        if version is None:
            raise _not_found(ResourceKind.GLOSSARY_ENTRY, entry_id)
        versions.append(version)
    return GlossarySignals(entry_ids=tuple(entry_ids), versions=tuple(versions))


def resolve_glossary_term(provider: VersionProvider, locale: str) -> GlossaryTermIdentity:
    identity = provider.find_glossary_term_identity(locale)
    if identity is None:
        raise _not_found(ResourceKind.GLOSSARY_TERM, locale)
    return identity


__all__ = [
    "resolve_document",
    "resolve_glossary_entries",
    "resolve_glossary_term",
    "resolve_iteration",
    "resolve_project",
]
