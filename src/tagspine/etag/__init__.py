"""Versioned-resource fingerprints (entity tags).

Usage:
    >>> from tagspine.etag import TagService, InMemoryVersionProvider
    >>> provider = InMemoryVersionProvider()
    >>> provider.add_project("iok", version=1)
    >>> TagService(provider).generate_project_tag("iok")  # doctest: +ELLIPSIS
    '...'
"""

from tagspine.etag.composer import TagComposer
from tagspine.etag.models import (
    DocumentRecord,
    DocumentSignals,
    ExtensionKind,
    Fingerprint,
    GlossarySignals,
    GlossaryTermIdentity,
    IterationRef,
    ProjectSignals,
    ResourceKind,
)
from tagspine.etag.providers import InMemoryVersionProvider, SqlVersionProvider
from tagspine.etag.service import TagService

__all__ = [
    "DocumentRecord",
    "DocumentSignals",
    "ExtensionKind",
    "Fingerprint",
    "GlossarySignals",
    "GlossaryTermIdentity",
    "InMemoryVersionProvider",
    "IterationRef",
    "ProjectSignals",
    "ResourceKind",
    "SqlVersionProvider",
    "TagComposer",
    "TagService",
]
