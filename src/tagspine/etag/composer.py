"""
Tag Composer: version signals → fingerprint.

Each resource kind has its own composition rule. The rules are inherited
from tags already held by clients, so they are kept exactly even where they
look inconsistent with one another.

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │ Kind            Canonical form              Output           │
        ├─────────────────────────────────────────────────────────────┤
        │ Project         "<project>:<it1>:<it2>…"    hex digest       │
        │ Iteration       "<iteration>"               hex digest       │
        │ Glossary        "<v1>:<v2>…" (caller order)  hex digest       │
        │ Glossary term   "<entry_id>:<locale_id>"    hex digest       │
        │ Document        acc=1; acc=acc*31+rev;      decimal acc      │
        │                 acc=acc*31+ext (per kind)   (not hashed)     │
        └─────────────────────────────────────────────────────────────┘

Examples:
    >>> from tagspine.etag.models import DocumentSignals, ExtensionKind
    >>> composer = TagComposer()
    >>> composer.compose_document(DocumentSignals(revision=5))
    '1116'
    >>> composer.compose_document(
    ...     DocumentSignals(revision=5, extension_versions={ExtensionKind.PO_HEADER: 2})
    ... )
    '1118'
    >>> composer.join_versions([3, 1, 2])
    '3:1:2'
"""

from __future__ import annotations

from collections.abc import Iterable

from tagspine.core.hashing import TagHasher
from tagspine.etag.models import (
    TAGGED_EXTENSIONS,
    DocumentSignals,
    Fingerprint,
    GlossarySignals,
    GlossaryTermIdentity,
    ProjectSignals,
)

SEPARATOR = ":"
ACCUMULATOR_SEED = 1
ACCUMULATOR_FACTOR = 31


def _to_int32(value: int) -> int:
    """Wrap to a signed 32-bit integer, as the issued document tags did."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def accumulate(acc: int, value: int) -> int:
    """One step of the document accumulator: ``acc * 31 + value`` (int32)."""
    return _to_int32(acc * ACCUMULATOR_FACTOR + value)


class TagComposer:
    """Canonicalizes signals and hashes them with one fixed :class:`TagHasher`.

    Stateless apart from the hasher; share one instance freely.
    """

    def __init__(self, hasher: TagHasher | None = None) -> None:
        self.hasher = hasher or TagHasher()

    @staticmethod
    def join_versions(values: Iterable[int]) -> str:
        return SEPARATOR.join(str(v) for v in values)

    def _digest(self, canonical: str) -> Fingerprint:
        return Fingerprint(self.hasher.hexdigest(canonical))

    def compose_project(self, signals: ProjectSignals) -> Fingerprint:
        canonical = f"{signals.version}{SEPARATOR}{self.join_versions(signals.iteration_versions)}"
        return self._digest(canonical)

    def compose_iteration(self, version: int) -> Fingerprint:
        return self._digest(str(version))

    def compose_document(self, signals: DocumentSignals) -> Fingerprint:
        """Polynomial accumulator over the revision then each extension counter.

        Revision first, extensions second; the result is the decimal
        accumulator itself, not a digest.
        """
        acc = accumulate(ACCUMULATOR_SEED, signals.revision)
        for kind in TAGGED_EXTENSIONS:
            acc = accumulate(acc, signals.extension_versions.get(kind, 0))
        return Fingerprint(str(acc))

    def compose_glossary(self, signals: GlossarySignals) -> Fingerprint:
        return self._digest(self.join_versions(signals.versions))

    def compose_glossary_term(self, identity: GlossaryTermIdentity) -> Fingerprint:
        return self._digest(identity.canonical())


__all__ = [
    "TagComposer",
    "accumulate",
]
