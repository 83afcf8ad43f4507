"""Identifiers and version-signal records for tag computation.

The resolver produces these records from a
:class:`~tagspine.core.protocols.VersionProvider`; the composer turns them
into fingerprints. All records are frozen value objects.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import NewType

from tagspine.core.errors import ResourceKind

Fingerprint = NewType("Fingerprint", str)


class ExtensionKind(str, Enum):
    """Independently versioned payloads a document may carry.

    Values are the extension ids clients send when requesting a document.
    """

    PO_HEADER = "gettext"

    @classmethod
    def parse(cls, value: str | ExtensionKind) -> ExtensionKind | None:
        """Return the kind for *value*, or ``None`` if it is not recognized."""
        try:
            return cls(value)
        except ValueError:
            return None


# Order in which extension counters enter the document accumulator
TAGGED_EXTENSIONS: tuple[ExtensionKind, ...] = (ExtensionKind.PO_HEADER,)


@dataclass(frozen=True, slots=True)
class IterationRef:
    """Identifies a project iteration by its slugs."""

    project_slug: str
    iteration_slug: str

    def __str__(self) -> str:
        return f"{self.project_slug}/{self.iteration_slug}"


@dataclass(frozen=True, slots=True)
class DocumentRecord:
    """What the repository knows about one document."""

    revision: int
    extensions: Mapping[ExtensionKind, int] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class GlossaryTermIdentity:
    """Identity tuple of a glossary term."""

    entry_id: int
    locale_id: str

    def canonical(self) -> str:
        # entry ids are integers, so the first ':' always splits the pair
        return f"{self.entry_id}:{self.locale_id}"


@dataclass(frozen=True, slots=True)
class ProjectSignals:
    version: int
    iteration_versions: tuple[int, ...] = ()


@dataclass(frozen=True, slots=True)
class DocumentSignals:
    """Document revision plus counters of the extensions that were requested.

    Kinds that were not requested are absent from ``extension_versions``.
    """

    revision: int
    extension_versions: Mapping[ExtensionKind, int] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class GlossarySignals:
    entry_ids: tuple[int, ...]
    versions: tuple[int, ...]


__all__ = [
    "DocumentRecord",
    "DocumentSignals",
    "ExtensionKind",
    "Fingerprint",
    "GlossarySignals",
    "GlossaryTermIdentity",
    "IterationRef",
    "ProjectSignals",
    "ResourceKind",
    "TAGGED_EXTENSIONS",
]
