"""
Structured error types for tag-spine.

Provides a small hierarchy of typed errors with metadata for error
categorization, logging and translation into protocol responses by the
caller.

Instead of generic exceptions that lose context, TagSpineError and its
subclasses carry:
- **Category:** What kind of error (not found, config, database, ...)
- **Context:** Structured metadata (resource kind, identifier, custom fields)
- **Cause:** Chained underlying exception for root cause analysis

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                      TagSpineError                           │
        │               (category, context, cause)                     │
        ├─────────────────────────────────────────────────────────────┤
        │                                                              │
        │  NotFoundError      ConfigError          DatabaseError       │
        │  (NOT_FOUND)        (CONFIG)             (DATABASE)          │
        │                          │                    │              │
        │                     InvalidConfig       NonUniqueResult      │
        └─────────────────────────────────────────────────────────────┘

Examples:
    A lookup miss names what was looked up:

    >>> error = NotFoundError(ResourceKind.PROJECT, "does-not-exist")
    >>> str(error)
    "Project 'does-not-exist' not found."
    >>> error.identifier
    'does-not-exist'

    Adding context fluently:

    >>> error = TagSpineError("Lookup failed").with_context(provider="sql")
    >>> error.context.metadata["provider"]
    'sql'

Guardrails:
    ❌ DON'T: Return an empty tag when an entity is missing
    ✅ DO: Raise NotFoundError and let the caller translate it

    ❌ DON'T: Treat an unsupported hash algorithm as a per-request error
    ✅ DO: Raise InvalidConfigError while wiring the service at startup
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Standard error categories for classification and routing.

    Attributes:
        NOT_FOUND: A requested entity does not resolve
        CONFIG: Missing config, invalid settings (never retryable)
        DATABASE: Query or result-shape errors from the repository
        INTERNAL: Bugs, unexpected state
        UNKNOWN: Uncategorized errors
    """

    NOT_FOUND = "NOT_FOUND"
    CONFIG = "CONFIG"
    DATABASE = "DATABASE"
    INTERNAL = "INTERNAL"
    UNKNOWN = "UNKNOWN"


class ResourceKind(str, Enum):
    """Kinds of resources a tag can be generated for."""

    PROJECT = "PROJECT"
    ITERATION = "ITERATION"
    DOCUMENT = "DOCUMENT"
    GLOSSARY_ENTRY = "GLOSSARY_ENTRY"
    GLOSSARY_TERM = "GLOSSARY_TERM"

    @property
    def label(self) -> str:
        return _RESOURCE_LABELS[self]


_RESOURCE_LABELS = {
    ResourceKind.PROJECT: "Project",
    ResourceKind.ITERATION: "Project Iteration",
    ResourceKind.DOCUMENT: "Document",
    ResourceKind.GLOSSARY_ENTRY: "GlossaryEntry",
    ResourceKind.GLOSSARY_TERM: "GlossaryTerm",
}


@dataclass
class ErrorContext:
    """
    Structured metadata context for errors.

    Typed fields for the metadata every tag error shares; anything else goes
    into ``metadata``. ``to_dict()`` serializes non-None fields for logging.

    Attributes:
        resource_kind: Kind of resource being tagged
        identifier: Identifier that was being resolved
        operation: Name of the tag operation (e.g. ``generate_project_tag``)
        metadata: Additional key-value pairs
    """

    resource_kind: str | None = None
    identifier: str | None = None
    operation: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["resource_kind", "identifier", "operation"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class TagSpineError(Exception):
    """
    Base exception for all tag-spine errors.

    Subclasses set ``default_category`` to classify themselves.

    Examples:
        >>> error = TagSpineError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.to_dict()["error_type"]
        'TagSpineError'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> TagSpineError:
        """
        Add context to this error (fluent API).

        Usage:
            raise TagSpineError("Failed").with_context(operation="generate_project_tag")
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# LOOKUP ERRORS
# =============================================================================


class NotFoundError(TagSpineError):
    """
    A resource identifier did not resolve to an entity.

    Distinct from "unchanged": a missing entity never yields a tag. Carries
    the resource kind and the identifier that failed so the caller can build
    a protocol-appropriate "resource absent" response.
    """

    default_category = ErrorCategory.NOT_FOUND

    def __init__(self, resource_kind: ResourceKind, identifier: Any, message: str | None = None):
        self.resource_kind = ResourceKind(resource_kind)
        self.identifier = identifier
        super().__init__(
            message or f"{self.resource_kind.label} '{identifier}' not found.",
            context=ErrorContext(resource_kind=self.resource_kind.value, identifier=str(identifier)),
        )


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(TagSpineError):
    """
    Configuration error.

    Never a per-request condition; raised while wiring components at startup.
    """

    default_category = ErrorCategory.CONFIG


class InvalidConfigError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: Any, message: str | None = None):
        self.key = key
        self.value = value
        super().__init__(message or f"Invalid configuration for {key}: {value!r}")


# =============================================================================
# DATABASE ERRORS
# =============================================================================


class DatabaseError(TagSpineError):
    """Database query or result error raised by a version provider."""

    default_category = ErrorCategory.DATABASE


class NonUniqueResultError(DatabaseError):
    """A lookup that must match at most one row matched several."""

    def __init__(self, what: str, count: int):
        self.what = what
        self.count = count
        super().__init__(f"Expected at most one result for {what}, got {count}")


__all__ = [
    "ErrorCategory",
    "ResourceKind",
    "ErrorContext",
    "TagSpineError",
    "NotFoundError",
    "ConfigError",
    "InvalidConfigError",
    "DatabaseError",
    "NonUniqueResultError",
]
