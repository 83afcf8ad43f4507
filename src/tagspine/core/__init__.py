"""tag-spine core -- errors, hashing, logging, settings and data access.

Architecture::

    errors.py       Structured error hierarchy (TagSpineError, NotFoundError)
    hashing.py      TagHasher: fixed-algorithm digests
    logging.py      structlog configuration
    settings.py     pydantic-settings TagSpineSettings
    protocols.py    Connection, VersionProvider
    dialect.py      SQL placeholder styles
    repository.py   BaseRepository read helpers
    orm/            SQLAlchemy tables, engine and session bridge

The ORM layer is not imported here so that ``tagspine.core`` stays usable
without touching SQLAlchemy.
"""

from tagspine.core.errors import (
    ConfigError,
    DatabaseError,
    ErrorCategory,
    ErrorContext,
    InvalidConfigError,
    NonUniqueResultError,
    NotFoundError,
    ResourceKind,
    TagSpineError,
)
from tagspine.core.hashing import TagHasher, generate_hash
from tagspine.core.protocols import Connection, VersionProvider

__all__ = [
    "ConfigError",
    "Connection",
    "DatabaseError",
    "ErrorCategory",
    "ErrorContext",
    "InvalidConfigError",
    "NonUniqueResultError",
    "NotFoundError",
    "ResourceKind",
    "TagHasher",
    "TagSpineError",
    "VersionProvider",
    "generate_hash",
]
