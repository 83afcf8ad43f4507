"""VersionProvider implementations.

Neither provider imports SQLAlchemy at module load; ``SqlVersionProvider``
only needs it when built with ``from_session``.
"""

from tagspine.etag.providers.memory import InMemoryVersionProvider
from tagspine.etag.providers.sql import SqlVersionProvider

__all__ = [
    "InMemoryVersionProvider",
    "SqlVersionProvider",
]
