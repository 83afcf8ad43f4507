"""SQLAlchemy 2.0 ORM layer for the versioned entities tag-spine reads."""

from tagspine.core.orm.base import TagBase
from tagspine.core.orm.session import (
    SAConnectionBridge,
    TagSession,
    create_tag_engine,
    tag_session_factory,
)
from tagspine.core.orm.tables import (
    ALL_TABLES,
    DocumentTable,
    GlossaryEntryTable,
    GlossaryTermTable,
    PoHeaderTable,
    ProjectIterationTable,
    ProjectTable,
)


def create_schema(engine) -> None:
    """Create every tag-spine table on *engine* (idempotent)."""
    TagBase.metadata.create_all(engine)


__all__ = [
    "TagBase",
    "TagSession",
    "SAConnectionBridge",
    "create_tag_engine",
    "tag_session_factory",
    "create_schema",
    "ALL_TABLES",
    "ProjectTable",
    "ProjectIterationTable",
    "DocumentTable",
    "PoHeaderTable",
    "GlossaryEntryTable",
    "GlossaryTermTable",
]
