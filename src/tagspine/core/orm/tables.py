"""ORM tables for the versioned entities tags are computed from.

The data layer owns these rows and bumps ``version_num`` / ``revision`` on
every observable mutation; tag-spine only reads them. The models exist so
schemas can be created for tests and local databases (``tagspine db init``).

Tables
------
* ``projects``            — slug, version_num
* ``project_iterations``  — project_id, slug, version_num
* ``documents``           — iteration_id, doc_id, revision
* ``po_headers``          — document_id, version_num (gettext header extension)
* ``glossary_entries``    — version_num
* ``glossary_terms``      — entry_id, locale_id
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tagspine.core.orm.base import TagBase


class ProjectTable(TagBase):
    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    slug: Mapped[str] = mapped_column(unique=True, nullable=False)
    version_num: Mapped[int] = mapped_column(nullable=False, default=0)

    iterations: Mapped[list[ProjectIterationTable]] = relationship(
        back_populates="project", order_by="ProjectIterationTable.id"
    )


class ProjectIterationTable(TagBase):
    __tablename__ = "project_iterations"
    __table_args__ = (UniqueConstraint("project_id", "slug"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(ForeignKey("projects.id"), nullable=False)
    slug: Mapped[str] = mapped_column(nullable=False)
    version_num: Mapped[int] = mapped_column(nullable=False, default=0)

    project: Mapped[ProjectTable] = relationship(back_populates="iterations")


class DocumentTable(TagBase):
    __tablename__ = "documents"
    __table_args__ = (UniqueConstraint("iteration_id", "doc_id"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    iteration_id: Mapped[int] = mapped_column(
        ForeignKey("project_iterations.id"), nullable=False
    )
    doc_id: Mapped[str] = mapped_column(nullable=False)
    revision: Mapped[int] = mapped_column(nullable=False, default=1)

    po_header: Mapped[Optional[PoHeaderTable]] = relationship(back_populates="document")


class PoHeaderTable(TagBase):
    """Gettext (PO) header metadata attached to a document."""

    __tablename__ = "po_headers"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    document_id: Mapped[int] = mapped_column(
        ForeignKey("documents.id"), unique=True, nullable=False
    )
    version_num: Mapped[int] = mapped_column(nullable=False, default=0)

    document: Mapped[DocumentTable] = relationship(back_populates="po_header")


class GlossaryEntryTable(TagBase):
    __tablename__ = "glossary_entries"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    version_num: Mapped[int] = mapped_column(nullable=False, default=0)


class GlossaryTermTable(TagBase):
    __tablename__ = "glossary_terms"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    entry_id: Mapped[int] = mapped_column(ForeignKey("glossary_entries.id"), nullable=False)
    locale_id: Mapped[str] = mapped_column(nullable=False)


ALL_TABLES = [
    ProjectTable,
    ProjectIterationTable,
    DocumentTable,
    PoHeaderTable,
    GlossaryEntryTable,
    GlossaryTermTable,
]
