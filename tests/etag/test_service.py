"""
Tests for TagService.

Every test taking the ``provider`` fixture runs against both the in-memory
and the SQL provider, seeded with the same data (see conftest).
"""

import hashlib

import pytest
from sqlalchemy import select, update

from tagspine.core.errors import InvalidConfigError, NotFoundError, ResourceKind
from tagspine.core.orm import DocumentTable, ProjectIterationTable, ProjectTable
from tagspine.etag.models import ExtensionKind, IterationRef
from tagspine.etag.service import TagService

IOK_1_0 = IterationRef("iok", "1.0")


def md5(text: str) -> str:
    return hashlib.md5(text.encode("utf-8")).hexdigest()


@pytest.fixture
def service(provider) -> TagService:
    return TagService(provider)


@pytest.fixture
def memory_service(memory_provider) -> TagService:
    return TagService(memory_provider)


# =============================================================================
# Known values
# =============================================================================


class TestKnownTags:
    def test_project_tag(self, service):
        assert service.generate_project_tag("iok") == md5("3:1:4")

    def test_project_without_iterations(self, service):
        assert service.generate_project_tag("empty") == md5("7:")

    def test_iteration_tag(self, service):
        assert service.generate_iteration_tag("iok", "2.0") == md5("4")

    def test_document_without_extensions(self, service):
        assert service.generate_document_tag(IOK_1_0, "hello.po") == "1116"

    def test_document_with_po_header(self, service):
        assert service.generate_document_tag(IOK_1_0, "hello.po", {"gettext"}) == "1118"

    def test_document_missing_extension_counts_zero(self, service):
        assert service.generate_document_tag(IOK_1_0, "plain.txt", {"gettext"}) == "1116"

    @pytest.mark.parametrize("kinds", ["gettext", ExtensionKind.PO_HEADER, ["gettext"]])
    def test_document_extension_argument_forms(self, service, kinds):
        assert service.generate_document_tag(IOK_1_0, "hello.po", kinds) == "1118"

    def test_unknown_extension_kind_ignored(self, service):
        assert service.generate_document_tag(IOK_1_0, "hello.po", {"comment"}) == "1116"

    def test_glossary_tag(self, service):
        assert service.generate_glossary_tag([3, 7]) == md5("5:9")

    def test_glossary_term_tag(self, service):
        assert service.generate_glossary_term_tag("de") == md5("3:de")


# =============================================================================
# Determinism and ordering
# =============================================================================


class TestDeterminism:
    def test_repeated_calls_identical(self, service):
        first = service.generate_project_tag("iok")
        assert all(service.generate_project_tag("iok") == first for _ in range(5))

    def test_new_service_same_tags(self, provider):
        assert TagService(provider).generate_glossary_tag([1, 2]) == TagService(
            provider
        ).generate_glossary_tag([1, 2])

    def test_glossary_order_matters(self, service):
        assert service.generate_glossary_tag([3, 7]) != service.generate_glossary_tag([7, 3])

    def test_glossary_duplicates_kept(self, service):
        assert service.generate_glossary_tag([3, 3]) == md5("5:5")


# =============================================================================
# Change sensitivity
# =============================================================================


class TestSensitivity:
    def test_iteration_bump_changes_project_tag(self, memory_provider, memory_service):
        before = memory_service.generate_project_tag("iok")
        memory_provider.bump_iteration("iok", "2.0")
        assert memory_service.generate_project_tag("iok") != before

    def test_project_bump_changes_project_tag(self, memory_provider, memory_service):
        before = memory_service.generate_project_tag("iok")
        memory_provider.bump_project("iok")
        assert memory_service.generate_project_tag("iok") != before

    def test_new_iteration_changes_project_tag(self, memory_provider, memory_service):
        before = memory_service.generate_project_tag("empty")
        memory_provider.add_iteration("empty", "1.0", version=0)
        assert memory_service.generate_project_tag("empty") != before

    def test_iteration_bump_changes_iteration_tag(self, memory_provider, memory_service):
        before = memory_service.generate_iteration_tag("iok", "1.0")
        memory_provider.bump_iteration("iok", "1.0")
        assert memory_service.generate_iteration_tag("iok", "1.0") != before

    def test_document_revision_bump(self, memory_provider, memory_service):
        before = memory_service.generate_document_tag(IOK_1_0, "hello.po")
        memory_provider.bump_document(IOK_1_0, "hello.po")
        assert memory_service.generate_document_tag(IOK_1_0, "hello.po") == "1147"
        assert before == "1116"

    def test_extension_bump_only_matters_when_requested(self, memory_provider, memory_service):
        plain_before = memory_service.generate_document_tag(IOK_1_0, "hello.po")
        with_ext_before = memory_service.generate_document_tag(IOK_1_0, "hello.po", {"gettext"})
        memory_provider.bump_extension(IOK_1_0, "hello.po", ExtensionKind.PO_HEADER)
        assert memory_service.generate_document_tag(IOK_1_0, "hello.po") == plain_before
        assert memory_service.generate_document_tag(IOK_1_0, "hello.po", {"gettext"}) != with_ext_before

    def test_glossary_entry_bump(self, memory_provider, memory_service):
        before = memory_service.generate_glossary_tag([1, 3])
        memory_provider.bump_glossary_entry(3)
        assert memory_service.generate_glossary_tag([1, 3]) == md5("1:6")
        assert before == md5("1:5")

    def test_unrelated_project_changes_leave_tag_alone(self, memory_provider, memory_service):
        before = memory_service.generate_project_tag("iok")
        memory_provider.bump_project("empty")
        memory_provider.add_iteration("empty", "1.0", version=2)
        memory_provider.bump_iteration("empty", "1.0")
        assert memory_service.generate_project_tag("iok") == before

    def test_sql_unrelated_project_changes_leave_tag_alone(self, session, sql_provider):
        service = TagService(sql_provider)
        before = service.generate_project_tag("iok")
        session.execute(
            update(ProjectTable)
            .where(ProjectTable.slug == "empty")
            .values(version_num=ProjectTable.version_num + 1)
        )
        empty_id = session.scalar(select(ProjectTable.id).where(ProjectTable.slug == "empty"))
        session.add(ProjectIterationTable(project_id=empty_id, slug="1.0", version_num=2))
        session.commit()
        assert service.generate_project_tag("iok") == before
        assert service.generate_project_tag("empty") == md5("8:2")

    def test_sql_iteration_update_changes_project_tag(self, session, sql_provider):
        service = TagService(sql_provider)
        before = service.generate_project_tag("iok")
        session.execute(
            update(ProjectIterationTable)
            .where(ProjectIterationTable.slug == "2.0")
            .values(version_num=ProjectIterationTable.version_num + 1)
        )
        session.commit()
        assert service.generate_project_tag("iok") == md5("3:1:5")
        assert before != service.generate_project_tag("iok")

    def test_sql_document_update_changes_tag(self, session, sql_provider):
        service = TagService(sql_provider)
        session.execute(
            update(DocumentTable).where(DocumentTable.doc_id == "plain.txt").values(revision=6)
        )
        session.commit()
        assert service.generate_document_tag(IOK_1_0, "plain.txt") == "1147"


# =============================================================================
# Missing resources
# =============================================================================


class TestNotFound:
    def test_missing_project(self, service):
        with pytest.raises(NotFoundError) as exc_info:
            service.generate_project_tag("nope")
        assert exc_info.value.resource_kind == ResourceKind.PROJECT
        assert str(exc_info.value) == "Project 'nope' not found."

    def test_missing_iteration(self, service):
        with pytest.raises(NotFoundError) as exc_info:
            service.generate_iteration_tag("iok", "9.9")
        assert exc_info.value.resource_kind == ResourceKind.ITERATION

    def test_missing_document(self, service):
        with pytest.raises(NotFoundError) as exc_info:
            service.generate_document_tag(IOK_1_0, "missing.po", {"gettext"})
        assert exc_info.value.resource_kind == ResourceKind.DOCUMENT

    def test_document_of_missing_iteration(self, service):
        with pytest.raises(NotFoundError):
            service.generate_document_tag(IterationRef("nope", "1.0"), "hello.po")

    def test_glossary_names_first_missing_id(self, service):
        with pytest.raises(NotFoundError) as exc_info:
            service.generate_glossary_tag([1, 999, 2])
        assert exc_info.value.identifier == 999
        assert "999" in str(exc_info.value)

    def test_missing_glossary_term(self, service):
        with pytest.raises(NotFoundError) as exc_info:
            service.generate_glossary_term_tag("fr")
        assert exc_info.value.resource_kind == ResourceKind.GLOSSARY_TERM

    def test_missing_is_not_a_tag(self, service):
        """A miss never collapses into the tag of an empty resource."""
        with pytest.raises(NotFoundError):
            service.generate_project_tag("")


# =============================================================================
# Hash algorithm
# =============================================================================


class TestWithAlgorithm:
    def test_sha256(self, provider):
        service = TagService.with_algorithm(provider, "sha256")
        assert service.generate_iteration_tag("iok", "1.0") == hashlib.sha256(b"1").hexdigest()

    def test_algorithm_name_case_insensitive(self, provider):
        service = TagService.with_algorithm(provider, "SHA1")
        assert len(service.generate_project_tag("iok")) == 40

    def test_unsupported_algorithm_rejected_at_construction(self, provider):
        with pytest.raises(InvalidConfigError):
            TagService.with_algorithm(provider, "not-a-hash")

    def test_document_tags_unaffected(self, provider):
        service = TagService.with_algorithm(provider, "sha512")
        assert service.generate_document_tag(IOK_1_0, "hello.po", {"gettext"}) == "1118"
