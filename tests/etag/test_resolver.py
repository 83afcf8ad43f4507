"""Tests for tagspine.etag.resolver against the in-memory provider."""

import pytest

from tagspine.core.errors import NotFoundError, ResourceKind
from tagspine.etag import resolver
from tagspine.etag.models import ExtensionKind, GlossaryTermIdentity, IterationRef

IOK_1_0 = IterationRef("iok", "1.0")


class RecordingProvider:
    """Wraps a provider and records glossary lookups."""

    def __init__(self, inner):
        self._inner = inner
        self.glossary_lookups: list[int] = []

    def __getattr__(self, name):
        return getattr(self._inner, name)

    def find_glossary_entry_version(self, entry_id):
        self.glossary_lookups.append(entry_id)
        return self._inner.find_glossary_entry_version(entry_id)


class TestResolveProject:
    def test_project_and_iterations(self, memory_provider):
        signals = resolver.resolve_project(memory_provider, "iok")
        assert signals.version == 3
        assert signals.iteration_versions == (1, 4)

    def test_project_without_iterations(self, memory_provider):
        signals = resolver.resolve_project(memory_provider, "empty")
        assert signals.version == 7
        assert signals.iteration_versions == ()

    def test_missing_project(self, memory_provider):
        with pytest.raises(NotFoundError) as exc_info:
            resolver.resolve_project(memory_provider, "does-not-exist")
        assert exc_info.value.resource_kind == ResourceKind.PROJECT
        assert exc_info.value.identifier == "does-not-exist"


class TestResolveIteration:
    def test_found(self, memory_provider):
        assert resolver.resolve_iteration(memory_provider, "iok", "2.0") == 4

    def test_iteration_of_other_project(self, memory_provider):
        with pytest.raises(NotFoundError) as exc_info:
            resolver.resolve_iteration(memory_provider, "empty", "1.0")
        assert exc_info.value.resource_kind == ResourceKind.ITERATION
        assert "empty/1.0" in str(exc_info.value)


class TestResolveDocument:
    def test_no_extensions_requested(self, memory_provider):
        signals = resolver.resolve_document(memory_provider, IOK_1_0, "hello.po")
        assert signals.revision == 5
        assert signals.extension_versions == {}

    def test_extension_requested_and_present(self, memory_provider):
        signals = resolver.resolve_document(memory_provider, IOK_1_0, "hello.po", {"gettext"})
        assert signals.extension_versions == {ExtensionKind.PO_HEADER: 2}

    def test_extension_requested_but_absent(self, memory_provider):
        signals = resolver.resolve_document(memory_provider, IOK_1_0, "plain.txt", {"gettext"})
        assert signals.extension_versions == {ExtensionKind.PO_HEADER: 0}

    def test_unrecognized_extension_ignored(self, memory_provider):
        signals = resolver.resolve_document(memory_provider, IOK_1_0, "hello.po", {"comment", "xliff"})
        assert signals.extension_versions == {}

    def test_enum_kinds_accepted(self, memory_provider):
        signals = resolver.resolve_document(
            memory_provider, IOK_1_0, "hello.po", [ExtensionKind.PO_HEADER]
        )
        assert signals.extension_versions == {ExtensionKind.PO_HEADER: 2}

    def test_single_kind_as_bare_string(self, memory_provider):
        signals = resolver.resolve_document(memory_provider, IOK_1_0, "hello.po", "gettext")
        assert signals.extension_versions == {ExtensionKind.PO_HEADER: 2}

    def test_single_kind_as_bare_enum(self, memory_provider):
        signals = resolver.resolve_document(memory_provider, IOK_1_0, "hello.po", ExtensionKind.PO_HEADER)
        assert signals.extension_versions == {ExtensionKind.PO_HEADER: 2}

    def test_bare_unknown_kind_ignored(self, memory_provider):
        signals = resolver.resolve_document(memory_provider, IOK_1_0, "hello.po", "comment")
        assert signals.extension_versions == {}

    def test_document_in_other_iteration(self, memory_provider):
        with pytest.raises(NotFoundError) as exc_info:
            resolver.resolve_document(memory_provider, IterationRef("iok", "2.0"), "hello.po")
        assert exc_info.value.resource_kind == ResourceKind.DOCUMENT
        assert exc_info.value.identifier == "hello.po"


class TestResolveGlossaryEntries:
    def test_versions_in_caller_order(self, memory_provider):
        signals = resolver.resolve_glossary_entries(memory_provider, [7, 3])
        assert signals.entry_ids == (7, 3)
        assert signals.versions == (9, 5)

    def test_names_first_missing_id(self, memory_provider):
        with pytest.raises(NotFoundError) as exc_info:
            resolver.resolve_glossary_entries(memory_provider, [1, 999, 2, 998])
        assert exc_info.value.identifier == 999
        assert exc_info.value.resource_kind == ResourceKind.GLOSSARY_ENTRY

    def test_stops_at_first_missing_id(self, memory_provider):
        recording = RecordingProvider(memory_provider)
        with pytest.raises(NotFoundError):
            resolver.resolve_glossary_entries(recording, [1, 999, 2])
        assert recording.glossary_lookups == [1, 999]

    def test_empty_list(self, memory_provider):
        signals = resolver.resolve_glossary_entries(memory_provider, [])
        assert signals.versions == ()


class TestResolveGlossaryTerm:
    def test_found(self, memory_provider):
        assert resolver.resolve_glossary_term(memory_provider, "de") == GlossaryTermIdentity(3, "de")

    def test_missing_locale(self, memory_provider):
        with pytest.raises(NotFoundError) as exc_info:
            resolver.resolve_glossary_term(memory_provider, "fr")
        assert exc_info.value.resource_kind == ResourceKind.GLOSSARY_TERM
