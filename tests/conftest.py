"""
Shared pytest fixtures for tag-spine tests.

This module provides:
- A seeded InMemoryVersionProvider
- An in-memory SQLite database (SQLAlchemy) seeded with the same data
- Settings cache cleanup for test isolation

Seed data (both providers):

    project "iok"       version 3, iterations "1.0" (v1), "2.0" (v4)
    project "empty"     version 7, no iterations
    document "hello.po" in iok/1.0, revision 5, PO header version 2
    document "plain.txt" in iok/1.0, revision 5, no PO header
    glossary entries    1 (v1), 2 (v2), 3 (v5), 7 (v9)
    glossary term       entry 3, locale "de"
"""

import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Ensure tagspine package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tagspine.core.orm import (  # noqa: E402
    DocumentTable,
    GlossaryEntryTable,
    GlossaryTermTable,
    PoHeaderTable,
    ProjectIterationTable,
    ProjectTable,
    create_schema,
    create_tag_engine,
    tag_session_factory,
)
from tagspine.core.settings import clear_settings_cache  # noqa: E402
from tagspine.etag.models import ExtensionKind, IterationRef  # noqa: E402
from tagspine.etag.providers import InMemoryVersionProvider, SqlVersionProvider  # noqa: E402

IOK_1_0 = IterationRef("iok", "1.0")


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings_cache() -> Generator[None, None, None]:
    """Drop cached settings so env changes in one test never leak into another."""
    clear_settings_cache()
    yield
    clear_settings_cache()


# =============================================================================
# Providers
# =============================================================================


@pytest.fixture
def memory_provider() -> InMemoryVersionProvider:
    provider = InMemoryVersionProvider()
    provider.add_project("iok", version=3)
    provider.add_iteration("iok", "1.0", version=1)
    provider.add_iteration("iok", "2.0", version=4)
    provider.add_project("empty", version=7)
    provider.add_document(IOK_1_0, "hello.po", revision=5, extensions={ExtensionKind.PO_HEADER: 2})
    provider.add_document(IOK_1_0, "plain.txt", revision=5)
    for entry_id, version in [(1, 1), (2, 2), (3, 5), (7, 9)]:
        provider.add_glossary_entry(entry_id, version=version)
    provider.add_glossary_term(3, "de")
    return provider


def seed_database(session) -> None:
    """Insert the seed rows described in the module docstring."""
    iok = ProjectTable(slug="iok", version_num=3)
    empty = ProjectTable(slug="empty", version_num=7)
    session.add_all([iok, empty])
    session.flush()

    first = ProjectIterationTable(project_id=iok.id, slug="1.0", version_num=1)
    second = ProjectIterationTable(project_id=iok.id, slug="2.0", version_num=4)
    session.add_all([first, second])
    session.flush()

    hello = DocumentTable(iteration_id=first.id, doc_id="hello.po", revision=5)
    plain = DocumentTable(iteration_id=first.id, doc_id="plain.txt", revision=5)
    session.add_all([hello, plain])
    session.flush()
    session.add(PoHeaderTable(document_id=hello.id, version_num=2))

    for entry_id, version in [(1, 1), (2, 2), (3, 5), (7, 9)]:
        session.add(GlossaryEntryTable(id=entry_id, version_num=version))
    session.flush()
    session.add(GlossaryTermTable(entry_id=3, locale_id="de"))
    session.commit()


@pytest.fixture
def engine():
    engine = create_tag_engine("sqlite://")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with tag_session_factory(engine)() as session:
        seed_database(session)
        yield session


@pytest.fixture
def sql_provider(session) -> SqlVersionProvider:
    return SqlVersionProvider.from_session(session)


@pytest.fixture(params=["memory", "sql"])
def provider(request):
    """Both providers, so every service test runs against each."""
    return request.getfixturevalue(f"{request.param}_provider")


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    """File-backed SQLite URL holding the seed data (for CLI tests)."""
    url = f"sqlite:///{tmp_path / 'tags.db'}"
    engine = create_tag_engine(url)
    create_schema(engine)
    with tag_session_factory(engine)() as session:
        seed_database(session)
    engine.dispose()
    return url
