"""
CLI: tag commands — compute the fingerprint of one resource.
"""

from __future__ import annotations

import typer

from tagspine.cli.utils import open_service, output_tag
from tagspine.etag.models import IterationRef

app = typer.Typer(no_args_is_help=True)

DatabaseOption = typer.Option(None, "--database", "-d", help="Database URL (overrides TAGSPINE_DATABASE_URL)")
JsonOption = typer.Option(False, "--json", help="JSON output")


@app.command("project")
def project_tag(
    slug: str = typer.Argument(..., help="Project slug"),
    database: str | None = DatabaseOption,
    json_out: bool = JsonOption,
) -> None:
    """Tag of a project and all its iterations."""
    with open_service(database) as service:
        output_tag(
            lambda: service.generate_project_tag(slug),
            as_json=json_out,
            resource={"kind": "project", "slug": slug},
        )


@app.command("iteration")
def iteration_tag(
    project_slug: str = typer.Argument(..., help="Project slug"),
    iteration_slug: str = typer.Argument(..., help="Iteration slug"),
    database: str | None = DatabaseOption,
    json_out: bool = JsonOption,
) -> None:
    """Tag of one project iteration."""
    with open_service(database) as service:
        output_tag(
            lambda: service.generate_iteration_tag(project_slug, iteration_slug),
            as_json=json_out,
            resource={"kind": "iteration", "project": project_slug, "iteration": iteration_slug},
        )


@app.command("document")
def document_tag(
    project_slug: str = typer.Argument(..., help="Project slug"),
    iteration_slug: str = typer.Argument(..., help="Iteration slug"),
    document_id: str = typer.Argument(..., help="Document id within the iteration"),
    extensions: list[str] = typer.Option([], "--ext", "-e", help="Extension kind to include (repeatable), e.g. gettext"),
    database: str | None = DatabaseOption,
    json_out: bool = JsonOption,
) -> None:
    """Numeric tag of a document, optionally covering extensions."""
    iteration = IterationRef(project_slug, iteration_slug)
    with open_service(database) as service:
        output_tag(
            lambda: service.generate_document_tag(iteration, document_id, set(extensions)),
            as_json=json_out,
            resource={"kind": "document", "iteration": str(iteration), "document": document_id},
        )


@app.command("glossary")
def glossary_tag(
    entry_ids: list[int] = typer.Argument(..., help="Glossary entry ids, in order"),
    database: str | None = DatabaseOption,
    json_out: bool = JsonOption,
) -> None:
    """Tag of an ordered list of glossary entries."""
    with open_service(database) as service:
        output_tag(
            lambda: service.generate_glossary_tag(entry_ids),
            as_json=json_out,
            resource={"kind": "glossary", "entries": entry_ids},
        )


@app.command("glossary-term")
def glossary_term_tag(
    locale: str = typer.Argument(..., help="Locale id, e.g. de"),
    database: str | None = DatabaseOption,
    json_out: bool = JsonOption,
) -> None:
    """Tag of the glossary term for a locale."""
    with open_service(database) as service:
        output_tag(
            lambda: service.generate_glossary_term_tag(locale),
            as_json=json_out,
            resource={"kind": "glossary-term", "locale": locale},
        )
