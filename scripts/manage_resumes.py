#!/usr/bin/env python3
"""
Command-line interface for the saved-resume store.

The store (outs/data/saved_resumes.json by default) holds every resume saved
or exported from the editor. This script lists, searches, shows, deletes and
imports records.

Commands:
    list   - List saved resumes, newest first
    search - Find saved resumes by name or creation date
    show   - Show one saved resume
    delete - Delete a saved resume
    import - Save a resume JSON file as a new record
"""

from pathlib import Path
from typing import Dict, List

import typer
from typing_extensions import Annotated

from resumeai.contexts.templating.exceptions import InvalidResumeDataError
from resumeai.contexts.templating.resume_data_structure import ResumeDocument
from resumeai.contexts.templating.section_builder import build_header
from resumeai.utils.resume_store import ResumeStore
from resumeai.utils.text_processing import truncate_display
from resumeai.utils.timestamp import format_timestamp

app = typer.Typer(
    add_completion=False,
    help="Manage saved resumes (saved_resumes.json)",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _print_records(records: List[Dict]) -> None:
    for record in records:
        created = format_timestamp(record.get("created_at", ""), relative=True)
        typer.echo(
            f"  {record['id']}  {truncate_display(str(record.get('name', '')), 30):<30}  {created}"
        )


@app.command("list")
def list_command():
    """
    List saved resumes, newest first.

    Examples:\n

        $ manage_resumes.py list
    """
    records = ResumeStore().list_records()
    if not records:
        typer.echo("No saved resumes")
        return

    typer.secho(f"\nSaved resumes ({len(records)}):", fg=typer.colors.BLUE, bold=True)
    _print_records(records)
    typer.echo("")


@app.command("search")
def search_command(
    query: Annotated[str, typer.Argument(help="Name fragment or date (e.g., 2026-10)")],
):
    """
    Find saved resumes by name (case-insensitive) or creation date.

    Examples:\n

        $ manage_resumes.py search jane

        $ manage_resumes.py search 2026-10-19
    """
    records = ResumeStore().search(query)
    if not records:
        typer.secho(f"No saved resumes match '{query}'", fg=typer.colors.YELLOW)
        return

    typer.secho(f"\nMatches for '{query}' ({len(records)}):", fg=typer.colors.BLUE, bold=True)
    _print_records(records)
    typer.echo("")


@app.command("show")
def show_command(
    record_id: Annotated[str, typer.Argument(help="Saved record id")],
):
    """
    Show one saved resume.

    Examples:\n

        $ manage_resumes.py show 3f2a9c...
    """
    store = ResumeStore()
    record = store.get(record_id)
    if record is None:
        typer.secho(f"Saved resume '{record_id}' not found", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    document, notice = store.load_document(record)
    header = build_header(document)

    typer.secho(f"\n{record['name']}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"  Id:       {record['id']}")
    typer.echo(f"  Created:  {format_timestamp(record.get('created_at', ''))}")
    typer.echo(f"  Updated:  {format_timestamp(record.get('updated_at', ''))}")
    if notice:
        typer.secho(f"  ⚠ {notice}", fg=typer.colors.YELLOW)
        typer.echo("")
        return

    typer.echo(f"  Name:     {header.name}")
    for contact in header.contacts:
        typer.echo(f"  {contact.kind.capitalize() + ':':<9} {contact.value}")
    typer.echo(
        f"  Entries:  {len(document.education)} education, {len(document.work)} work, "
        f"{len(document.projects)} projects, {len(document.skills)} skills, "
        f"{len(document.languages)} languages"
    )
    typer.echo("")


@app.command("delete")
def delete_command(
    record_id: Annotated[str, typer.Argument(help="Saved record id")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
):
    """
    Delete a saved resume.

    Examples:\n

        $ manage_resumes.py delete 3f2a9c...

        $ manage_resumes.py delete 3f2a9c... --yes
    """
    store = ResumeStore()
    record = store.get(record_id)
    if record is None:
        typer.secho(f"Saved resume '{record_id}' not found", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if not yes:
        typer.confirm(f"Delete '{record['name']}'?", abort=True)

    store.delete(record_id)
    typer.secho(f"✓ Deleted '{record['name']}'", fg=typer.colors.GREEN)


@app.command("import")
def import_command(
    json_file: Annotated[Path, typer.Argument(help="Resume JSON file (saved-resume wire format)")],
    name: Annotated[
        str, typer.Option("--name", "-n", help="Name to save under (default: the resume's name)")
    ] = None,
):
    """
    Save a resume JSON file as a new record.

    Examples:\n

        $ manage_resumes.py import my_resume.json --name "Jane Doe"
    """
    if not json_file.exists():
        typer.secho(f"File not found: {json_file}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    try:
        document = ResumeDocument.from_json(json_file.read_text(encoding="utf-8"))
    except InvalidResumeDataError as e:
        typer.secho(f"✗ {json_file} is not a resume: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    record_name = (name or "").strip() or document.personal.name.strip() or json_file.stem
    record = ResumeStore().create(record_name, document)
    typer.secho(f"✓ Saved '{record_name}' (id {record['id']})", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
