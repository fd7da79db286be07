#!/usr/bin/env python3
"""
Resume Preview and Export CLI

Previews and exports resumes in any of the ten layouts. A resume is given
either as a JSON file (saved-resume wire format) or as the id of a record in
the saved-resume store.

Commands:
    layouts - List the layout catalog
    preview - Show the preview outline (or write preview HTML) for a resume
    export  - Save the resume, then open its print document in a browser

Examples:\n

    build_resume.py layouts                                   # List layouts

    build_resume.py preview my_resume.json --layout 3         # Outline in the Executive layout

    build_resume.py export my_resume.json --name "Jane Doe"   # Save and print

    build_resume.py export 3f2a9c... --no-open                # Re-export a saved record to a file
"""

from pathlib import Path
from typing import Optional, Tuple

import typer
from typing_extensions import Annotated

from resumeai.contexts.rendering import (
    BrowserPrintBackend,
    ExportFailedError,
    FilePrintBackend,
    export_resume,
)
from resumeai.contexts.rendering.logger import setup_rendering_logger
from resumeai.contexts.templating import (
    ResumeDocument,
    SectionOrder,
    get_layout,
    list_layouts,
    render_preview,
    render_preview_html,
)
from resumeai.contexts.templating.exceptions import InvalidResumeDataError, InvalidSectionOrderError
from resumeai.contexts.templating.logger import setup_templating_logger
from resumeai.utils.logger import session_log_dir
from resumeai.utils.resume_store import ResumeStore

app = typer.Typer(
    help="Preview and export resumes in any layout",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_resume(source: str, store: ResumeStore) -> Tuple[ResumeDocument, Optional[dict]]:
    """
    Load a resume from a JSON file path or a saved record id.

    Returns:
        (document, record) where record is None for files and for records
        whose data could not be loaded, so exporting never overwrites them
    """
    path = Path(source)
    if path.exists():
        try:
            return ResumeDocument.from_json(path.read_text(encoding="utf-8")), None
        except InvalidResumeDataError as e:
            typer.secho(f"✗ {path} is not a resume: {e}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)

    record = store.get(source)
    if record is None:
        typer.secho(f"✗ No file or saved resume matches '{source}'", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    document, notice = store.load_document(record)
    if notice:
        typer.secho(f"⚠ {notice}; using a fresh resume", fg=typer.colors.YELLOW, err=True)
        return document, None
    return document, record


def _parse_order(order: Optional[str]) -> SectionOrder:
    if not order:
        return SectionOrder()
    try:
        return SectionOrder.parse(order)
    except InvalidSectionOrderError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("layouts")
def layouts_command():
    """
    List the layout catalog.

    Examples:\n

        $ build_resume.py layouts
    """
    typer.secho("\nLayouts:", fg=typer.colors.BLUE, bold=True)
    for layout in list_layouts():
        typer.echo(
            f"  {layout.layout_id:>2}  {layout.display_name:<20} "
            f"{layout.structure_kind.value:<14} align={layout.text_alignment.value:<7} "
            f"border={layout.border_treatment.value:<14} {layout.accent_color}"
        )
    typer.echo("")


@app.command("preview")
def preview_command(
    source: Annotated[str, typer.Argument(help="Resume JSON file or saved record id")],
    layout_id: Annotated[int, typer.Option("--layout", "-l", help="Layout id (1-10)")] = 1,
    order: Annotated[
        Optional[str],
        typer.Option("--order", "-o", help="Comma-separated section order (top-down layouts only)"),
    ] = None,
    html_out: Annotated[
        Optional[Path],
        typer.Option("--html", help="Also write the preview HTML to this file"),
    ] = None,
):
    """
    Show the preview outline for a resume.

    Sections with move controls are marked ^v; structured layouts place
    sections in fixed columns and show no controls.

    Examples:\n

        $ build_resume.py preview my_resume.json --layout 4

        $ build_resume.py preview my_resume.json --order work,summary,education,projects,skills,languages
    """
    setup_templating_logger(session_log_dir("preview"), phase="preview")

    store = ResumeStore()
    document, _ = _load_resume(source, store)
    tree = render_preview(document, _parse_order(order), layout_id)

    typer.secho(f"\n{tree.header.name}", fg=typer.colors.BLUE, bold=True)
    typer.echo(tree.outline())

    if html_out:
        html_out.parent.mkdir(parents=True, exist_ok=True)
        html_out.write_text(render_preview_html(tree), encoding="utf-8")
        typer.secho(f"\n✓ Preview HTML: {html_out}", fg=typer.colors.GREEN)
    typer.echo("")


@app.command("export")
def export_command(
    source: Annotated[str, typer.Argument(help="Resume JSON file or saved record id")],
    layout_id: Annotated[int, typer.Option("--layout", "-l", help="Layout id (1-10)")] = 1,
    order: Annotated[
        Optional[str],
        typer.Option("--order", "-o", help="Comma-separated section order (top-down layouts only)"),
    ] = None,
    name: Annotated[
        Optional[str],
        typer.Option("--name", "-n", help="Name to save under (default: the resume's name)"),
    ] = None,
    no_open: Annotated[
        bool,
        typer.Option("--no-open", help="Write the print document without opening a browser"),
    ] = False,
):
    """
    Save a resume, then print it.

    The resume is always saved first. If no browser can be opened the saved
    record is kept and the command can be rerun with its id.

    Examples:\n

        $ build_resume.py export my_resume.json --layout 6

        $ build_resume.py export my_resume.json --name "Jane Doe" --no-open
    """
    setup_rendering_logger(session_log_dir("export"))

    store = ResumeStore()
    document, record = _load_resume(source, store)
    layout = get_layout(layout_id)
    backend = FilePrintBackend() if no_open else BrowserPrintBackend()

    typer.secho(f"\nExporting with layout: {layout.display_name}", fg=typer.colors.BLUE, bold=True)

    try:
        result = export_resume(
            document,
            _parse_order(order),
            layout,
            name,
            store,
            backend,
            record_id=record["id"] if record else None,
        )
    except ExportFailedError as e:
        typer.secho(f"✗ {e.reason}", fg=typer.colors.RED, err=True)
        typer.secho(
            f"  Resume is saved as '{e.record['name']}' (id {e.record['id']}); "
            f"retry with: build_resume.py export {e.record['id']}",
            fg=typer.colors.YELLOW,
            err=True,
        )
        raise typer.Exit(code=1)

    typer.secho(f"✓ Saved '{result.record['name']}' (id {result.record['id']})", fg=typer.colors.GREEN)
    if result.output_path:
        typer.echo(f"  Document: {result.output_path}")
    typer.echo("")


if __name__ == "__main__":
    app()
