"""
Export flow.

Export = persist, then print. The save always completes before any print
attempt, so a blocked print dialog never loses the user's work.
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

from resumeai.contexts.rendering.exceptions import ExportFailedError, PrintUnavailableError
from resumeai.contexts.rendering.logger import _log_debug, log_export_result, log_export_start
from resumeai.contexts.templating.html_generator import render_export_document
from resumeai.contexts.templating.layouts import LayoutDefinition, get_layout
from resumeai.contexts.templating.resume_data_structure import ResumeDocument, SectionOrder
from resumeai.utils.event_logging import log_resume_event
from resumeai.utils.resume_store import ResumeStore

DEFAULT_EXPORT_NAME = "Resume"


@dataclass
class ExportResult:
    """Outcome of an export or a print retry."""

    record: Dict
    printed: bool
    output_path: Optional[Path] = None
    error: Optional[str] = None
    elapsed_time: float = 0.0


def resolve_export_name(name: Optional[str], document: ResumeDocument) -> str:
    """Trimmed name, else the resume's personal name, else "Resume"."""
    for candidate in (name, document.personal.name):
        if candidate and candidate.strip():
            return candidate.strip()
    return DEFAULT_EXPORT_NAME


def save_resume(
    document: ResumeDocument,
    name: str,
    store: ResumeStore,
    record_id: Optional[str] = None,
) -> Dict:
    """Update record_id if the store has it, otherwise create a new record."""
    if record_id and store.exists(record_id):
        return store.update(record_id, name, document)
    return store.create(name, document)


def print_resume(
    document: ResumeDocument,
    order: Union[SectionOrder, List[str], None],
    layout: Union[LayoutDefinition, int],
    record: Dict,
    backend,
) -> ExportResult:
    """
    Render a saved resume and hand it to a print backend.

    Does not touch the store; used both by export_resume after its save and
    for retrying a failed print.

    Args:
        document: Resume to print (the snapshot that was saved)
        order: Section order
        layout: LayoutDefinition or layout id
        record: The saved record the document belongs to
        backend: Object with print_document(markup, name) -> Optional[Path]

    Returns:
        ExportResult with printed=True

    Raises:
        ExportFailedError: If the backend cannot print
    """
    layout = get_layout(layout)
    name = record["name"]
    log_export_start(name, layout.display_name, type(backend).__name__)

    start_time = time.time()
    markup = render_export_document(
        document,
        order,
        layout,
        title=name,
        auto_print=getattr(backend, "auto_print", False),
    )
    _log_debug(f"Rendered print document ({len(markup)} chars)")

    try:
        output_path = backend.print_document(markup, name)
    except (PrintUnavailableError, OSError) as e:
        result = ExportResult(
            record=record, printed=False, error=str(e), elapsed_time=time.time() - start_time
        )
        log_export_result(name, result)
        log_resume_event(
            "export_failed",
            record["id"],
            source="rendering",
            layout=layout.display_name,
            reason=str(e),
        )
        raise ExportFailedError(record, str(e), original_error=e) from e

    result = ExportResult(
        record=record,
        printed=True,
        output_path=output_path,
        elapsed_time=time.time() - start_time,
    )
    log_export_result(name, result)
    log_resume_event(
        "export_completed",
        record["id"],
        source="rendering",
        layout=layout.display_name,
        output_path=str(output_path) if output_path else None,
    )
    return result


def export_resume(
    document: ResumeDocument,
    order: Union[SectionOrder, List[str], None],
    layout: Union[LayoutDefinition, int],
    name: Optional[str],
    store: ResumeStore,
    backend,
    record_id: Optional[str] = None,
) -> ExportResult:
    """
    Persist a resume, then print it.

    Args:
        document: Resume to export
        order: Section order
        layout: LayoutDefinition or layout id (unknown ids export as layout 1)
        name: Requested display name (blank falls back to the personal name, then "Resume")
        store: Where to persist the record
        backend: Print backend
        record_id: Existing record to update instead of creating a new one

    Returns:
        ExportResult

    Raises:
        ExportFailedError: If printing failed; the record is saved and carried on the error
        OSError: If persisting failed (nothing is printed)
    """
    resolved_name = resolve_export_name(name, document)
    record = save_resume(document, resolved_name, store, record_id=record_id)
    return print_resume(document, order, layout, record, backend)
