"""
Rendering Context

Responsibilities:
- Runs the export flow: persist the resume, then print it
- Writes print documents to the results directory
- Hands print documents to the browser's print dialog
- Reports print failures without losing the saved record

Owns: Export orchestration, print backends, output management
Never: Modifies resume content or layout decisions
"""

from resumeai.contexts.rendering.exceptions import ExportFailedError, PrintUnavailableError
from resumeai.contexts.rendering.exporter import ExportResult, export_resume, resolve_export_name
from resumeai.contexts.rendering.print_backends import BrowserPrintBackend, FilePrintBackend

__all__ = [
    # Export orchestration
    "export_resume",
    "resolve_export_name",
    "ExportResult",
    # Print backends
    "BrowserPrintBackend",
    "FilePrintBackend",
    # Errors
    "ExportFailedError",
    "PrintUnavailableError",
]
