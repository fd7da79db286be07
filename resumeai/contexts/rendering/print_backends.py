"""
Print backends.

A backend receives the finished print document and gets it in front of a
printer. Both backends write the document under RESULTS_PATH/<YYYY-MM-DD>/;
the browser backend then opens it so its onload script raises the print
dialog.
"""

import os
import re
import webbrowser
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from resumeai.contexts.rendering.exceptions import PrintUnavailableError
from resumeai.contexts.rendering.logger import _log_debug, _log_info
from resumeai.utils.timestamp import today

load_dotenv()
RESULTS_PATH = Path(os.getenv("RESULTS_PATH", "outs/results"))

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def safe_filename(name: str) -> str:
    """Filesystem-safe stem for a resume name ("Jane Doe" -> "Jane_Doe")."""
    stem = _UNSAFE_FILENAME_CHARS.sub("_", name.strip()).strip("._")
    return stem or "Resume"


class FilePrintBackend:
    """Writes the print document to disk without opening it."""

    auto_print = False

    def __init__(self, output_dir: Path = None):
        """
        Args:
            output_dir: Base results directory. Defaults to RESULTS_PATH from environment
        """
        self.output_dir = Path(output_dir) if output_dir is not None else RESULTS_PATH

    def document_path(self, name: str) -> Path:
        return self.output_dir / today() / f"{safe_filename(name)}.html"

    def write_document(self, markup: str, name: str) -> Path:
        path = self.document_path(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(markup, encoding="utf-8")
        _log_debug(f"Wrote print document: {path}")
        return path

    def print_document(self, markup: str, name: str) -> Optional[Path]:
        """
        Write the print document.

        Returns:
            Path to the written HTML file

        Raises:
            OSError: If the file cannot be written
        """
        path = self.write_document(markup, name)
        _log_info(f"Print document ready at {path}")
        return path


class BrowserPrintBackend(FilePrintBackend):
    """Writes the print document and opens it in the default web browser."""

    auto_print = True

    def print_document(self, markup: str, name: str) -> Optional[Path]:
        """
        Write the print document and open it in a browser.

        Returns:
            Path to the written HTML file

        Raises:
            PrintUnavailableError: If no browser could be opened
            OSError: If the file cannot be written
        """
        path = self.write_document(markup, name)
        try:
            opened = webbrowser.open(path.resolve().as_uri())
        except webbrowser.Error as e:
            raise PrintUnavailableError(
                f"Could not open a browser to print {path.name} ({e}); "
                "allow pop-ups or configure a browser (BROWSER environment variable)"
            ) from e
        if not opened:
            raise PrintUnavailableError(
                f"Could not open a browser to print {path.name}; "
                "allow pop-ups or configure a browser (BROWSER environment variable)"
            )
        _log_info(f"Opened {path.name} in browser for printing")
        return path
