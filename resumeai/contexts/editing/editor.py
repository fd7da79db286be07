"""
Resume Editing Session

ResumeEditor holds the state of one editor window: the document, the
section order and the selected layout. Every edit goes through a method
here; preview and export read the current state through the templating
context.
"""

import copy
import dataclasses
import re
import uuid
from typing import Dict, List, Optional, Tuple, Union

from resumeai.contexts.editing.exceptions import ReadOnlySessionError
from resumeai.contexts.editing.logger import _log_debug, _log_info, _log_warning
from resumeai.contexts.rendering.exceptions import ExportFailedError
from resumeai.contexts.rendering.exporter import (
    ExportResult,
    export_resume,
    print_resume,
    resolve_export_name,
    save_resume,
)
from resumeai.contexts.rendering.print_backends import BrowserPrintBackend
from resumeai.contexts.templating.defaults import (
    BULLETED_SECTIONS,
    FONT_FAMILIES,
    FONT_SIZE_MAX,
    FONT_SIZE_MIN,
)
from resumeai.contexts.templating.exceptions import InvalidSettingError
from resumeai.contexts.templating.html_generator import render_export_document
from resumeai.contexts.templating.layouts import LayoutDefinition, get_layout
from resumeai.contexts.templating.preview import PreviewTree, render_preview
from resumeai.contexts.templating.resume_data_structure import (
    PERSONAL_FIELDS,
    EducationEntry,
    NamedItem,
    ProjectEntry,
    ResumeDocument,
    SectionOrder,
    WorkEntry,
)
from resumeai.utils.resume_store import ResumeStore
from resumeai.utils.text_processing import BULLET_MARKER, insert_paragraph_break

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

_ENTRY_TYPES = {
    "education": EducationEntry,
    "work": WorkEntry,
    "projects": ProjectEntry,
    "skills": NamedItem,
    "languages": NamedItem,
}

# Wire-format keys accepted as aliases of attribute names
_FIELD_ALIASES = {
    "desc": "description",
    "themeColor": "theme_color",
    "fontFamily": "font_family",
    "fontSize": "font_size",
}


def _require_text(field: str, value) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{field} must be text, got {type(value).__name__}")
    return value


def _editable_fields(section: str) -> Tuple[str, ...]:
    return tuple(
        f.name
        for f in dataclasses.fields(_ENTRY_TYPES[section])
        if f.name not in ("id", "visible")
    )


class ResumeEditor:
    """
    One editing session over a resume.

    Attributes:
        document: The ResumeDocument being edited
        order: Current SectionOrder
        layout: Selected LayoutDefinition
        store: ResumeStore used by save/export (created on first use if None)
        record_id: Id of the saved record this session writes to, once saved
        read_only: View mode; every mutation raises ReadOnlySessionError
    """

    def __init__(
        self,
        document: ResumeDocument = None,
        order: Union[SectionOrder, List[str], None] = None,
        layout_id: Union[int, LayoutDefinition] = 1,
        store: ResumeStore = None,
        record_id: Optional[str] = None,
        read_only: bool = False,
    ):
        self.document = document if document is not None else ResumeDocument.fresh()
        self.order = order if isinstance(order, SectionOrder) else SectionOrder(order)
        self.layout = get_layout(layout_id)
        self.store = store
        self.record_id = record_id
        self.read_only = read_only

        # Snapshot printed by retry_export: exactly what the last save stored
        self._saved_document: Optional[ResumeDocument] = None
        self._saved_record: Optional[Dict] = None

    @classmethod
    def from_record(
        cls,
        record: Dict,
        store: ResumeStore = None,
        read_only: bool = False,
        layout_id: Union[int, LayoutDefinition] = 1,
    ) -> Tuple["ResumeEditor", Optional[str]]:
        """
        Open a saved record.

        Args:
            record: Record dict from ResumeStore
            store: Store the session saves back to
            read_only: Open in view mode
            layout_id: Layout to show the record in

        Returns:
            (editor, notice) where notice is "Could not load saved data" when
            the record's data was malformed and a fresh document was opened
            instead, else None. A fresh document is not bound to the
            malformed record, so saving never overwrites it
        """
        store = store if store is not None else ResumeStore()
        document, notice = store.load_document(record)
        record_id = record.get("id")
        if notice:
            # The malformed record stays untouched; the first save creates a new one
            _log_warning(f"{notice}: record {record_id}; opened a fresh, unsaved resume")
            record_id = None
        editor = cls(
            document=document,
            layout_id=layout_id,
            store=store,
            record_id=record_id,
            read_only=read_only,
        )
        _log_info(f"Opened '{record.get('name')}' ({'view' if read_only else 'edit'} mode)")
        return editor, notice

    def _require_writable(self, action: str) -> None:
        if self.read_only:
            raise ReadOnlySessionError(f"Cannot {action}: resume is open in view mode")

    def _get_store(self) -> ResumeStore:
        if self.store is None:
            self.store = ResumeStore()
        return self.store

    # ------------------------------------------------------------------
    # Field edits
    # ------------------------------------------------------------------

    def update_personal(self, field: str, value: str) -> None:
        self._require_writable("edit personal details")
        if field not in PERSONAL_FIELDS:
            raise ValueError(f"Invalid personal field: {field}. Must be one of {PERSONAL_FIELDS}")
        setattr(self.document.personal, field, _require_text(field, value))

    def update_summary(self, content: str) -> None:
        self._require_writable("edit the summary")
        self.document.summary.content = _require_text("summary", content)

    def set_summary_visible(self, visible: bool) -> None:
        self._require_writable("change summary visibility")
        self.document.summary.visible = bool(visible)

    def update_setting(self, field: str, value) -> None:
        """
        Change a document setting.

        Args:
            field: theme_color, font_family or font_size (camelCase keys also accepted)
            value: New value

        Raises:
            InvalidSettingError: If the value is outside the allowed values
            ValueError: If field is not a setting
        """
        self._require_writable("change settings")
        field = _FIELD_ALIASES.get(field, field)
        settings = self.document.settings

        if field == "font_family":
            if value not in FONT_FAMILIES:
                raise InvalidSettingError(f"Unknown font family: {value!r}")
            settings.font_family = value
        elif field == "font_size":
            try:
                size = float(value)
            except (TypeError, ValueError) as e:
                raise InvalidSettingError(f"Font size must be a number, got {value!r}") from e
            if not FONT_SIZE_MIN <= size <= FONT_SIZE_MAX:
                raise InvalidSettingError(
                    f"Font size {size} outside {FONT_SIZE_MIN}-{FONT_SIZE_MAX}pt"
                )
            settings.font_size = int(size) if size.is_integer() else size
        elif field == "theme_color":
            if not isinstance(value, str) or not _HEX_COLOR.match(value):
                raise InvalidSettingError(f"Theme color must be a hex color like #2563eb, got {value!r}")
            settings.theme_color = value
        else:
            raise ValueError(f"Invalid setting: {field}")

        _log_debug(f"Setting {field} = {value!r}")

    # ------------------------------------------------------------------
    # Collection edits
    # ------------------------------------------------------------------

    def update_item(self, section: str, item_id: str, field: str, value: str) -> None:
        """
        Edit one field of a collection item.

        Raises:
            ValueError: If section or field is unknown, or value is not a string
            KeyError: If no item has item_id
        """
        self._require_writable(f"edit {section}")
        item = self.document.find_item(section, item_id)
        field = _FIELD_ALIASES.get(field, field)
        if field not in _editable_fields(section):
            raise ValueError(f"Invalid {section} field: {field}")
        setattr(item, field, _require_text(field, value))

    def add_item(self, section: str) -> str:
        """
        Append a blank item to a collection.

        Work and project descriptions start with a bullet marker.

        Returns:
            The new item's id
        """
        self._require_writable(f"add to {section}")
        items = self.document.collection(section)
        item_id = uuid.uuid4().hex
        entry = _ENTRY_TYPES[section](id=item_id)
        if section in BULLETED_SECTIONS:
            entry.description = BULLET_MARKER
        items.append(entry)
        _log_debug(f"Added {section} item {item_id}")
        return item_id

    def delete_item(self, section: str, item_id: str) -> None:
        self._require_writable(f"delete from {section}")
        item = self.document.find_item(section, item_id)
        self.document.collection(section).remove(item)
        _log_debug(f"Deleted {section} item {item_id}")

    def set_item_visible(self, section: str, item_id: str, visible: bool) -> None:
        """
        Show or hide an education, work or project entry.

        Raises:
            ValueError: For skills and languages, which have no visibility flag
        """
        self._require_writable(f"change {section} visibility")
        item = self.document.find_item(section, item_id)
        if not hasattr(item, "visible"):
            raise ValueError(f"{section} items cannot be hidden")
        item.visible = bool(visible)

    def press_enter(self, section: str, item_id: Optional[str], cursor: int) -> int:
        """
        Apply an Enter key press at cursor in a free-text field.

        Work and project descriptions continue the bullet list; the summary
        gets a plain line break.

        Args:
            section: "summary", "work" or "projects"
            item_id: Entry id (ignored for the summary)
            cursor: Cursor position in the field

        Returns:
            New cursor position
        """
        self._require_writable(f"edit {section}")
        if section == "summary":
            text, new_cursor = insert_paragraph_break(self.document.summary.content, cursor, bulleted=False)
            self.document.summary.content = text
            return new_cursor
        if section not in BULLETED_SECTIONS:
            raise ValueError(f"Section {section} has no free-text description")

        item = self.document.find_item(section, item_id)
        item.description, new_cursor = insert_paragraph_break(item.description, cursor, bulleted=True)
        return new_cursor

    # ------------------------------------------------------------------
    # Order and layout
    # ------------------------------------------------------------------

    def move_section(self, index: int, direction: str) -> SectionOrder:
        self._require_writable("reorder sections")
        self.order = self.order.move(index, direction)
        return self.order

    def select_layout(self, layout_id: Union[int, LayoutDefinition]) -> LayoutDefinition:
        """Switch layouts. Allowed in view mode; unknown ids select layout 1."""
        self.layout = get_layout(layout_id)
        _log_debug(f"Selected layout {self.layout.layout_id}: {self.layout.display_name}")
        return self.layout

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def preview(self) -> PreviewTree:
        return render_preview(self.document, self.order, self.layout)

    def export_markup(self, title: str = None) -> str:
        return render_export_document(self.document, self.order, self.layout, title=title)

    def _remember_save(self, record: Dict) -> Dict:
        self.record_id = record["id"]
        self._saved_record = record
        self._saved_document = copy.deepcopy(self.document)
        return record

    def save(self, name: str = None) -> Dict:
        """
        Persist the current document.

        The first save creates a record; later saves update it.

        Returns:
            The stored record
        """
        self._require_writable("save")
        resolved_name = resolve_export_name(name, self.document)
        record = save_resume(self.document, resolved_name, self._get_store(), record_id=self.record_id)
        _log_info(f"Saved '{resolved_name}' ({record['id']})")
        return self._remember_save(record)

    def export(self, name: str = None, backend=None) -> ExportResult:
        """
        Save, then print.

        Raises:
            ExportFailedError: If printing failed; the record is saved and
                retry_export() can print it again
        """
        self._require_writable("export")
        backend = backend if backend is not None else BrowserPrintBackend()
        try:
            result = export_resume(
                self.document,
                self.order,
                self.layout,
                name,
                self._get_store(),
                backend,
                record_id=self.record_id,
            )
        except ExportFailedError as e:
            self._remember_save(e.record)
            _log_warning(f"Saved '{e.record['name']}' but printing failed; retry to print")
            raise
        self._remember_save(result.record)
        return result

    def retry_export(self, backend=None) -> ExportResult:
        """
        Print the last saved snapshot again without saving.

        Raises:
            RuntimeError: If nothing has been saved in this session
            ExportFailedError: If printing fails again
        """
        if self._saved_record is None:
            raise RuntimeError("Nothing to retry: the resume has not been saved in this session")
        backend = backend if backend is not None else BrowserPrintBackend()
        return print_resume(self._saved_document, self.order, self.layout, self._saved_record, backend)
