"""
Resume Document Structure

Defines the structured data representation of a resume for resumeai.
This structure is the interface between the Editing and Templating contexts.

Editing owns:
- Creating fresh documents and mutating them field by field

Templating reads ResumeDocument instances to render previews and exports,
and never mutates them.

The JSON wire format matches the records saved by the browser app
(``desc`` for descriptions, camelCase settings keys), so older saved
blobs load unchanged.
"""

import json
import math
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Sequence

from resumeai.contexts.templating.defaults import (
    COLLECTION_SECTIONS,
    DEFAULT_SECTION_ORDER,
    DEFAULT_SETTINGS,
    FONT_FAMILIES,
    FONT_SIZE_MAX,
    FONT_SIZE_MIN,
    SECTION_TAGS,
    get_fresh_document_data,
)
from resumeai.contexts.templating.exceptions import (
    InvalidResumeDataError,
    InvalidSectionOrderError,
)
from resumeai.contexts.templating.logger import _log_warning

PERSONAL_FIELDS = ("name", "email", "phone", "linkedin", "github")


def _as_str(value: Any) -> str:
    """Coerce a loaded leaf value to a string; None becomes ""."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _new_item_id() -> str:
    return uuid.uuid4().hex


@dataclass
class PersonalInfo:
    """Header contact details. All fields optional."""

    name: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    github: str = ""


@dataclass
class Summary:
    content: str = ""
    visible: bool = True


@dataclass
class EducationEntry:
    id: str
    school: str = ""
    degree: str = ""
    start: str = ""
    end: str = ""
    visible: bool = True


@dataclass
class WorkEntry:
    id: str
    company: str = ""
    role: str = ""
    start: str = ""
    end: str = ""
    description: str = ""
    visible: bool = True


@dataclass
class ProjectEntry:
    id: str
    name: str = ""
    link: str = ""
    start: str = ""
    end: str = ""
    description: str = ""
    visible: bool = True


@dataclass
class NamedItem:
    """A skill or language entry."""

    id: str
    name: str = ""


@dataclass
class DocumentSettings:
    theme_color: str = DEFAULT_SETTINGS["themeColor"]
    font_family: str = DEFAULT_SETTINGS["fontFamily"]
    font_size: float = DEFAULT_SETTINGS["fontSize"]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "themeColor": self.theme_color,
            "fontFamily": self.font_family,
            "fontSize": self.font_size,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DocumentSettings":
        """
        Build settings from the wire format, correcting bad values.

        Unknown fonts fall back to the default font and out-of-range sizes are
        clamped; both are logged rather than raised so one bad setting never
        makes a saved resume unreadable.
        """
        if not isinstance(data, dict):
            raise InvalidResumeDataError(f"'settings' must be an object, got {type(data).__name__}")

        theme_color = _as_str(data.get("themeColor", DEFAULT_SETTINGS["themeColor"]))

        font_family = data.get("fontFamily", DEFAULT_SETTINGS["fontFamily"])
        if font_family not in FONT_FAMILIES:
            _log_warning(f"Unknown font family {font_family!r}; using {DEFAULT_SETTINGS['fontFamily']!r}")
            font_family = DEFAULT_SETTINGS["fontFamily"]

        font_size = data.get("fontSize", DEFAULT_SETTINGS["fontSize"])
        if isinstance(font_size, str):
            try:
                font_size = float(font_size)
            except ValueError:
                font_size = None
        if (
            isinstance(font_size, bool)
            or not isinstance(font_size, (int, float))
            or not math.isfinite(font_size)
        ):
            _log_warning(f"Invalid font size {data.get('fontSize')!r}; using {DEFAULT_SETTINGS['fontSize']}")
            font_size = DEFAULT_SETTINGS["fontSize"]
        elif not FONT_SIZE_MIN <= font_size <= FONT_SIZE_MAX:
            clamped = min(max(font_size, FONT_SIZE_MIN), FONT_SIZE_MAX)
            _log_warning(f"Font size {font_size} out of range; clamped to {clamped}")
            font_size = clamped

        return cls(theme_color=theme_color, font_family=font_family, font_size=font_size)


@dataclass
class ResumeDocument:
    """
    Structured representation of a complete resume.

    Collections are ordered and their items are addressed by stable ids.
    A bare ``ResumeDocument()`` has empty collections; use ``fresh()`` for the
    state a new editor opens with.
    """

    personal: PersonalInfo = field(default_factory=PersonalInfo)
    summary: Summary = field(default_factory=Summary)
    education: List[EducationEntry] = field(default_factory=list)
    work: List[WorkEntry] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)
    skills: List[NamedItem] = field(default_factory=list)
    languages: List[NamedItem] = field(default_factory=list)
    settings: DocumentSettings = field(default_factory=DocumentSettings)

    @classmethod
    def fresh(cls) -> "ResumeDocument":
        """Document with one blank entry per collection, as a new editor shows it."""
        return cls.from_dict(get_fresh_document_data())

    def collection(self, section: str) -> list:
        """
        Get the item list for a collection section.

        Raises:
            ValueError: If section is not one of the id-addressed collections
        """
        if section not in COLLECTION_SECTIONS:
            raise ValueError(
                f"Invalid collection section: {section}. Must be one of {COLLECTION_SECTIONS}"
            )
        return getattr(self, section)

    def find_item(self, section: str, item_id: str):
        """
        Find an item by id within a collection.

        Raises:
            KeyError: If no item has the given id
        """
        for item in self.collection(section):
            if item.id == item_id:
                return item
        raise KeyError(f"No {section} item with id '{item_id}'")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the saved-resume wire format."""
        return {
            "personal": {key: getattr(self.personal, key) for key in PERSONAL_FIELDS},
            "summary": {"content": self.summary.content, "visible": self.summary.visible},
            "education": [
                {
                    "id": e.id,
                    "school": e.school,
                    "degree": e.degree,
                    "start": e.start,
                    "end": e.end,
                    "visible": e.visible,
                }
                for e in self.education
            ],
            "work": [
                {
                    "id": w.id,
                    "company": w.company,
                    "role": w.role,
                    "start": w.start,
                    "end": w.end,
                    "desc": w.description,
                    "visible": w.visible,
                }
                for w in self.work
            ],
            "projects": [
                {
                    "id": p.id,
                    "name": p.name,
                    "link": p.link,
                    "start": p.start,
                    "end": p.end,
                    "desc": p.description,
                    "visible": p.visible,
                }
                for p in self.projects
            ],
            "skills": [{"id": s.id, "name": s.name} for s in self.skills],
            "languages": [{"id": l.id, "name": l.name} for l in self.languages],
            "settings": self.settings.to_dict(),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResumeDocument":
        """
        Build a document from the wire format.

        Missing keys take their defaults; ``description`` is accepted as an
        alias of ``desc``.

        Raises:
            InvalidResumeDataError: If the structure is not a resume document
        """
        if not isinstance(data, dict):
            raise InvalidResumeDataError(
                f"Resume data must be an object, got {type(data).__name__}"
            )

        personal_data = _require_object(data.get("personal", {}), "personal")
        summary_data = _require_object(data.get("summary", {}), "summary")

        return cls(
            personal=PersonalInfo(
                **{key: _as_str(personal_data.get(key, "")) for key in PERSONAL_FIELDS}
            ),
            summary=Summary(
                content=_as_str(summary_data.get("content", "")),
                visible=bool(summary_data.get("visible", True)),
            ),
            education=[
                EducationEntry(
                    id=_item_id(item),
                    school=_as_str(item.get("school")),
                    degree=_as_str(item.get("degree")),
                    start=_as_str(item.get("start")),
                    end=_as_str(item.get("end")),
                    visible=bool(item.get("visible", True)),
                )
                for item in _require_items(data.get("education", []), "education")
            ],
            work=[
                WorkEntry(
                    id=_item_id(item),
                    company=_as_str(item.get("company")),
                    role=_as_str(item.get("role")),
                    start=_as_str(item.get("start")),
                    end=_as_str(item.get("end")),
                    description=_as_str(item.get("desc", item.get("description"))),
                    visible=bool(item.get("visible", True)),
                )
                for item in _require_items(data.get("work", []), "work")
            ],
            projects=[
                ProjectEntry(
                    id=_item_id(item),
                    name=_as_str(item.get("name")),
                    link=_as_str(item.get("link")),
                    start=_as_str(item.get("start")),
                    end=_as_str(item.get("end")),
                    description=_as_str(item.get("desc", item.get("description"))),
                    visible=bool(item.get("visible", True)),
                )
                for item in _require_items(data.get("projects", []), "projects")
            ],
            skills=[
                NamedItem(id=_item_id(item), name=_as_str(item.get("name")))
                for item in _require_items(data.get("skills", []), "skills")
            ],
            languages=[
                NamedItem(id=_item_id(item), name=_as_str(item.get("name")))
                for item in _require_items(data.get("languages", []), "languages")
            ],
            settings=DocumentSettings.from_dict(_require_object(data.get("settings"), "settings")),
        )

    @classmethod
    def from_json(cls, text: str) -> "ResumeDocument":
        """
        Parse a JSON-encoded document.

        Raises:
            InvalidResumeDataError: If text is not valid JSON or not a resume document
        """
        try:
            data = json.loads(text)
        except (TypeError, json.JSONDecodeError) as e:
            raise InvalidResumeDataError(f"Resume data is not valid JSON: {e}") from e
        return cls.from_dict(data)


def _require_object(value: Any, name: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidResumeDataError(f"'{name}' must be an object, got {type(value).__name__}")
    return value


def _require_items(value: Any, name: str) -> List[Dict[str, Any]]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise InvalidResumeDataError(f"'{name}' must be a list, got {type(value).__name__}")
    for index, item in enumerate(value):
        if not isinstance(item, dict):
            raise InvalidResumeDataError(
                f"'{name}[{index}]' must be an object, got {type(item).__name__}"
            )
    return value


def _item_id(item: Dict[str, Any]) -> str:
    item_id = item.get("id")
    if item_id in (None, ""):
        return _new_item_id()
    return _as_str(item_id)


class SectionOrder:
    """
    Permutation of the six section tags driving top-down rendering order.

    Immutable: ``move`` returns a new order.

    Raises:
        InvalidSectionOrderError: If tags are not exactly the six section tags
    """

    def __init__(self, tags: Optional[Sequence[str]] = None):
        tags = tuple(DEFAULT_SECTION_ORDER if tags is None else tags)
        if len(tags) != len(SECTION_TAGS) or set(tags) != set(SECTION_TAGS):
            raise InvalidSectionOrderError(
                f"Section order must be a permutation of {SECTION_TAGS}, got {tags}"
            )
        self._tags = tags

    @classmethod
    def parse(cls, text: str) -> "SectionOrder":
        """Parse a comma-separated order such as "work,summary,education,...". """
        return cls([tag.strip() for tag in text.split(",") if tag.strip()])

    @property
    def tags(self) -> tuple:
        return self._tags

    def index(self, tag: str) -> int:
        return self._tags.index(tag)

    def move(self, index: int, direction: str) -> "SectionOrder":
        """
        Swap the tag at index with its neighbour in the given direction.

        Moving the first tag up or the last tag down returns an equal order.

        Args:
            index: Position of the tag to move
            direction: "up" or "down"

        Returns:
            New SectionOrder

        Raises:
            ValueError: If direction is not "up" or "down"
            IndexError: If index is outside the order
        """
        if direction not in ("up", "down"):
            raise ValueError(f"Invalid direction: {direction}. Must be 'up' or 'down'")
        if not 0 <= index < len(self._tags):
            raise IndexError(f"Section index out of range: {index}")

        target = index - 1 if direction == "up" else index + 1
        if target < 0 or target >= len(self._tags):
            return self

        tags = list(self._tags)
        tags[index], tags[target] = tags[target], tags[index]
        return SectionOrder(tags)

    def to_list(self) -> List[str]:
        return list(self._tags)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __getitem__(self, index: int) -> str:
        return self._tags[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SectionOrder):
            return self._tags == other._tags
        if isinstance(other, (list, tuple)):
            return self._tags == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._tags)

    def __repr__(self) -> str:
        return f"SectionOrder({list(self._tags)})"
