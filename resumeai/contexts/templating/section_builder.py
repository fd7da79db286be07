"""
Section Assembly

Builds the single internal representation both output adapters consume:
an ordered set of bucket rows holding rendered section blocks. Emptiness and
text-cleaning rules live here so preview and export can never disagree.
"""

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple, Union

from resumeai.contexts.templating.buckets import Bucket, plan_buckets
from resumeai.contexts.templating.defaults import PLACEHOLDERS, SECTION_TITLES
from resumeai.contexts.templating.layouts import LayoutDefinition, get_layout
from resumeai.contexts.templating.logger import log_arrangement
from resumeai.contexts.templating.resume_data_structure import (
    DocumentSettings,
    ResumeDocument,
    SectionOrder,
)
from resumeai.utils.text_processing import clean_lines

DATE_SEPARATOR = " — "


@dataclass(frozen=True)
class RenderedEntry:
    """A cleaned work, education or project entry ready for display."""

    heading: str
    subheading: str = ""
    date_range: str = ""
    link: str = ""
    lines: Tuple[str, ...] = ()


@dataclass(frozen=True)
class RenderedSection:
    """
    One non-empty section after cleaning.

    Exactly one of lines (summary), entries (education/work/projects) or
    names (skills/languages) is populated, depending on tag.
    """

    tag: str
    title: str
    lines: Tuple[str, ...] = ()
    entries: Tuple[RenderedEntry, ...] = ()
    names: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ContactItem:
    kind: str
    value: str


@dataclass(frozen=True)
class RenderedHeader:
    name: str
    contacts: Tuple[ContactItem, ...] = ()


@dataclass(frozen=True)
class PlacedSection:
    """A section positioned in a bucket, with what the bucket allows for it."""

    section: RenderedSection
    show_title: bool
    reorderable: bool
    order_index: int

    @property
    def tag(self) -> str:
        return self.section.tag


@dataclass(frozen=True)
class ArrangedBucket:
    bucket: Bucket
    sections: Tuple[PlacedSection, ...]


@dataclass(frozen=True)
class RenderPlan:
    """Everything needed to draw a resume in one layout."""

    layout: LayoutDefinition
    header: RenderedHeader
    settings: DocumentSettings
    order: SectionOrder
    rows: Tuple[Tuple[ArrangedBucket, ...], ...]

    def section_tags(self) -> List[str]:
        """Rendered section tags in visual reading order (row by row, left to right)."""
        return [placed.tag for row in self.rows for arranged in row for placed in arranged.sections]

    def bucket_tags(self) -> dict:
        """Map of bucket name to the tags it rendered."""
        return {
            arranged.bucket.name: [placed.tag for placed in arranged.sections]
            for row in self.rows
            for arranged in row
        }


def _date_range(start: str, end: str) -> str:
    if not start and not end:
        return ""
    return f"{start}{DATE_SEPARATOR}{end}".strip()


def build_header(document: ResumeDocument) -> RenderedHeader:
    personal = document.personal
    contacts = tuple(
        ContactItem(kind, value)
        for kind, value in (
            ("email", personal.email),
            ("phone", personal.phone),
            ("linkedin", personal.linkedin),
            ("github", personal.github),
        )
        if value and value.strip()
    )
    return RenderedHeader(name=personal.name.strip() or PLACEHOLDERS["name"], contacts=contacts)


def build_section(document: ResumeDocument, tag: str) -> Optional[RenderedSection]:
    """
    Render one section, or None when it has nothing to show.

    Args:
        document: Resume to read from (not modified)
        tag: Section tag

    Returns:
        RenderedSection, or None if the section is empty

    Raises:
        ValueError: If tag is not a known section tag
    """
    title = SECTION_TITLES.get(tag)
    if title is None:
        raise ValueError(f"Unknown section tag: {tag}")

    if tag == "summary":
        if not document.summary.visible:
            return None
        lines = clean_lines(document.summary.content)
        if not any(line.strip() for line in lines):
            return None
        return RenderedSection(tag, title, lines=tuple(lines))

    if tag == "education":
        entries = tuple(
            RenderedEntry(
                heading=e.school or PLACEHOLDERS["school"],
                subheading=e.degree or PLACEHOLDERS["degree"],
                date_range=_date_range(e.start, e.end),
            )
            for e in document.education
            if e.visible
        )
        return RenderedSection(tag, title, entries=entries) if entries else None

    if tag == "work":
        entries = tuple(
            RenderedEntry(
                heading=w.company or PLACEHOLDERS["company"],
                subheading=w.role or PLACEHOLDERS["role"],
                date_range=_date_range(w.start, w.end or PLACEHOLDERS["work_end"]),
                lines=tuple(clean_lines(w.description)),
            )
            for w in document.work
            if w.visible
        )
        return RenderedSection(tag, title, entries=entries) if entries else None

    if tag == "projects":
        entries = tuple(
            RenderedEntry(
                heading=p.name or PLACEHOLDERS["project"],
                date_range=_date_range(p.start, p.end),
                link=p.link.strip(),
                lines=tuple(clean_lines(p.description)),
            )
            for p in document.projects
            if p.visible
        )
        return RenderedSection(tag, title, entries=entries) if entries else None

    # skills / languages
    placeholder = PLACEHOLDERS["skill" if tag == "skills" else "language"]
    names = tuple(item.name or placeholder for item in getattr(document, tag))
    return RenderedSection(tag, title, names=names) if names else None


def arrange(
    document: ResumeDocument,
    order: Union[SectionOrder, List[str], None],
    layout: Union[LayoutDefinition, int],
) -> RenderPlan:
    """
    Fold the document into the layout's buckets.

    Top-down buckets follow the section order; structured buckets use their
    fixed membership. Empty sections are dropped without disturbing the
    relative order of the rest.

    Args:
        document: Resume to render (not modified)
        order: Section order (SectionOrder, list of tags, or None for the default)
        layout: LayoutDefinition or layout id (unknown ids render as layout 1)

    Returns:
        RenderPlan
    """
    layout = get_layout(layout)
    order = order if isinstance(order, SectionOrder) else SectionOrder(order)

    rows = []
    for row in plan_buckets(layout.structure_kind):
        arranged_row = []
        for bucket in row:
            tags = order.tags if bucket.follows_order else bucket.tags
            placed = []
            for tag in tags:
                section = build_section(document, tag)
                if section is None:
                    continue
                placed.append(
                    PlacedSection(
                        section=section,
                        show_title=bucket.show_titles,
                        reorderable=bucket.reorderable,
                        order_index=order.index(tag),
                    )
                )
            arranged_row.append(ArrangedBucket(bucket=bucket, sections=tuple(placed)))
        rows.append(tuple(arranged_row))

    plan = RenderPlan(
        layout=layout,
        header=build_header(document),
        settings=replace(document.settings),
        order=order,
        rows=tuple(rows),
    )
    log_arrangement(layout.display_name, layout.structure_kind.value, plan.section_tags())
    return plan
