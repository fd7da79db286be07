"""
Interactive preview adapter.

Turns a RenderPlan into a PreviewTree: the same sections and buckets as the
export document, plus move up / move down controls on sections that live in a
reorderable (top-down) bucket.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

from resumeai.contexts.templating.html_generator import HTMLGenerator
from resumeai.contexts.templating.layouts import LayoutDefinition
from resumeai.contexts.templating.resume_data_structure import ResumeDocument, SectionOrder
from resumeai.contexts.templating.section_builder import (
    PlacedSection,
    RenderedHeader,
    RenderedSection,
    RenderPlan,
    arrange,
)


@dataclass(frozen=True)
class SectionControls:
    """Reorder affordances; index addresses the tag's position in the section order."""

    index: int
    can_move_up: bool
    can_move_down: bool

    def to_dict(self) -> Dict:
        return {"index": self.index, "can_move_up": self.can_move_up, "can_move_down": self.can_move_down}


@dataclass(frozen=True)
class PreviewSection:
    section: RenderedSection
    show_title: bool
    controls: Optional[SectionControls]

    @property
    def tag(self) -> str:
        return self.section.tag

    @property
    def title(self) -> Optional[str]:
        return self.section.title if self.show_title else None


@dataclass(frozen=True)
class PreviewBucket:
    name: str
    width: float
    sections: Tuple[PreviewSection, ...]


@dataclass(frozen=True)
class PreviewTree:
    layout: LayoutDefinition
    header: RenderedHeader
    rows: Tuple[Tuple[PreviewBucket, ...], ...]
    plan: RenderPlan

    def sections(self) -> List[PreviewSection]:
        return [section for row in self.rows for bucket in row for section in bucket.sections]

    def section_tags(self) -> List[str]:
        return [section.tag for section in self.sections()]

    def outline(self) -> str:
        """
        Plain-text outline of the tree, one line per bucket and section.

        Example:
            Classic ATS (top-down)
              [main 100%]
                ^v Professional Summary
                ^v Education
        """
        lines = [f"{self.layout.display_name} ({self.layout.structure_kind.value})"]
        for row in self.rows:
            for bucket in row:
                lines.append(f"  [{bucket.name} {bucket.width:.0%}]")
                for section in bucket.sections:
                    marker = "^v" if section.controls else "  "
                    lines.append(f"    {marker} {section.title or '(' + section.tag + ')'}")
        return "\n".join(lines)


def controls_for(placed: PlacedSection, order_length: int) -> Optional[SectionControls]:
    """Controls for a placed section, or None inside fixed (noControls) buckets."""
    if not placed.reorderable:
        return None
    return SectionControls(
        index=placed.order_index,
        can_move_up=placed.order_index > 0,
        can_move_down=placed.order_index < order_length - 1,
    )


def build_preview_tree(plan: RenderPlan) -> PreviewTree:
    order_length = len(plan.order)
    rows = tuple(
        tuple(
            PreviewBucket(
                name=arranged.bucket.name,
                width=arranged.bucket.width,
                sections=tuple(
                    PreviewSection(
                        section=placed.section,
                        show_title=placed.show_title,
                        controls=controls_for(placed, order_length),
                    )
                    for placed in arranged.sections
                ),
            )
            for arranged in row
        )
        for row in plan.rows
    )
    return PreviewTree(layout=plan.layout, header=plan.header, rows=rows, plan=plan)


def render_preview(
    document: ResumeDocument,
    order: Union[SectionOrder, List[str], None],
    layout: Union[LayoutDefinition, int],
) -> PreviewTree:
    """
    Render the interactive preview tree for a resume.

    Args:
        document: Resume to render (not modified)
        order: Section order
        layout: LayoutDefinition or layout id (unknown ids render as layout 1)

    Returns:
        PreviewTree with one block per non-empty section
    """
    return build_preview_tree(arrange(document, order, layout))


def render_preview_html(tree: PreviewTree, generator: HTMLGenerator = None) -> str:
    """Screen markup for a preview tree, with data-action reorder buttons."""
    generator = generator or HTMLGenerator()
    order_length = len(tree.plan.order)

    def _controls(placed: PlacedSection) -> Optional[Dict]:
        controls = controls_for(placed, order_length)
        return controls.to_dict() if controls else None

    return generator.generate_preview(tree.plan, _controls)
