"""
Bucket assignment per layout structure.

A layout's structure kind maps to an ordered list of rows, each row holding
one or more buckets (a column or grid cell). Only the top-down bucket follows
the user's section order; structured layouts use a fixed editorial grouping.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from resumeai.contexts.templating.layouts import StructureKind


@dataclass(frozen=True)
class Bucket:
    """
    One visual container of sections.

    Attributes:
        name: Identifier used for CSS classes ("main", "sidebar", "left", ...)
        width: Fraction of the row width (0-1]
        tags: Member section tags in render order, or None to follow the section order
        show_titles: Whether section titles are rendered
        reorderable: Whether sections get move up / move down controls
    """

    name: str
    width: float
    tags: Optional[Tuple[str, ...]] = None
    show_titles: bool = True
    reorderable: bool = False

    @property
    def follows_order(self) -> bool:
        return self.tags is None


BucketRow = Tuple[Bucket, ...]

_MAIN_TAGS = ("summary", "education", "work", "projects")
_SIDEBAR_TAGS = ("skills", "languages")

_SIDEBAR = Bucket("sidebar", 0.25, _SIDEBAR_TAGS, show_titles=False)
_WIDE = Bucket("main", 0.75, _MAIN_TAGS)

_PLANS = {
    StructureKind.TOP_DOWN: (
        (Bucket("main", 1.0, None, show_titles=True, reorderable=True),),
    ),
    StructureKind.GRID_2COL: (
        (Bucket("span", 1.0, ("summary",)),),
        (
            Bucket("left", 0.5, ("education", "skills", "languages")),
            Bucket("right", 0.5, ("work", "projects")),
        ),
    ),
    StructureKind.SIDEBAR_LEFT: ((_SIDEBAR, _WIDE),),
    StructureKind.SIDEBAR_RIGHT: ((_WIDE, _SIDEBAR),),
}


def plan_buckets(structure_kind: StructureKind) -> Tuple[BucketRow, ...]:
    """
    Get the bucket rows for a structure kind.

    Args:
        structure_kind: Layout structure

    Returns:
        Tuple of rows, each a tuple of Buckets in left-to-right order
    """
    return _PLANS[StructureKind(structure_kind)]
