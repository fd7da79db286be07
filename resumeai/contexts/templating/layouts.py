"""
Layout Registry

Fixed catalog of ten visual templates. Each layout is a plain immutable record
(structure kind, text alignment, border treatment, accent color) loaded from
layouts.yaml; layouts differ only in these attributes, never in behavior.
"""

import os
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Union

from dotenv import load_dotenv
from omegaconf import OmegaConf

from resumeai.contexts.templating.logger import _log_debug

load_dotenv()
DEFAULT_LAYOUTS_FILE = Path(__file__).parent / "layouts.yaml"
LAYOUTS_FILE = Path(os.getenv("RESUMEAI_LAYOUTS_FILE", str(DEFAULT_LAYOUTS_FILE)))

DEFAULT_LAYOUT_ID = 1


class StructureKind(str, Enum):
    TOP_DOWN = "top-down"
    GRID_2COL = "grid-2col"
    SIDEBAR_LEFT = "sidebar-left"
    SIDEBAR_RIGHT = "sidebar-right"


class TextAlignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class BorderTreatment(str, Enum):
    NONE = "none"
    BOTTOM = "bottom"
    BOTTOM_THIN = "bottom-thin"
    BOTTOM_HEAVY = "bottom-heavy"
    TOP_AND_BOTTOM = "top-and-bottom"
    TOP_THICK = "top-thick"
    LEFT_THICK = "left-thick"


# (side, width in px) pairs drawn around the header
_BORDER_RULES = {
    BorderTreatment.NONE: (),
    BorderTreatment.BOTTOM: (("bottom", 2),),
    BorderTreatment.BOTTOM_THIN: (("bottom", 1),),
    BorderTreatment.BOTTOM_HEAVY: (("bottom", 8),),
    BorderTreatment.TOP_AND_BOTTOM: (("top", 2), ("bottom", 2)),
    BorderTreatment.TOP_THICK: (("top", 4),),
    BorderTreatment.LEFT_THICK: (("left", 4),),
}

_JUSTIFY = {
    TextAlignment.LEFT: "flex-start",
    TextAlignment.CENTER: "center",
    TextAlignment.RIGHT: "flex-end",
}


@dataclass(frozen=True)
class LayoutDefinition:
    """
    Immutable description of one visual template.

    Attributes:
        layout_id: Catalog key (1-10)
        display_name: Name shown in the layout picker
        structure_kind: How sections are arranged into columns
        text_alignment: Header alignment
        border_treatment: Rule drawn around the header
        accent_color: Color of section titles and accents
    """

    layout_id: int
    display_name: str
    structure_kind: StructureKind
    text_alignment: TextAlignment
    border_treatment: BorderTreatment
    accent_color: str

    @property
    def justify_content(self) -> str:
        """Flexbox justification matching the text alignment."""
        return _JUSTIFY[self.text_alignment]

    def header_border_css(self) -> str:
        """CSS declarations for the header's border treatment."""
        declarations = []
        for side, width in _BORDER_RULES[self.border_treatment]:
            declarations.append(f"border-{side}: {width}px solid {self.accent_color};")
            declarations.append(f"padding-{side}: {'1rem' if side == 'left' else '1.5rem'};")
        return " ".join(declarations)


class LayoutRegistry:
    """
    Registry mapping layout ids to LayoutDefinitions.

    The catalog is read once from YAML and never mutated. Lookups of unknown
    ids fall back to layout 1 instead of raising.
    """

    def __init__(self, catalog_path: Path = None):
        """
        Load the layout catalog.

        Args:
            catalog_path: YAML catalog (default: LAYOUTS_FILE)

        Raises:
            FileNotFoundError: If the catalog file doesn't exist
            ValueError: If the catalog lacks layout 1 or has invalid attribute values
        """
        self.catalog_path = Path(catalog_path) if catalog_path is not None else LAYOUTS_FILE
        if not self.catalog_path.exists():
            raise FileNotFoundError(f"Layout catalog not found: {self.catalog_path}")

        catalog = OmegaConf.to_container(OmegaConf.load(self.catalog_path), resolve=True)
        self._layouts: Dict[int, LayoutDefinition] = {}
        for entry in catalog["layouts"]:
            layout = LayoutDefinition(
                layout_id=int(entry["id"]),
                display_name=entry["name"],
                structure_kind=StructureKind(entry["structure"]),
                text_alignment=TextAlignment(entry["align"]),
                border_treatment=BorderTreatment(entry["border"]),
                accent_color=entry["color"],
            )
            self._layouts[layout.layout_id] = layout

        if DEFAULT_LAYOUT_ID not in self._layouts:
            raise ValueError(f"Layout catalog must define layout {DEFAULT_LAYOUT_ID}: {self.catalog_path}")

    def is_known(self, layout_id) -> bool:
        return _coerce_id(layout_id) in self._layouts

    def get(self, layout_id) -> LayoutDefinition:
        """
        Look up a layout, treating unknown ids as layout 1.

        Args:
            layout_id: Catalog key; ints and digit strings are accepted

        Returns:
            LayoutDefinition (never raises for unknown ids)
        """
        key = _coerce_id(layout_id)
        if key not in self._layouts:
            _log_debug(f"Unknown layout id {layout_id!r}; using layout {DEFAULT_LAYOUT_ID}")
            key = DEFAULT_LAYOUT_ID
        return self._layouts[key]

    def all(self) -> List[LayoutDefinition]:
        return [self._layouts[key] for key in sorted(self._layouts)]


def _coerce_id(layout_id):
    if isinstance(layout_id, bool):
        return None
    if isinstance(layout_id, int):
        return layout_id
    if isinstance(layout_id, str) and layout_id.strip().isdigit():
        return int(layout_id.strip())
    return None


@lru_cache(maxsize=1)
def default_registry() -> LayoutRegistry:
    """Shared registry over the configured catalog."""
    return LayoutRegistry()


def get_layout(layout_id: Union[int, str, LayoutDefinition]) -> LayoutDefinition:
    """Resolve a layout id (or pass a LayoutDefinition through)."""
    if isinstance(layout_id, LayoutDefinition):
        return layout_id
    return default_registry().get(layout_id)


def list_layouts() -> List[LayoutDefinition]:
    return default_registry().all()
