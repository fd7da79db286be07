"""
Templating Context

Responsibilities:
- Manages the resume document representation and its JSON wire format
- Owns the layout catalog and the bucket plan of each structure kind
- Applies section emptiness and bullet-cleaning rules
- Renders the interactive preview tree and the static print document

Owns: Resume data structure, layout registry, section arrangement, HTML templates
Never: Persists documents or talks to a printer
"""

from resumeai.contexts.templating.html_generator import HTMLGenerator, render_export_document
from resumeai.contexts.templating.layouts import (
    LayoutDefinition,
    LayoutRegistry,
    StructureKind,
    get_layout,
    list_layouts,
)
from resumeai.contexts.templating.preview import (
    PreviewTree,
    render_preview,
    render_preview_html,
)
from resumeai.contexts.templating.resume_data_structure import ResumeDocument, SectionOrder
from resumeai.contexts.templating.section_builder import RenderPlan, arrange

__all__ = [
    # Data structure classes
    "ResumeDocument",
    "SectionOrder",
    # Layout catalog
    "LayoutDefinition",
    "LayoutRegistry",
    "StructureKind",
    "get_layout",
    "list_layouts",
    # Arrangement and output adapters
    "arrange",
    "RenderPlan",
    "PreviewTree",
    "render_preview",
    "render_preview_html",
    "render_export_document",
    "HTMLGenerator",
]
