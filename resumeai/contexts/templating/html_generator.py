"""
HTML Generator

Converts a RenderPlan to HTML: the static print document used for PDF export,
and the screen markup used for the interactive preview. Both share the same
header, row and section templates.
"""

import re
from typing import Callable, Dict, List, Optional, Union

from jinja2 import TemplateError
from markupsafe import Markup

from resumeai.contexts.templating.defaults import DEFAULT_SETTINGS, FONT_FAMILIES
from resumeai.contexts.templating.exceptions import TemplateRenderError
from resumeai.contexts.templating.layouts import LayoutDefinition
from resumeai.contexts.templating.logger import _log_debug
from resumeai.contexts.templating.registries import TemplateRegistry
from resumeai.contexts.templating.resume_data_structure import ResumeDocument, SectionOrder
from resumeai.contexts.templating.section_builder import PlacedSection, RenderPlan, arrange
from resumeai.utils.text_processing import set_max_consecutive_blank_lines

_CSS_COLOR = re.compile(r"^(#[0-9a-fA-F]{3,8}|[a-zA-Z]+)$")

# Returns the control payload for a placed section, or None for no controls
ControlsFactory = Callable[[PlacedSection], Optional[Dict]]


def _css_color(value: str, fallback: str) -> str:
    return value if value and _CSS_COLOR.match(value) else fallback


def _font_family(value: str) -> str:
    return value if value in FONT_FAMILIES else DEFAULT_SETTINGS["fontFamily"]


class HTMLGenerator:
    """Renders RenderPlans through the template registry."""

    def __init__(self, template_registry: TemplateRegistry = None):
        self.template_registry = template_registry or TemplateRegistry()

    def _render(self, type_name: str, template, **context) -> str:
        try:
            return template.render(**context)
        except TemplateError as e:
            raise TemplateRenderError(
                f"Failed to render '{type_name}'",
                type_name=type_name,
                template_path=self.template_registry.get_template_path(type_name),
                original_error=e,
            ) from e

    def generate_section(self, placed: PlacedSection, controls: Optional[Dict] = None) -> Markup:
        """
        Generate HTML for a single placed section.

        Args:
            placed: Section with its bucket's title/controls permissions
            controls: Reorder control payload (index, can_move_up, can_move_down) or None

        Returns:
            Markup for the wrapped section
        """
        section = placed.section
        try:
            template = self.template_registry.get_template(section.tag)
        except TemplateError as e:
            raise TemplateRenderError(
                f"No template for section '{section.tag}'",
                type_name=section.tag,
                template_path=self.template_registry.get_template_path(section.tag),
                original_error=e,
            ) from e

        content = self._render(section.tag, template, section=section)
        wrapper = self.template_registry.get_wrapper_template("section_wrapper")
        return Markup(
            self._render(
                "section_wrapper",
                wrapper,
                tag=section.tag,
                title=section.title,
                show_title=placed.show_title,
                controls=controls,
                content=Markup(content),
            )
        )

    def _render_rows(self, plan: RenderPlan, controls_for: ControlsFactory) -> List[List[Dict]]:
        rows = []
        for row in plan.rows:
            rendered_row = []
            for arranged in row:
                rendered_row.append(
                    {
                        "name": arranged.bucket.name,
                        "width": arranged.bucket.width,
                        "sections": [
                            self.generate_section(placed, controls_for(placed))
                            for placed in arranged.sections
                        ],
                    }
                )
            rows.append(rendered_row)
        return rows

    def _base_context(self, plan: RenderPlan, controls_for: ControlsFactory) -> Dict:
        return {
            "layout": plan.layout,
            "header": plan.header,
            "rows": self._render_rows(plan, controls_for),
            "font_family": _font_family(plan.settings.font_family),
            "font_size": plan.settings.font_size,
            "accent_color": _css_color(plan.layout.accent_color, "#000000"),
            "theme_color": _css_color(plan.settings.theme_color, DEFAULT_SETTINGS["themeColor"]),
        }

    def generate_document(self, plan: RenderPlan, title: str = None, auto_print: bool = False) -> str:
        """
        Generate the complete print document.

        Args:
            plan: Arranged resume
            title: Document title (default: the header name)
            auto_print: Embed a script that opens the print dialog on load

        Returns:
            Self-contained HTML document string
        """
        template = self.template_registry.get_structure_template("document")
        html = self._render(
            "document",
            template,
            title=title or plan.header.name,
            auto_print=auto_print,
            **self._base_context(plan, lambda placed: None),
        )
        _log_debug(f"Generated export document ({len(html)} chars) with layout '{plan.layout.display_name}'")
        return set_max_consecutive_blank_lines(html, max_consecutive=1)

    def generate_preview(self, plan: RenderPlan, controls_for: ControlsFactory) -> str:
        """
        Generate the screen preview fragment.

        Args:
            plan: Arranged resume
            controls_for: Callable giving each section's reorder controls (or None)

        Returns:
            HTML fragment string
        """
        template = self.template_registry.get_structure_template("preview")
        html = self._render("preview", template, **self._base_context(plan, controls_for))
        return set_max_consecutive_blank_lines(html, max_consecutive=1)


def render_export_document(
    document: ResumeDocument,
    order: Union[SectionOrder, List[str], None],
    layout: Union[LayoutDefinition, int],
    title: str = None,
    auto_print: bool = False,
    generator: HTMLGenerator = None,
) -> str:
    """
    Render the static, print-ready HTML document for a resume.

    Args:
        document: Resume to render (not modified)
        order: Section order; only top-down layouts follow it
        layout: LayoutDefinition or layout id (unknown ids render as layout 1)
        title: Document title (default: the resume's name)
        auto_print: Open the print dialog when the document loads
        generator: HTMLGenerator to use (default: a new one over packaged templates)

    Returns:
        HTML document string with an embedded A4 print stylesheet
    """
    generator = generator or HTMLGenerator()
    plan = arrange(document, order, layout)
    return generator.generate_document(plan, title=title, auto_print=auto_print)
