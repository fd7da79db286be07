"""
Templating Registries

Centralized registry for loading and caching the HTML templates that draw
each section type and the document structure.
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

load_dotenv()
TEMPLATE_PATH = Path(os.getenv("RESUMEAI_TEMPLATE_PATH", str(Path(__file__).parent / "template")))


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for HTML generation.

    Layout on disk (relative to the template root):
    - types/{section_tag}/template.html.jinja   one per section type
    - structure/{name}.html.jinja               whole-document templates
    - wrappers/{name}.html.jinja                section chrome (title, controls)
    """

    def __init__(self, template_root: Path = None):
        """
        Initialize the template registry.

        Args:
            template_root: Root template directory. Defaults to
                           RESUMEAI_TEMPLATE_PATH from environment, else the
                           packaged templates
        """
        if template_root is None:
            template_root = TEMPLATE_PATH

        self.template_root = Path(template_root)
        self.types_base_path = self.template_root / "types"
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.template_root)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def get_template(self, type_name: str) -> Template:
        """
        Get a section template by type name, loading and caching it if necessary.

        Args:
            type_name: Section tag (e.g., 'work')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if type_name in self._cache:
            return self._cache[type_name]

        template_path = f"types/{type_name}/template.html.jinja"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for type '{type_name}' at {self.template_root / template_path}"
            ) from e

        self._cache[type_name] = template
        return template

    def get_structure_template(self, name: str) -> Template:
        """Get a whole-document template (e.g., 'document', 'preview')."""
        return self.env.get_template(f"structure/{name}.html.jinja")

    def get_wrapper_template(self, name: str) -> Template:
        """Get a wrapper template (e.g., 'section_wrapper')."""
        return self.env.get_template(f"wrappers/{name}.html.jinja")

    def get_template_path(self, type_name: str) -> Path:
        """
        Get the file path for a type's template.

        Args:
            type_name: Section tag

        Returns:
            Path to template file
        """
        return self.types_base_path / type_name / "template.html.jinja"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, type_name: str) -> bool:
        return type_name in self._cache

    def get_template_source(self, type_name: str) -> str:
        """
        Get the raw template source code for a type.

        Useful for showing the expected markup in error messages.
        """
        template_path = self.get_template_path(type_name)

        if not template_path.exists():
            return f"Template not found: {template_path}"

        return template_path.read_text(encoding="utf-8")
