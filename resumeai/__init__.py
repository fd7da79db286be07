"""
resumeai - structured resume builder with multi-layout rendering

Compose a resume as structured data, preview it against one of ten visual
layouts, and export a print-ready HTML document that the browser turns into a PDF.

Architecture:
- Templating Context: Resume data model, layout catalog, section assembly, HTML output
- Editing Context: Field-by-field editing session and section reordering
- Rendering Context: Export flow (persist, then print) and print backends
"""

__version__ = "0.1.0"
