"""Integration tests for the print-ready export document."""

import re

import pytest

from resumeai.contexts.templating import SectionOrder, render_export_document
from resumeai.contexts.templating.defaults import SECTION_TAGS


def _section_sequence(html):
    return re.findall(r'data-section="(\w+)"', html)


@pytest.mark.integration
def test_print_stylesheet(sample_document):
    """Test the print stylesheet sets page size, margins and fonts."""
    html = render_export_document(sample_document, None, 1)
    assert html.startswith("<!DOCTYPE html>")
    assert re.search(r"@page\s*{\s*size: A4;\s*margin: 20mm;", html)
    assert re.search(r"\.section\s*{[^}]*page-break-inside: avoid;", html)
    assert re.search(r"\.entry\s*{[^}]*page-break-inside: avoid;", html)
    assert "font-family: Georgia, serif;" in html
    assert "font-size: 11pt;" in html


@pytest.mark.integration
def test_settings_flow_into_stylesheet(sample_document):
    """Test that font family, size and theme color reach the stylesheet."""
    sample_document.settings.font_family = "'Fira Code', monospace"
    sample_document.settings.font_size = 9.5
    html = render_export_document(sample_document, None, 1)
    assert "font-family: 'Fira Code', monospace;" in html
    assert "font-size: 9.5pt;" in html


@pytest.mark.integration
def test_accent_color_comes_from_layout(sample_document):
    """Test that the accent color is taken from the layout."""
    assert "#7c3aed" in render_export_document(sample_document, None, 6)
    assert "#7c3aed" not in render_export_document(sample_document, None, 1)


@pytest.mark.integration
def test_header(sample_document):
    """Test rendering of the name and contact header."""
    html = render_export_document(sample_document, None, 3)
    assert "<title>Jane Doe</title>" in html
    assert "<h1>Jane Doe</h1>" in html
    assert "text-align: center;" in html
    assert 'class="contact contact-email">jane@example.com<' in html
    assert "contact-github" not in html


@pytest.mark.integration
def test_title_override(sample_document):
    """Test that an explicit title replaces the default document title."""
    assert "<title>Jane Doe CV</title>" in render_export_document(sample_document, None, 1, title="Jane Doe CV")


@pytest.mark.integration
def test_top_down_sequence_matches_order(sample_document):
    """Test that top-down layouts print sections in the user's order."""
    order = SectionOrder(["projects", "skills", "summary", "work", "languages", "education"])
    html = render_export_document(sample_document, order, 8)
    assert _section_sequence(html) == list(order)


@pytest.mark.integration
def test_top_down_sequence_skips_empty_sections(sample_document):
    """Test that empty sections are left out of the top-down sequence."""
    sample_document.languages = []
    sample_document.summary.content = "  \n "
    order = SectionOrder(["languages", "work", "summary", "education", "skills", "projects"])
    html = render_export_document(sample_document, order, 1)
    assert _section_sequence(html) == ["work", "education", "skills", "projects"]


@pytest.mark.integration
@pytest.mark.parametrize("layout_id", [5, 6, 7, 9])
def test_structured_layouts_ignore_permutation(sample_document, layout_id):
    """Test that grid and sidebar layouts place sections by their fixed buckets."""
    default = render_export_document(sample_document, SectionOrder(), layout_id)
    shuffled = render_export_document(sample_document, SectionOrder(list(reversed(SECTION_TAGS))), layout_id)
    assert default == shuffled


@pytest.mark.integration
def test_sidebar_renders_without_titles(sample_document):
    """Test that sidebar sections render without their titles."""
    html = render_export_document(sample_document, None, 6)
    assert "Work Experience" in html
    assert ">Skills<" not in html
    assert ">Languages<" not in html
    assert "Python" in html and "English" in html


@pytest.mark.integration
def test_bullets_are_stripped(sample_document):
    """Test that bullet markers are stripped from printed descriptions."""
    html = render_export_document(sample_document, None, 1)
    assert "•" not in html
    assert "Led a team of 5<br>Shipped v2" in html
    assert "Backend engineer<br>Likes distributed systems" in html


@pytest.mark.integration
def test_whitespace_summary_is_absent(sample_document):
    """Test that a whitespace-only summary is not printed."""
    sample_document.summary.content = "   \n\t"
    html = render_export_document(sample_document, None, 1)
    assert "section-summary" not in html
    assert "Professional Summary" not in html


@pytest.mark.integration
def test_unknown_layout_renders_like_layout_one(sample_document):
    """Test that an unknown layout id renders as layout 1."""
    assert render_export_document(sample_document, None, 999) == render_export_document(sample_document, None, 1)


@pytest.mark.integration
def test_export_has_no_controls_and_optional_print_script(sample_document):
    """Test the export document has no move controls and only prints on request."""
    html = render_export_document(sample_document, None, 1)
    assert "<button" not in html
    assert "window.print()" not in html
    assert "window.print()" in render_export_document(sample_document, None, 1, auto_print=True)


@pytest.mark.integration
def test_user_text_is_escaped(sample_document):
    """Test that user-entered text is HTML-escaped."""
    sample_document.personal.name = "<script>alert(1)</script>"
    sample_document.work[0].description = "• <b>bold</b>"
    html = render_export_document(sample_document, None, 1)
    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html
    assert "&lt;b&gt;bold&lt;/b&gt;" in html


@pytest.mark.integration
def test_rendering_does_not_mutate_document(sample_document):
    """Rendering leaves the document unchanged."""
    before = sample_document.to_json()
    render_export_document(sample_document, None, 7)
    assert sample_document.to_json() == before
