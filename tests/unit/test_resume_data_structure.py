"""Unit tests for ResumeDocument and its JSON wire format."""

import json

import pytest

from resumeai.contexts.templating.defaults import DEFAULT_SETTINGS, FONT_SIZE_MAX, FONT_SIZE_MIN
from resumeai.contexts.templating.exceptions import InvalidResumeDataError
from resumeai.contexts.templating.html_generator import render_export_document
from resumeai.contexts.templating.layouts import get_layout
from resumeai.contexts.templating.resume_data_structure import ResumeDocument, SectionOrder


@pytest.mark.unit
def test_json_round_trip_is_identical(sample_document):
    """Test that a document survives a JSON round trip unchanged."""
    reloaded = ResumeDocument.from_json(sample_document.to_json())
    assert reloaded == sample_document
    assert reloaded.to_dict() == sample_document.to_dict()


@pytest.mark.unit
def test_wire_format_uses_desc_and_camel_case_settings(sample_document):
    """Test the saved-data key names."""
    data = sample_document.to_dict()
    assert data["work"][0]["desc"] == "• Led a team of 5\n• Shipped v2"
    assert "description" not in data["work"][0]
    assert set(data["settings"]) == {"themeColor", "fontFamily", "fontSize"}


@pytest.mark.unit
def test_bullet_markers_survive_round_trip(sample_document):
    """Stored text keeps its markers; only rendering strips them."""
    reloaded = ResumeDocument.from_json(sample_document.to_json())
    assert reloaded.work[0].description.startswith("• ")
    assert reloaded.work[0].description.count("•") == 2


@pytest.mark.unit
def test_description_alias_is_accepted():
    """Test that "description" is accepted in place of "desc"."""
    doc = ResumeDocument.from_dict({"work": [{"id": "w9", "description": "• Did things"}]})
    assert doc.work[0].description == "• Did things"


@pytest.mark.unit
def test_missing_keys_take_defaults():
    """Test that missing keys take default values."""
    doc = ResumeDocument.from_dict({})
    assert doc.personal.name == ""
    assert doc.summary.visible is True
    assert doc.work == []
    assert doc.settings.to_dict() == DEFAULT_SETTINGS


@pytest.mark.unit
def test_missing_item_ids_are_generated():
    """Test that items without ids get generated ids."""
    doc = ResumeDocument.from_dict({"skills": [{"name": "Go"}, {"name": "Rust"}]})
    assert doc.skills[0].id and doc.skills[1].id
    assert doc.skills[0].id != doc.skills[1].id


@pytest.mark.unit
def test_fresh_document_has_one_blank_entry_per_collection():
    """Test the state of a fresh document."""
    doc = ResumeDocument.fresh()
    assert [len(doc.collection(s)) for s in ("education", "work", "projects", "skills", "languages")] == [1] * 5
    assert doc.work[0].description == "• "
    assert doc.projects[0].description == "• "


@pytest.mark.unit
def test_unknown_font_falls_back_to_default():
    """Test that an unknown font falls back to the default font."""
    doc = ResumeDocument.from_dict({"settings": {"fontFamily": "Comic Sans MS"}})
    assert doc.settings.font_family == DEFAULT_SETTINGS["fontFamily"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "size,expected",
    [
        (30, FONT_SIZE_MAX),
        (2, FONT_SIZE_MIN),
        ("12.5", 12.5),
        ("big", 11),
        ("nan", 11),
        (float("nan"), 11),
        ("Infinity", 11),
        (float("-inf"), 11),
    ],
)
def test_font_size_is_corrected(size, expected):
    """Out-of-range sizes are clamped; unparseable and non-finite sizes fall back to the default."""
    doc = ResumeDocument.from_dict({"settings": {"fontSize": size}})
    assert doc.settings.font_size == expected


@pytest.mark.unit
def test_nan_literal_font_size_renders_default():
    """A JSON NaN font size never reaches the print stylesheet."""
    doc = ResumeDocument.from_json('{"settings": {"fontSize": NaN}}')
    assert doc.settings.font_size == 11
    assert "nanpt" not in render_export_document(doc, SectionOrder(), get_layout(1))


@pytest.mark.unit
@pytest.mark.parametrize(
    "data",
    [
        [],
        {"work": "not a list"},
        {"skills": ["Python"]},
        {"personal": "Jane"},
        {"settings": [1, 2]},
    ],
)
def test_malformed_structure_raises(data):
    """Test that structurally invalid data is rejected."""
    with pytest.raises(InvalidResumeDataError):
        ResumeDocument.from_dict(data)


@pytest.mark.unit
@pytest.mark.parametrize("text", ["{not json", "", None])
def test_malformed_json_raises(text):
    """Test that invalid JSON is rejected."""
    with pytest.raises(InvalidResumeDataError):
        ResumeDocument.from_json(text)


@pytest.mark.unit
def test_find_item(sample_document):
    """Test finding collection items by id."""
    assert sample_document.find_item("work", "w2").company == "Initech"
    with pytest.raises(KeyError):
        sample_document.find_item("work", "missing")
    with pytest.raises(ValueError):
        sample_document.find_item("summary", "w1")


@pytest.mark.unit
def test_to_json_is_valid_json(sample_document):
    """Test that to_json produces parseable JSON."""
    assert json.loads(sample_document.to_json())["personal"]["name"] == "Jane Doe"
