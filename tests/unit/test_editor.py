"""Unit tests for the editing session."""

import pytest

from resumeai.contexts.editing import ResumeEditor
from resumeai.contexts.editing.exceptions import ReadOnlySessionError
from resumeai.contexts.templating.exceptions import InvalidSettingError
from resumeai.contexts.templating.resume_data_structure import ResumeDocument


@pytest.fixture
def editor(sample_document, store):
    return ResumeEditor(document=sample_document, store=store)


@pytest.mark.unit
def test_new_editor_opens_fresh_document():
    """Test that a new editor opens a fresh document in layout 1."""
    editor = ResumeEditor()
    assert editor.document == ResumeDocument.fresh()
    assert editor.layout.layout_id == 1
    assert editor.record_id is None


@pytest.mark.unit
def test_update_personal(editor):
    """Test editing personal details."""
    editor.update_personal("github", "github.com/jane")
    assert editor.document.personal.github == "github.com/jane"
    with pytest.raises(ValueError):
        editor.update_personal("twitter", "@jane")


@pytest.mark.unit
def test_summary_edits(editor):
    """Test editing the summary text and visibility."""
    editor.update_summary("New summary")
    editor.set_summary_visible(False)
    assert editor.document.summary.content == "New summary"
    assert editor.document.summary.visible is False


@pytest.mark.unit
def test_update_setting(editor):
    """Test changing theme color, font family and font size."""
    editor.update_setting("fontFamily", "'Fira Code', monospace")
    editor.update_setting("font_size", 12.5)
    editor.update_setting("theme_color", "#ff0000")
    settings = editor.document.settings
    assert settings.font_family == "'Fira Code', monospace"
    assert settings.font_size == 12.5
    assert settings.theme_color == "#ff0000"


@pytest.mark.unit
@pytest.mark.parametrize(
    "field,value",
    [
        ("font_family", "Comic Sans MS"),
        ("font_size", 7.5),
        ("font_size", 14.5),
        ("font_size", "huge"),
        ("theme_color", "red; background: url(x)"),
    ],
)
def test_invalid_settings_raise(editor, field, value):
    """Test that invalid setting values are rejected."""
    with pytest.raises(InvalidSettingError):
        editor.update_setting(field, value)


@pytest.mark.unit
def test_unknown_setting(editor):
    """Test that an unknown setting name is rejected."""
    with pytest.raises(ValueError):
        editor.update_setting("lineHeight", 2)


@pytest.mark.unit
def test_update_item(editor):
    """Test editing a collection item field."""
    editor.update_item("work", "w1", "company", "Acme Corp")
    editor.update_item("work", "w1", "desc", "• Rewrote billing")
    work = editor.document.find_item("work", "w1")
    assert work.company == "Acme Corp"
    assert work.description == "• Rewrote billing"


@pytest.mark.unit
def test_update_item_errors(editor):
    """Test errors for unknown items, sections and fields."""
    with pytest.raises(KeyError):
        editor.update_item("work", "nope", "company", "X")
    with pytest.raises(ValueError):
        editor.update_item("work", "w1", "salary", "X")
    with pytest.raises(ValueError):
        editor.update_item("hobbies", "h1", "name", "X")
    with pytest.raises(ValueError):
        editor.update_item("work", "w1", "id", "other")


@pytest.mark.unit
@pytest.mark.parametrize("value", [None, 42, ["link"]])
def test_non_text_values_are_rejected(editor, value):
    """Text fields only accept strings, so a bad edit never reaches rendering."""
    with pytest.raises(ValueError):
        editor.update_item("projects", "p1", "link", value)
    with pytest.raises(ValueError):
        editor.update_personal("email", value)
    with pytest.raises(ValueError):
        editor.update_summary(value)
    assert "resumectl" in editor.export_markup()


@pytest.mark.unit
def test_add_item(editor):
    """Test adding collection items."""
    item_id = editor.add_item("projects")
    project = editor.document.projects[-1]
    assert project.id == item_id
    assert project.description == "• "

    skill_id = editor.add_item("skills")
    assert editor.document.skills[-1].id == skill_id
    assert editor.document.skills[-1].name == ""


@pytest.mark.unit
def test_delete_item(editor):
    """Test deleting a collection item."""
    editor.delete_item("work", "w1")
    assert [w.id for w in editor.document.work] == ["w2"]
    with pytest.raises(KeyError):
        editor.delete_item("work", "w1")


@pytest.mark.unit
def test_set_item_visible(editor):
    """Test hiding and showing entries."""
    editor.set_item_visible("education", "e1", False)
    assert editor.document.education[0].visible is False
    with pytest.raises(ValueError):
        editor.set_item_visible("skills", "s1", False)


@pytest.mark.unit
def test_press_enter_in_description_continues_bullets(editor):
    """Test that Enter in a description starts a new bullet."""
    work = editor.document.find_item("work", "w2")
    cursor = editor.press_enter("work", "w2", len(work.description))
    assert work.description == "• Maintained TPS reports\n• "
    assert cursor == len(work.description)


@pytest.mark.unit
def test_press_enter_in_summary_is_plain(editor):
    """Test that Enter in the summary inserts a plain line break."""
    editor.update_summary("One")
    cursor = editor.press_enter("summary", None, 3)
    assert editor.document.summary.content == "One\n"
    assert cursor == 4


@pytest.mark.unit
def test_press_enter_elsewhere(editor):
    """Test that Enter is rejected in sections without free text."""
    with pytest.raises(ValueError):
        editor.press_enter("education", "e1", 0)


@pytest.mark.unit
def test_move_section(editor):
    """Test moving a section within the order."""
    order = editor.move_section(1, "up")
    assert order[0] == "education"
    assert editor.order is order


@pytest.mark.unit
def test_select_layout(editor):
    """Test layout selection."""
    assert editor.select_layout(6).display_name == "Academic"
    assert editor.select_layout(999).layout_id == 1


@pytest.mark.unit
def test_save_creates_then_updates(editor, store):
    """Test that the first save creates a record and later saves update it."""
    first = editor.save("Jane Doe")
    assert editor.record_id == first["id"]

    editor.update_personal("phone", "+1 555 0199")
    second = editor.save("Jane Doe v2")
    assert second["id"] == first["id"]
    assert len(store.list_records()) == 1
    assert store.get(first["id"])["name"] == "Jane Doe v2"


@pytest.mark.unit
def test_save_name_falls_back(store):
    """Test that saving without a name uses the resume's name."""
    editor = ResumeEditor(store=store)
    assert editor.save("   ")["name"] == "Resume"

    editor.update_personal("name", "Jane Doe")
    assert editor.save(None)["name"] == "Jane Doe"


@pytest.mark.unit
def test_from_record_edit_mode(editor, store):
    """Test opening a saved record for editing."""
    record = editor.save("Jane Doe")
    reopened, notice = ResumeEditor.from_record(record, store=store)
    assert notice is None
    assert reopened.document == editor.document
    assert reopened.record_id == record["id"]

    reopened.update_summary("Edited")
    reopened.save("Jane Doe")
    assert len(store.list_records()) == 1


@pytest.mark.unit
def test_from_record_with_malformed_data(store):
    """Test that malformed saved data opens a fresh document with a notice."""
    editor, notice = ResumeEditor.from_record({"id": "x", "name": "Bad", "data": "{oops"}, store=store)
    assert notice == "Could not load saved data"
    assert editor.document == ResumeDocument.fresh()


@pytest.mark.unit
def test_saving_after_malformed_load_keeps_original_record(sample_document, store):
    """Saving a session opened on malformed data creates a new record and leaves the original blob as it was."""
    original = store.create("Jane", sample_document)
    records = store._read()
    records[0]["data"] = original["data"][:40]
    store._write(records)

    editor, notice = ResumeEditor.from_record(store.get(original["id"]), store=store)
    assert notice == "Could not load saved data"
    assert editor.record_id is None

    saved = editor.save("Jane")
    assert saved["id"] != original["id"]
    assert store.get(original["id"])["data"] == original["data"][:40]
    assert len(store.list_records()) == 2


@pytest.mark.unit
def test_view_mode_blocks_mutations(editor, store):
    """Test that view mode rejects every mutation but allows layout changes."""
    record = editor.save("Jane Doe")
    viewer, _ = ResumeEditor.from_record(record, store=store, read_only=True)

    mutations = [
        lambda: viewer.update_personal("name", "X"),
        lambda: viewer.update_summary("X"),
        lambda: viewer.set_summary_visible(False),
        lambda: viewer.update_setting("font_size", 12),
        lambda: viewer.update_item("work", "w1", "company", "X"),
        lambda: viewer.add_item("skills"),
        lambda: viewer.delete_item("work", "w1"),
        lambda: viewer.set_item_visible("work", "w1", False),
        lambda: viewer.press_enter("work", "w1", 0),
        lambda: viewer.move_section(1, "up"),
        lambda: viewer.save("X"),
    ]
    for mutate in mutations:
        with pytest.raises(ReadOnlySessionError):
            mutate()

    assert viewer.document == editor.document
    assert viewer.preview().section_tags()
    assert viewer.select_layout(3).layout_id == 3


@pytest.mark.unit
def test_preview_and_export_markup_follow_session_state(editor):
    """Test that preview and export reflect the current session."""
    editor.move_section(2, "up")
    assert editor.preview().section_tags()[:3] == ["summary", "work", "education"]
    assert "Jane Doe" in editor.export_markup()
