"""
Default values for the resumeai document model.

Provides shared defaults used by:
- resume_data_structure.py (fresh documents, lenient settings on load)
- section_builder.py (section titles, placeholders for blank fields)
- editing/editor.py (templates for newly added items)
"""

from typing import Any, Dict

# Fixed section tag set; this tuple is also the default top-down order
SECTION_TAGS = ("summary", "education", "work", "projects", "skills", "languages")
DEFAULT_SECTION_ORDER = SECTION_TAGS

# Collections addressed by item id
COLLECTION_SECTIONS = ("education", "work", "projects", "skills", "languages")

# Sections whose description field auto-continues bullets on Enter
BULLETED_SECTIONS = ("work", "projects")

SECTION_TITLES = {
    "summary": "Professional Summary",
    "education": "Education",
    "work": "Work Experience",
    "projects": "Key Projects",
    "skills": "Skills",
    "languages": "Languages",
}

# Shown in place of blank fields so a half-filled entry still previews sensibly
PLACEHOLDERS = {
    "name": "YOUR NAME",
    "company": "Company",
    "role": "Position",
    "school": "School",
    "degree": "Degree",
    "project": "Project",
    "skill": "Skill",
    "language": "Language",
    "work_end": "Present",
}

FONT_FAMILIES = (
    "Georgia, serif",
    "'Times New Roman', serif",
    "'Playfair Display', serif",
    "'Merriweather', serif",
    "'Inter', sans-serif",
    "'Roboto', sans-serif",
    "'Open Sans', sans-serif",
    "'Poppins', sans-serif",
    "'Montserrat', sans-serif",
    "'Lato', sans-serif",
    "'Courier New', monospace",
    "'Fira Code', monospace",
)

FONT_SIZE_MIN = 8.0
FONT_SIZE_MAX = 14.0
FONT_SIZE_STEP = 0.5

DEFAULT_SETTINGS = {
    "themeColor": "#2563eb",
    "fontFamily": "Georgia, serif",
    "fontSize": 11,
}


def get_fresh_document_data() -> Dict[str, Any]:
    """
    Get the JSON shape of the document a fresh editor opens with.

    Every collection holds one blank entry so the form has something to fill in;
    work and project descriptions start with a bullet marker.

    Returns:
        Dict in the saved-resume wire format
    """
    return {
        "personal": {"name": "", "email": "", "phone": "", "linkedin": "", "github": ""},
        "summary": {"content": "", "visible": True},
        "education": [
            {"id": "e1", "school": "", "degree": "", "start": "", "end": "", "visible": True}
        ],
        "work": [
            {"id": "w1", "company": "", "role": "", "start": "", "end": "", "desc": "• ", "visible": True}
        ],
        "projects": [
            {"id": "p1", "name": "", "link": "", "start": "", "end": "", "desc": "• ", "visible": True}
        ],
        "skills": [{"id": "s1", "name": ""}],
        "languages": [{"id": "l1", "name": ""}],
        "settings": DEFAULT_SETTINGS.copy(),
    }
