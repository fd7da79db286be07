"""
Editing Context

Responsibilities:
- Holds one editing session: the document, its section order and layout
- Applies field edits, list add/delete/visibility and section moves
- Inserts bullet paragraph breaks in work and project descriptions
- Opens saved records for editing or read-only viewing

Owns: Session state and mutations
Never: Decides how sections are laid out or printed
"""

from resumeai.contexts.editing.editor import ResumeEditor
from resumeai.contexts.editing.exceptions import ReadOnlySessionError

__all__ = ["ResumeEditor", "ReadOnlySessionError"]
