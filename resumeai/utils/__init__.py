"""
Shared utilities for resumeai.

Common functionality used across contexts:
- Text processing (bullet markers)
- Saved-resume store (resume_store.py)
- Logging and event log
- Timestamps
"""

from resumeai.utils.timestamp import now, now_exact, today

__all__ = ["now", "now_exact", "today"]
