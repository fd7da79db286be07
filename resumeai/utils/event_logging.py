"""
Resume event logging utilities for resumeai (Tier 2 logging).

Appends save, delete and export events to a JSON Lines file so the history
of a saved resume can be reconstructed without parsing the detailed logs.

For detailed within-context logging (Tier 1), use resumeai.utils.logger instead.

Usage:
    from resumeai.utils.event_logging import log_resume_event

    log_resume_event(
        event_type="export_completed",
        record_id="3f2a...",
        source="rendering",
        layout="Classic ATS",
    )
"""

import json
import os
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv

from resumeai.utils.timestamp import now_exact

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
RESUME_EVENTS_FILE = Path(os.getenv("RESUME_EVENTS_FILE", str(LOGS_PATH / "resume_events.log")))


def log_resume_event(
    event_type: str,
    record_id: Optional[str],
    source: str,
    events_file: Path = None,
    **extra_fields,
) -> None:
    """
    Append an event to the resume event log.

    Args:
        event_type: Type of event (e.g., "record_created", "export_failed")
        record_id: Saved-resume identifier (None when no record is involved)
        source: Event source (e.g., "storage", "rendering", "cli")
        events_file: Override of the event log path (default: RESUME_EVENTS_FILE)
        **extra_fields: Additional event-specific fields
    """
    events_file = Path(events_file) if events_file is not None else RESUME_EVENTS_FILE
    events_file.parent.mkdir(parents=True, exist_ok=True)

    event = {
        "timestamp": now_exact(),
        "event_type": event_type,
        "record_id": record_id,
        "source": source,
        **extra_fields,
    }

    with open(events_file, "a", encoding="utf-8") as f:
        f.write(json.dumps(event) + "\n")


def read_resume_events(
    record_id: Optional[str] = None, events_file: Path = None
) -> List[Dict]:
    """
    Read events from the log, optionally filtered to a single record.

    Lines that are not valid JSON are skipped.

    Args:
        record_id: Only return events for this record (default: all events)
        events_file: Override of the event log path

    Returns:
        List of event dicts in file order
    """
    events_file = Path(events_file) if events_file is not None else RESUME_EVENTS_FILE
    if not events_file.exists():
        return []

    events = []
    with open(events_file, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                event = json.loads(line)
            except json.JSONDecodeError:
                continue
            if record_id is None or event.get("record_id") == record_id:
                events.append(event)
    return events
