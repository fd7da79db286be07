"""
Saved-Resume Store

Persists named resume snapshots in a single JSON file.
Store file defaults to outs/data/saved_resumes.json.

Schema (one object per record, newest first):
    id (str): uuid4 hex identifier (PRIMARY KEY)
    name (str): Display name chosen at save or export time
    data (str): JSON-encoded ResumeDocument in the browser wire format
    created_at (str): ISO 8601 timestamp of the first save
    updated_at (str): ISO 8601 timestamp of the last save

Usage:
    from resumeai.utils.resume_store import ResumeStore

    store = ResumeStore()
    record = store.create("Jane Doe", document)
    document, notice = store.load_document(store.get(record["id"]))
"""

import json
import os
import shutil
import tempfile
import uuid
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from dotenv import load_dotenv
from loguru import logger

from resumeai.contexts.templating.exceptions import InvalidResumeDataError
from resumeai.contexts.templating.resume_data_structure import ResumeDocument
from resumeai.utils.event_logging import log_resume_event
from resumeai.utils.timestamp import now_exact

load_dotenv()
DATA_PATH = Path(os.getenv("RESUMEAI_DATA_PATH", "outs/data"))
STORE_FILE = Path(os.getenv("RESUME_STORE_FILE", str(DATA_PATH / "saved_resumes.json")))

LOAD_FAILED_NOTICE = "Could not load saved data"

STORE_PREFIX = "[store]"


class ResumeStore:
    """
    JSON-file store of saved resumes.

    Every write replaces the whole file atomically (temp file, then move), so a
    crash mid-write leaves the previous contents intact.
    """

    def __init__(self, path: Path = None):
        """
        Args:
            path: Store file. Defaults to RESUME_STORE_FILE from environment
        """
        self.path = Path(path) if path is not None else STORE_FILE

    # ------------------------------------------------------------------
    # File access
    # ------------------------------------------------------------------

    def _read(self) -> List[Dict]:
        if not self.path.exists():
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                records = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"{STORE_PREFIX} Could not read {self.path}: {e}; treating store as empty")
            return []
        if not isinstance(records, list):
            logger.error(f"{STORE_PREFIX} {self.path} does not hold a list of records; treating store as empty")
            return []
        return [r for r in records if isinstance(r, dict) and "id" in r]

    def _write(self, records: List[Dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        # Write to temp file first (atomic write pattern)
        temp_fd, temp_path = tempfile.mkstemp(suffix=".json", dir=self.path.parent, text=True)
        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                json.dump(records, f, ensure_ascii=False, indent=2)

            # Only overwrite original if write succeeded
            shutil.move(temp_path, self.path)
        except Exception:
            # Clean up temp file if write failed
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def create(self, name: str, document: ResumeDocument) -> Dict:
        """
        Save a new record.

        Args:
            name: Display name
            document: Resume to snapshot

        Returns:
            The stored record dict
        """
        timestamp = now_exact()
        record = {
            "id": uuid.uuid4().hex,
            "name": name,
            "data": document.to_json(),
            "created_at": timestamp,
            "updated_at": timestamp,
        }
        records = self._read()
        records.insert(0, record)
        self._write(records)

        logger.info(f"{STORE_PREFIX} Saved '{name}' as {record['id']}")
        log_resume_event("record_created", record["id"], source="storage", name=name)
        return record

    def update(self, record_id: str, name: str, document: ResumeDocument) -> Dict:
        """
        Overwrite an existing record's name and data.

        Raises:
            KeyError: If no record has the given id
        """
        records = self._read()
        for record in records:
            if record["id"] == record_id:
                record["name"] = name
                record["data"] = document.to_json()
                record["updated_at"] = now_exact()
                break
        else:
            raise KeyError(f"No saved resume with id '{record_id}'")

        self._write(records)
        logger.info(f"{STORE_PREFIX} Updated '{name}' ({record_id})")
        log_resume_event("record_updated", record_id, source="storage", name=name)
        return record

    def get(self, record_id: str) -> Optional[Dict]:
        for record in self._read():
            if record["id"] == record_id:
                return record
        return None

    def exists(self, record_id: str) -> bool:
        return self.get(record_id) is not None

    def delete(self, record_id: str) -> bool:
        """
        Remove a record.

        Returns:
            True if a record was removed, False if the id was unknown
        """
        records = self._read()
        remaining = [r for r in records if r["id"] != record_id]
        if len(remaining) == len(records):
            return False

        self._write(remaining)
        logger.info(f"{STORE_PREFIX} Deleted {record_id}")
        log_resume_event("record_deleted", record_id, source="storage")
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_records(self) -> List[Dict]:
        """All records, newest first."""
        return sorted(self._read(), key=lambda r: r.get("created_at", ""), reverse=True)

    def search(self, query: str) -> List[Dict]:
        """
        Records whose name contains query (case-insensitive) or whose
        creation date contains it (e.g. "2026-10").
        """
        query = query.strip().lower()
        if not query:
            return self.list_records()
        return [
            r
            for r in self.list_records()
            if query in str(r.get("name", "")).lower() or query in r.get("created_at", "")[:10]
        ]

    def load_document(self, record: Dict) -> Tuple[ResumeDocument, Optional[str]]:
        """
        Decode a record's resume data.

        Malformed data yields a fresh document and a notice for the user
        instead of an error.

        Returns:
            (document, notice) where notice is None on success
        """
        try:
            return ResumeDocument.from_json(record.get("data")), None
        except InvalidResumeDataError as e:
            logger.warning(f"{STORE_PREFIX} Record {record.get('id')} has malformed data: {e}")
            return ResumeDocument.fresh(), LOAD_FAILED_NOTICE
