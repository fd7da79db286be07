"""Shared fixtures. Output paths point at a scratch directory before resumeai is imported."""

import os
import tempfile
from pathlib import Path

_SCRATCH = Path(tempfile.mkdtemp(prefix="resumeai_tests_"))
os.environ.setdefault("RESUMEAI_DATA_PATH", str(_SCRATCH / "data"))
os.environ.setdefault("RESUME_STORE_FILE", str(_SCRATCH / "data" / "saved_resumes.json"))
os.environ.setdefault("LOGS_PATH", str(_SCRATCH / "logs"))
os.environ.setdefault("RESUME_EVENTS_FILE", str(_SCRATCH / "logs" / "resume_events.log"))
os.environ.setdefault("RESULTS_PATH", str(_SCRATCH / "results"))

import pytest  # noqa: E402

from resumeai.contexts.rendering.exceptions import PrintUnavailableError  # noqa: E402
from resumeai.contexts.templating.resume_data_structure import ResumeDocument  # noqa: E402
from resumeai.utils.resume_store import ResumeStore  # noqa: E402


SAMPLE_RESUME = {
    "personal": {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "phone": "+1 555 0100",
        "linkedin": "linkedin.com/in/janedoe",
        "github": "",
    },
    "summary": {"content": "• Backend engineer\n• Likes distributed systems", "visible": True},
    "education": [
        {"id": "e1", "school": "State University", "degree": "BSc Computer Science",
         "start": "2012", "end": "2016", "visible": True},
    ],
    "work": [
        {"id": "w1", "company": "Acme", "role": "Senior Engineer", "start": "2019", "end": "",
         "desc": "• Led a team of 5\n• Shipped v2", "visible": True},
        {"id": "w2", "company": "Initech", "role": "Engineer", "start": "2016", "end": "2019",
         "desc": "• Maintained TPS reports", "visible": True},
    ],
    "projects": [
        {"id": "p1", "name": "resumectl", "link": "github.com/jane/resumectl", "start": "2021",
         "end": "2022", "desc": "• CLI for resumes", "visible": True},
    ],
    "skills": [{"id": "s1", "name": "Python"}, {"id": "s2", "name": "PostgreSQL"}],
    "languages": [{"id": "l1", "name": "English"}, {"id": "l2", "name": "Spanish"}],
    "settings": {"themeColor": "#2563eb", "fontFamily": "Georgia, serif", "fontSize": 11},
}


class FakePrintBackend:
    """Records print requests; fails with PrintUnavailableError while fail is True."""

    auto_print = True

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls = []

    def print_document(self, markup, name):
        self.calls.append((markup, name))
        if self.fail:
            raise PrintUnavailableError("Pop-ups are blocked")
        return None


@pytest.fixture
def sample_document():
    return ResumeDocument.from_dict(SAMPLE_RESUME)


@pytest.fixture
def store(tmp_path):
    return ResumeStore(tmp_path / "saved_resumes.json")


@pytest.fixture
def events_file():
    from resumeai.utils.event_logging import RESUME_EVENTS_FILE

    return RESUME_EVENTS_FILE


@pytest.fixture
def fake_backend():
    return FakePrintBackend()


@pytest.fixture
def failing_backend():
    return FakePrintBackend(fail=True)
