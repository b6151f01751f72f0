"""
QuickNotes Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── notes_path: Location of a notes document inside tmp_path (not created)
    ├── write_notes: Helper that writes raw JSON / text to notes_path
    ├── store: NoteStore bound to notes_path
    ├── service: NoteService bound to store (strict 5-character titles)
    └── test_client: HTTPX AsyncClient with routes bound to `service`
"""

import json
import os
import tempfile

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Override settings BEFORE any quicknotes import so the module-level
# singletons never touch a real notes.json
os.environ["NOTES_FILE"] = os.path.join(
    tempfile.mkdtemp(prefix="quicknotes_test_"), "notes.json"
)
os.environ["LOG_LEVEL"] = "WARNING"

from quicknotes.services.note_service import NoteService, get_note_service  # noqa: E402
from quicknotes.services.note_store import NoteStore  # noqa: E402


@pytest.fixture
def notes_path(tmp_path):
    """Path of a notes document that does not exist yet."""
    return tmp_path / "data" / "notes.json"


@pytest.fixture
def write_notes(notes_path):
    """
    Writes a raw document to notes_path.

    Usage:
        write_notes({"notes": [...]})   # dumped as JSON
        write_notes("not json {")       # written verbatim
    """
    def _write(payload):
        notes_path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(payload, str):
            notes_path.write_text(payload, encoding="utf-8")
        else:
            notes_path.write_text(json.dumps(payload), encoding="utf-8")
        return notes_path

    return _write


@pytest.fixture
def store(notes_path):
    return NoteStore(path=str(notes_path))


@pytest.fixture
def service(store):
    return NoteService(store=store, min_title_length=5, empty_notes_policy="empty_state")


@pytest.fixture
def sample_notes():
    """Two notes in the legacy shape (timestamp ids, no created_at)."""
    return [
        {"id": "2024-05-01T12:00:00.000Z", "title": "Groceries", "content": "Milk, eggs"},
        {"id": "2024-05-02T08:30:00.000Z", "title": "Meeting notes", "content": "Ship v2"},
    ]


@pytest_asyncio.fixture
async def test_client(service):
    """
    Async HTTP client talking to a fresh app whose routes use `service`.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/notes")
            assert response.status_code == 200
    """
    from quicknotes.main import create_app

    app = create_app()
    app.dependency_overrides[get_note_service] = lambda: service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
