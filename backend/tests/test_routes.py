"""
QuickNotes Backend — HTTP Route Tests
=======================================

What:  End-to-end tests through the FastAPI app with HTTPX ASGITransport.
Why:   Verifies the loader/action contract the presentation layer relies on:
       JSON bodies, the 303 redirect, and structured error payloads.
"""

import logging
import re

import pytest

from quicknotes.config import settings
from quicknotes.services.note_service import NoteService


class TestNotesLoader:

    @pytest.mark.asyncio
    async def test_list_empty(self, test_client):
        response = await test_client.get("/api/notes")

        assert response.status_code == 200
        assert response.json() == {"notes": []}
        assert response.headers["X-Total-Count"] == "0"

    @pytest.mark.asyncio
    async def test_list_with_notes(self, test_client, write_notes, sample_notes):
        write_notes({"notes": sample_notes})

        response = await test_client.get("/api/notes")

        assert response.status_code == 200
        body = response.json()
        assert [n["title"] for n in body["notes"]] == ["Groceries", "Meeting notes"]
        assert response.headers["X-Total-Count"] == "2"

    @pytest.mark.asyncio
    async def test_list_malformed_document(self, test_client, write_notes):
        write_notes("{oops")

        response = await test_client.get("/api/notes")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "storage_error"
        assert body["message"] == "Failed to load notes"
        # Paths and parser output stay server-side
        assert "details" not in body

    @pytest.mark.asyncio
    async def test_list_empty_as_not_found(self, test_client, service, store):
        service.empty_notes_policy = "not_found"

        response = await test_client.get("/api/notes")

        assert response.status_code == 404
        assert response.json()["message"] == "No notes found"


class TestNotesAction:

    @pytest.mark.asyncio
    async def test_create_redirects(self, test_client):
        response = await test_client.post(
            "/api/notes", data={"title": "Groceries", "content": "Milk, eggs"}
        )

        assert response.status_code == 303
        assert response.headers["location"] == settings.list_redirect_url

        listing = await test_client.get("/api/notes")
        notes = listing.json()["notes"]
        assert len(notes) == 1
        assert notes[0]["title"] == "Groceries"
        assert notes[0]["content"] == "Milk, eggs"
        assert notes[0]["id"]

    @pytest.mark.asyncio
    async def test_short_title_is_400(self, test_client, store):
        response = await test_client.post("/api/notes", data={"title": "Hi", "content": "x"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["message"] == "Invalid title - must be at least 5 characters long"
        assert body["details"] == {"field": "title"}
        assert await store.load() == []

    @pytest.mark.asyncio
    async def test_missing_fields_is_400(self, test_client):
        response = await test_client.post("/api/notes", data={})

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_missing_content_is_400(self, test_client):
        response = await test_client.post("/api/notes", data={"title": "Groceries"})

        assert response.status_code == 400
        assert response.json()["details"] == {"field": "content"}


class TestNoteDetailLoader:

    @pytest.mark.asyncio
    async def test_detail_found(self, test_client, write_notes, sample_notes):
        write_notes({"notes": sample_notes})

        response = await test_client.get("/api/notes/2024-05-01T12:00:00.000Z")

        assert response.status_code == 200
        body = response.json()
        assert body["note"]["title"] == "Groceries"
        assert body["meta"] == {
            "title": "Groceries",
            "description": "Details for note: Groceries",
        }

    @pytest.mark.asyncio
    async def test_detail_not_found(self, test_client, write_notes, sample_notes):
        write_notes({"notes": sample_notes})

        response = await test_client.get("/api/notes/does-not-exist")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "not_found"
        assert body["message"] == "Could not find note for id does-not-exist"


class TestAmbient:

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/api/notes", headers={"X-Request-ID": "abc12345"})
        assert response.headers["X-Request-ID"] == "abc12345"

    @pytest.mark.asyncio
    async def test_request_id_in_error_body(self, test_client):
        response = await test_client.get("/api/notes/nope", headers={"X-Request-ID": "trace-1"})
        assert response.json()["request_id"] == "trace-1"

    @pytest.mark.asyncio
    async def test_health_missing_document(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["storage"] == "missing"
        assert body["note_count"] == 0

    @pytest.mark.asyncio
    async def test_health_reports_count(self, test_client, write_notes, sample_notes):
        write_notes({"notes": sample_notes})

        body = (await test_client.get("/health")).json()

        assert body["storage"] == "available"
        assert body["note_count"] == 2

    @pytest.mark.asyncio
    async def test_health_unreadable(self, test_client, write_notes):
        write_notes("[]")

        body = (await test_client.get("/health")).json()

        assert body["status"] == "unhealthy"
        assert body["storage"] == "unreadable"


def test_service_defaults_follow_settings():
    service = NoteService()
    assert service.min_title_length == settings.min_title_length
    assert service.empty_notes_policy == settings.empty_notes_policy
    assert str(service.store.path) == settings.notes_file


class TestUndecodableDocument:

    BAD_BYTES = b'{"notes": [{"id": "a", "title": "\xff\xfe bad", "content": "x"}]}'

    @pytest.mark.asyncio
    async def test_list_is_storage_error(self, test_client, notes_path):
        notes_path.parent.mkdir(parents=True)
        notes_path.write_bytes(self.BAD_BYTES)

        response = await test_client.get("/api/notes")

        assert response.status_code == 500
        assert response.json()["error"] == "storage_error"

    @pytest.mark.asyncio
    async def test_health_reports_unreadable(self, test_client, notes_path):
        notes_path.parent.mkdir(parents=True)
        notes_path.write_bytes(self.BAD_BYTES)

        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "unhealthy"
        assert body["storage"] == "unreadable"


class TestAccessLog:

    @pytest.mark.asyncio
    async def test_redirect_logs_location(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="quicknotes.access")

        await test_client.post(
            "/api/notes",
            data={"title": "Groceries", "content": "Milk, eggs"},
            headers={"X-Request-ID": "log-1"},
        )

        lines = [r.getMessage() for r in caplog.records if r.name == "quicknotes.access"]
        assert len(lines) == 1
        assert re.fullmatch(
            r"POST /api/notes -> 303 in [0-9.]+ms \[log-1\] location=" + re.escape(settings.list_redirect_url),
            lines[0],
        )

    @pytest.mark.asyncio
    async def test_client_errors_log_as_warning(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="quicknotes.access")

        await test_client.post("/api/notes", data={"title": "Hi", "content": "x"})

        records = [r for r in caplog.records if r.name == "quicknotes.access"]
        assert [r.levelno for r in records] == [logging.WARNING]

    @pytest.mark.asyncio
    async def test_health_not_logged(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="quicknotes.access")

        await test_client.get("/health")

        assert not [r for r in caplog.records if r.name == "quicknotes.access"]
