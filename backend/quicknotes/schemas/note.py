"""
QuickNotes Backend — Pydantic Note Schemas
============================================

What:  Pydantic models for the stored note shape and the API contract.
Why:   One definition validates what comes off disk and what goes to clients.
How:   `NoteDocument` mirrors the persisted envelope `{"notes": [...]}`;
       response models wrap notes for the loader endpoints.

Persisted document:
    {
        "notes": [
            {"id": "…", "title": "…", "content": "…", "created_at": "…"}
        ]
    }

    Older documents have no `created_at` and use an ISO timestamp as `id`.
    They still validate: `created_at` is optional and unknown keys are ignored.
"""

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


def new_note_id() -> str:
    """Identifier generator for new notes, independent of any timestamp."""
    return str(uuid.uuid4())


def utc_timestamp() -> str:
    """Current time as an ISO-8601 UTC string."""
    return datetime.now(timezone.utc).isoformat()


# ══════════════════════════════════════════════════════════════════════════
# Stored Models — What lives in the JSON document
# ══════════════════════════════════════════════════════════════════════════


class Note(BaseModel):
    """
    What:  A single title/content record.
    Who:   Built by NoteService on create; loaded by NoteStore on every read.

    Why these fields:
        - id: identity for detail lookups; never supplied by the client
        - title / content: free text entered in the form
        - created_at: display timestamp, kept apart from the identity
    """
    id: str = Field(description="Unique note identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note body")
    created_at: Optional[str] = Field(
        default=None,
        description="Creation time (UTC ISO 8601); absent on legacy notes",
    )

    model_config = {"extra": "ignore"}


class NoteDocument(BaseModel):
    """Envelope written to disk: a single `notes` field holding the collection."""
    notes: List[Note] = Field(default_factory=list)

    model_config = {"extra": "ignore"}

    @field_validator("notes", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        # {"notes": null} is treated like a document with no notes
        return [] if v is None else v


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class NoteListResponse(BaseModel):
    """
    What:  Loader payload for the notes page.
    Who:   Returned by GET /api/notes.

    An empty `notes` list is a normal answer under the "empty_state" policy;
    the client renders its "no notes available" view.
    """
    notes: List[Note] = Field(description="All notes in insertion order")


class PageMeta(BaseModel):
    """Document title and description for the note detail page."""
    title: str
    description: str


class NoteDetailResponse(BaseModel):
    """
    What:  Loader payload for a single note's detail page.
    Who:   Returned by GET /api/notes/{note_id}.
    """
    note: Note = Field(description="The selected note")
    meta: PageMeta = Field(description="Page metadata derived from the note")


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for all API errors.

    Fields:
        error: Machine-readable classification (validation_error, not_found, ...)
        message: Human-readable description for display to users
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and storage status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    storage: str = Field(description="Notes document: available, missing, unreadable")
    note_count: int = Field(description="Number of stored notes (0 when unreadable)")
    uptime_seconds: float = Field(description="Seconds since service started")
