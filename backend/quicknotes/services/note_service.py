"""
QuickNotes Backend — Note Service (Loader / Action Orchestrator)
=================================================================

What:  The read and write paths behind the notes pages.
How:   Composes NoteStore and the validator; knows nothing about HTTP.
Who:   Called by route handlers in quicknotes.routes.notes.

Create Workflow (POST /api/notes):
    Received → Validated ─┬─▶ Rejected   (ValidationError, nothing written)
                          └─▶ Appended → Persisted → Redirected

    Appended and Persisted happen under the store's write lock so two
    overlapping creates cannot overwrite each other. A failure while
    persisting is raised as StorageError; there is no retry.

Read Workflows:
    list_notes(): whole collection, empty handling per `empty_notes_policy`
    get_note():   one note by id, NotFoundError when absent
"""

import logging
from typing import Callable, Optional

from quicknotes.config import settings
from quicknotes.exceptions import NotFoundError, ValidationError
from quicknotes.schemas.note import (
    Note,
    NoteDetailResponse,
    NoteListResponse,
    PageMeta,
    new_note_id,
    utc_timestamp,
)
from quicknotes.services.note_store import NoteStore
from quicknotes.services.note_validator import validate_note

logger = logging.getLogger(__name__)

EMPTY_STATE = "empty_state"
NOT_FOUND = "not_found"


class NoteService:
    """
    Business logic for note operations.

    Responsibilities:
        - list_notes(): loader for the notes page
        - get_note(): loader for the note detail page
        - create_note(): action for the new-note form

    Error Handling Strategy:
        Validation failures raise ValidationError. StorageError from the
        store is never caught here; it propagates to the global handler.
    """

    def __init__(
        self,
        store: Optional[NoteStore] = None,
        min_title_length: Optional[int] = None,
        empty_notes_policy: Optional[str] = None,
        id_factory: Callable[[], str] = new_note_id,
        clock: Callable[[], str] = utc_timestamp,
    ):
        self.store = store or NoteStore()
        if min_title_length is None:
            min_title_length = settings.min_title_length
        if min_title_length < 1:
            raise ValueError(f"min_title_length must be at least 1, got {min_title_length}")
        self.min_title_length = min_title_length
        if empty_notes_policy is None:
            empty_notes_policy = settings.empty_notes_policy
        self.empty_notes_policy = empty_notes_policy
        if self.empty_notes_policy not in (EMPTY_STATE, NOT_FOUND):
            raise ValueError(f"Unknown empty_notes_policy '{self.empty_notes_policy}'")
        self._id_factory = id_factory
        self._clock = clock

    async def list_notes(self) -> NoteListResponse:
        """
        Load every note for display.

        Returns:
            NoteListResponse with notes in insertion order.

        Raises:
            NotFoundError: collection is empty and the policy is "not_found"
            StorageError: the document could not be read
        """
        notes = await self.store.load()

        if not notes and self.empty_notes_policy == NOT_FOUND:
            raise NotFoundError(message="No notes found")

        return NoteListResponse(notes=notes)

    async def get_note(self, note_id: str) -> NoteDetailResponse:
        """
        Find one note by id.

        Raises:
            NotFoundError: no note carries this id
            StorageError: the document could not be read
        """
        notes = await self.store.load()
        selected = next((note for note in notes if note.id == note_id), None)

        if selected is None:
            raise NotFoundError(
                message=f"Could not find note for id {note_id}",
                resource_id=note_id,
            )

        return NoteDetailResponse(
            note=selected,
            meta=PageMeta(
                title=selected.title,
                description=f"Details for note: {selected.title}",
            ),
        )

    async def create_note(self, title: Optional[str], content: Optional[str]) -> Note:
        """
        Validate, append, and persist a new note.

        Args:
            title: Raw form value (None when the field was not sent)
            content: Raw form value

        Returns:
            The stored Note, with its generated id and creation time.

        Raises:
            ValidationError: title too short or content missing
            StorageError: load or save failed
        """
        result = validate_note(title, content, self.min_title_length)
        if not result.valid:
            logger.warning("Rejected note submission: %s", result.reason)
            raise ValidationError(message=result.reason, field=result.field)

        note = Note(
            id=self._id_factory(),
            title=title,
            content=content,
            created_at=self._clock(),
        )

        async with self.store.write_lock:
            notes = await self.store.load()
            notes.append(note)
            await self.store.save(notes)

        logger.info("Created note %s (%d notes total)", note.id, len(notes))
        return note


# ── Singleton Instance ────────────────────────────────────────────────────
# One instance per process so every request shares the same write lock
note_service = NoteService()


def get_note_service() -> NoteService:
    """FastAPI dependency returning the process-wide NoteService."""
    return note_service
