"""
QuickNotes Backend — Notes Route Handlers
===========================================

What:  Loader and action endpoints for the notes pages.
How:   Extracts form fields / path params, delegates to NoteService, returns
       JSON or a redirect. Errors are raised and formatted by the global
       handlers in main.py.

Endpoints:
    GET  /api/notes            loader for the notes page
    POST /api/notes            action for the new-note form (form-encoded)
    GET  /api/notes/{note_id}  loader for the note detail page
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Response
from fastapi.responses import RedirectResponse

from quicknotes.config import settings
from quicknotes.schemas.note import ErrorResponse, NoteDetailResponse, NoteListResponse
from quicknotes.services.note_service import NoteService, get_note_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])


@router.get(
    "/notes",
    response_model=NoteListResponse,
    responses={
        200: {"description": "Every stored note", "model": NoteListResponse},
        404: {"description": "No notes (only with empty_notes_policy=not_found)", "model": ErrorResponse},
        500: {"description": "Notes document unreadable", "model": ErrorResponse},
    },
    summary="List all notes",
)
async def list_notes(
    response: Response,
    service: NoteService = Depends(get_note_service),
) -> NoteListResponse:
    """
    Loader for the notes page.

    The X-Total-Count header mirrors the list length so the client can show
    a counter without touching the body.
    """
    result = await service.list_notes()
    response.headers["X-Total-Count"] = str(len(result.notes))
    # Notes change on every submission; never serve a stale list
    response.headers["Cache-Control"] = "no-store"
    return result


@router.post(
    "/notes",
    status_code=303,
    response_class=RedirectResponse,
    responses={
        303: {"description": "Note stored; redirect to the notes list"},
        400: {"description": "Invalid title or missing content", "model": ErrorResponse},
        500: {"description": "Notes document could not be written", "model": ErrorResponse},
    },
    summary="Create a note from a form submission",
)
async def create_note(
    title: Optional[str] = Form(default=None),
    content: Optional[str] = Form(default=None),
    service: NoteService = Depends(get_note_service),
) -> RedirectResponse:
    """
    Action for the new-note form.

    Both fields are optional at the HTTP level so a missing field reaches
    the validator and produces the 400 payload instead of a 422.
    """
    note = await service.create_note(title=title, content=content)
    logger.info("Note %s stored; redirecting to %s", note.id, settings.list_redirect_url)
    return RedirectResponse(url=settings.list_redirect_url, status_code=303)


@router.get(
    "/notes/{note_id}",
    response_model=NoteDetailResponse,
    responses={
        200: {"description": "The selected note", "model": NoteDetailResponse},
        404: {"description": "No note with this id", "model": ErrorResponse},
        500: {"description": "Notes document unreadable", "model": ErrorResponse},
    },
    summary="Get a single note by ID",
)
async def get_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> NoteDetailResponse:
    """Loader for the note detail page."""
    return await service.get_note(note_id)
