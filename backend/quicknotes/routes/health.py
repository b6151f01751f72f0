"""
QuickNotes Backend — Health Check Route
=========================================

What:  Health check endpoint for container probes and monitoring.
How:   Loads the notes document the same way a request would.

Status levels:
    - healthy:   document readable, or not created yet (HTTP 200)
    - unhealthy: document exists but cannot be read or parsed (HTTP 200,
                 body flags the problem for monitoring)
"""

import logging
import time

from fastapi import APIRouter, Depends

from quicknotes import __version__
from quicknotes.exceptions import StorageError
from quicknotes.schemas.note import HealthResponse
from quicknotes.services.note_service import NoteService, get_note_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    service: NoteService = Depends(get_note_service),
) -> HealthResponse:
    store = service.store
    storage_status = "available" if store.exists() else "missing"
    overall = "healthy"
    note_count = 0

    try:
        note_count = len(await store.load())
    except StorageError as e:
        storage_status = "unreadable"
        overall = "unhealthy"
        logger.warning("Health check: notes document unreadable: %s", e.message)

    return HealthResponse(
        status=overall,
        version=__version__,
        storage=storage_status,
        note_count=note_count,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
