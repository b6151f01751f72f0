"""
QuickNotes Backend — FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn quicknotes.main:app) or `quicknotes-serve`.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging → GZip → CORS    │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────────┐ ┌─────────────┐ │
    │  │ GET/POST     │ │ GET          │ │ GET /health │ │
    │  │ /api/notes   │ │ /api/notes/id│ │             │ │
    │  └──────────────┘ └──────────────┘ └─────────────┘ │
    │                                                     │
    │  Exception Handlers (error boundary):               │
    │  Validation→400 │ NotFound→404 │ Storage→500 │ *→500│
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from quicknotes import __version__
from quicknotes.config import settings
from quicknotes.exceptions import (
    NotFoundError,
    QuickNotesError,
    StorageError,
    ValidationError,
)
from quicknotes.middleware.logging import RequestLoggingMiddleware
from quicknotes.middleware.request_id import RequestIDMiddleware, request_id_var
from quicknotes.routes import health, notes

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s, to stdout.
    Called once during app startup.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:
        1. Setup logging
        2. Report where notes are stored and which policies are active

    Shutdown:
        Nothing to release; the notes document is opened per request.
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("QuickNotes Backend starting up...")
    logger.info("Notes document: %s", settings.notes_file)
    logger.info(
        "Policies: min_title_length=%d empty_notes_policy=%s",
        settings.min_title_length,
        settings.empty_notes_policy,
    )
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("QuickNotes Backend shut down.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and response bodies.

    Handler hierarchy:
        ValidationError   → 400 Bad Request (user fixes the form and resubmits)
        NotFoundError     → 404 Not Found
        StorageError      → 500 Internal Server Error (logged, not retried)
        QuickNotesError   → 500 (catch-all for custom errors)
        Exception         → 500 (unexpected errors, stack trace logged only)
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.error_code,
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.error_code,
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        """Storage failure: generic message to the client, context logged."""
        rid = request_id_var.get("")
        logger.error("[%s] Storage error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.error_code,
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(QuickNotesError)
    async def handle_app_error(request: Request, exc: QuickNotesError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.error_code,
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="QuickNotes API",
        description="Create, list, and view notes stored in a single JSON document.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Total-Count", "Location"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(notes.router)
    app.include_router(health.router)

    return app


app = create_app()


def serve() -> None:
    """Console entry point: run the app under uvicorn with configured host/port."""
    uvicorn.run(
        "quicknotes.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )
