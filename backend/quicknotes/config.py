"""
QuickNotes Backend — Application Configuration
================================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time; validated before app starts.

Behavior switches:
    How the list endpoint treats an empty collection is an explicit choice,
    `empty_notes_policy`:
        - "empty_state": return an empty list, the client shows "no notes"
        - "not_found":   answer 404 with "No notes found"

    The title threshold is configurable too: 5 characters after trimming by
    default, 1 to accept any non-blank title.
"""

from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for local development.
    Attributes are grouped by concern for readability.
    """

    # ── Note Storage ──────────────────────────────────────────────────────
    # What: Path of the single JSON document holding every note
    # Why relative: Works both in a container (mounted volume) and locally
    notes_file: str = Field(
        default="notes.json",
        description="Path to the JSON document that stores the note collection",
    )

    # ── Note Rules ────────────────────────────────────────────────────────
    # What: Minimum title length, counted after trimming whitespace
    min_title_length: int = Field(default=5, ge=1, le=200)

    # What: How GET /api/notes answers when the collection is empty
    empty_notes_policy: Literal["empty_state", "not_found"] = Field(
        default="empty_state",
        description="'empty_state' returns [], 'not_found' answers 404",
    )

    # What: Where the client is sent after a successful create
    list_redirect_url: str = Field(default="/notes")

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs (split by cors_origins_list)
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # NOTES_FILE and notes_file both work
    }


# Singleton instance — imported throughout the application
settings = Settings()
