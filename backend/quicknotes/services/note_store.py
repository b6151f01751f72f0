"""
QuickNotes Backend — Note Store (JSON Document Persistence)
=============================================================

What:  Reads and writes the whole note collection as one JSON document.
How:   Every load reads and parses the full file; every save serializes the
       full collection inside a `{"notes": [...]}` envelope and overwrites
       the file. Nothing is cached between requests.
Who:   Owned exclusively by NoteService; nothing else touches the file.

Failure Model:
    - Missing document  → empty collection (first run, nothing saved yet)
    - Malformed JSON    → StorageError (also invalid UTF-8, runaway nesting)
    - Wrong shape       → StorageError (e.g. top level is a list)
    - OS read/write     → StorageError (permission denied, disk full, ...)

Write serialization:
    Create is load → append → save. Unlocked, two overlapping creates read
    the same prior collection and the second save drops the first note.
    `write_lock` is the single-writer point every read-modify-write must hold.
    It only covers writers inside this process.

Round trips:
    Unknown keys on notes or on the envelope are ignored on load, so the
    next save drops them.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence

import aiofiles
from pydantic import ValidationError as SchemaError

from quicknotes.config import settings
from quicknotes.exceptions import StorageError
from quicknotes.schemas.note import Note, NoteDocument

logger = logging.getLogger(__name__)


class NoteStore:
    """
    Whole-document JSON storage for the note collection.

    Lifecycle of a write:
        1. Caller acquires `write_lock`
        2. load() reads the current document
        3. Caller appends to the returned list
        4. save() overwrites the document with the full list
        5. Caller releases `write_lock`

    No atomic rename, no partial-write protection: a crash mid-write can
    leave a truncated file, which the next load reports as StorageError.
    """

    def __init__(self, path: Optional[str] = None):
        """
        Args:
            path: Override the document location (used in tests).
                  If None, uses settings.notes_file.
        """
        self.path = Path(path or settings.notes_file)
        self.write_lock = asyncio.Lock()

    def exists(self) -> bool:
        return self.path.is_file()

    async def load(self) -> List[Note]:
        """
        Read the full note collection from disk.

        Returns:
            Notes in insertion order; empty list if the document is missing.

        Raises:
            StorageError: document unreadable, not JSON, or wrong shape.
        """
        try:
            async with aiofiles.open(self.path, "rb") as f:
                raw = await f.read()
        except FileNotFoundError:
            logger.debug("Notes document %s not found; starting empty", self.path)
            return []
        except OSError as e:
            logger.error("Failed to read notes document %s: %s", self.path, str(e))
            raise StorageError(
                message="Failed to load notes",
                context={"path": str(self.path), "os_error": str(e)},
            ) from e

        try:
            data = json.loads(raw.decode("utf-8"))
        except (ValueError, RecursionError) as e:
            # ValueError covers both UnicodeDecodeError and JSONDecodeError
            logger.error("Notes document %s is not valid JSON: %s", self.path, str(e))
            raise StorageError(
                message="Failed to load notes",
                context={"path": str(self.path), "parse_error": str(e)},
            ) from e

        if not isinstance(data, dict):
            raise StorageError(
                message="Failed to load notes",
                context={"path": str(self.path), "parse_error": "top level is not an object"},
            )

        try:
            document = NoteDocument.model_validate(data)
        except SchemaError as e:
            logger.error("Notes document %s has an invalid shape: %s", self.path, str(e))
            raise StorageError(
                message="Failed to load notes",
                context={"path": str(self.path), "parse_error": str(e)},
            ) from e

        logger.debug("Loaded %d notes from %s", len(document.notes), self.path)
        return list(document.notes)

    async def save(self, notes: Sequence[Note]) -> None:
        """
        Overwrite the document with the full collection.

        Raises:
            StorageError: directory creation or file write failed.
        """
        document = NoteDocument(notes=list(notes))
        payload = document.model_dump_json(indent=2, exclude_none=True)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(self.path, "w", encoding="utf-8") as f:
                await f.write(payload)
        except OSError as e:
            logger.error("Failed to write notes document %s: %s", self.path, str(e))
            raise StorageError(
                message="Failed to save notes",
                context={"path": str(self.path), "os_error": str(e)},
            ) from e

        logger.info("Saved %d notes to %s", len(document.notes), self.path)
