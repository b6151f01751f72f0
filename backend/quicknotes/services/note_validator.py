"""
QuickNotes Backend — Note Validator
=====================================

What:  Checks a submitted title/content pair before it is accepted.
Who:   Called by NoteService.create_note().

Rules (first failure wins):
    1. title present and at least `min_title_length` characters after trim
    2. content present and non-empty

Nothing else is checked: no length cap, no HTML sanitization, no encoding
checks.
"""

from typing import Optional

from pydantic import BaseModel


class ValidationResult(BaseModel):
    model_config = {"frozen": True}

    valid: bool
    reason: Optional[str] = None
    field: Optional[str] = None


VALID = ValidationResult(valid=True)

CONTENT_REQUIRED = "Title and content are required"


def validate_note(
    title: Optional[str],
    content: Optional[str],
    min_title_length: int = 5,
) -> ValidationResult:
    """
    Validate a candidate note.

    Args:
        title: Raw title from the form (may be None when the field is absent)
        content: Raw content from the form
        min_title_length: Characters required after stripping whitespace

    Returns:
        ValidationResult; `reason` is a human-readable message and `field`
        names the offending input when invalid.
    """
    if not title or len(title.strip()) < min_title_length:
        return ValidationResult(
            valid=False,
            reason=f"Invalid title - must be at least {min_title_length} characters long",
            field="title",
        )

    if not content:
        return ValidationResult(valid=False, reason=CONTENT_REQUIRED, field="content")

    return VALID
