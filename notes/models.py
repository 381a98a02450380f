"""Pydantic models for notes and their persisted envelope."""

from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, Field, model_validator

ENVELOPE_VERSION = 1

# Zero-padded en-US layout, e.g. "10/19/2026, 03:04:05 PM"
DATE_FORMAT = "%m/%d/%Y, %I:%M:%S %p"


def new_note_id() -> str:
    """Return a fresh note identifier."""
    return str(uuid4())


def format_note_date(moment: datetime) -> str:
    """Format a creation timestamp for display."""
    return moment.strftime(DATE_FORMAT)


class Note(BaseModel):
    """A single user-authored note.

    Every field is required so that stored records missing an id or date
    are rejected instead of being given new values on each load.
    """

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, description="Note title")
    content: str = Field(..., min_length=1, description="Markdown body")
    date: str = Field(
        ..., min_length=1, description="Human-readable local creation timestamp"
    )


class NoteEnvelope(BaseModel):
    """Versioned container for the note list, used for JSON serialization."""

    version: int = ENVELOPE_VERSION
    notes: list[Note] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_ids(self) -> "NoteEnvelope":
        ids = [n.id for n in self.notes]
        if len(ids) != len(set(ids)):
            raise ValueError("duplicate note ids")
        return self
