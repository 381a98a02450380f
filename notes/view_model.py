"""In-memory authority over the note collection for one page session.

Every mutation builds the new list, persists it, and only then replaces the
in-memory list, so the two never disagree once a call returns.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from notes.metrics import NOTE_OPERATIONS
from notes.models import Note, format_note_date, new_note_id
from notes.storage import NoteStorage

logger = logging.getLogger(__name__)


class ComposeMode(enum.Enum):
    IDLE = "idle"
    COMPOSING = "composing"


@dataclass
class NoteDraft:
    """Uncommitted form fields, owned by the creation form."""

    title: str = ""
    content: str = ""

    def validate(self) -> list[str]:
        """Return the names of required fields that are still blank."""
        missing = []
        if not self.title.strip():
            missing.append("title")
        if not self.content.strip():
            missing.append("content")
        return missing

    @property
    def is_complete(self) -> bool:
        return not self.validate()


class NotesViewModel:
    """Mediates user actions on notes and keeps the store in sync."""

    def __init__(
        self,
        storage: NoteStorage,
        id_factory: Callable[[], str] = new_note_id,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._storage = storage
        self._id_factory = id_factory
        self._clock = clock
        self._notes: list[Note] = []
        self.draft = NoteDraft()
        self.mode = ComposeMode.IDLE

    @property
    def notes(self) -> tuple[Note, ...]:
        return tuple(self._notes)

    @property
    def is_composing(self) -> bool:
        return self.mode is ComposeMode.COMPOSING

    def initialize(self) -> None:
        """Load the persisted collection into memory."""
        self._notes = self._storage.load()

    # ------------------------------------------------------------------
    # Compose toggle
    # ------------------------------------------------------------------

    def begin_compose(self) -> None:
        self.draft = NoteDraft()
        self.mode = ComposeMode.COMPOSING

    def cancel_compose(self) -> None:
        self.draft = NoteDraft()
        self.mode = ComposeMode.IDLE

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def submit(self, title: str, content: str) -> Note:
        """Create, append and persist a note, then close the form.

        Both fields must be non-blank; the form checks this with
        ``NoteDraft.validate`` before calling.
        """
        missing = NoteDraft(title, content).validate()
        if missing:
            raise ValueError(f"Missing required fields: {', '.join(missing)}")

        note = Note(
            id=self._fresh_id(),
            title=title,
            content=content,
            date=format_note_date(self._clock()),
        )
        updated = [*self._notes, note]
        self._storage.save(updated)
        self._notes = updated

        NOTE_OPERATIONS.labels(operation="create").inc()
        logger.info("Created note %s — '%s'", note.id, note.title)
        self.cancel_compose()
        return note

    def delete(self, note_id: str) -> None:
        """Remove the note with ``note_id``. Unknown ids are a no-op."""
        updated = [n for n in self._notes if n.id != note_id]
        self._storage.save(updated)
        removed = len(self._notes) - len(updated)
        self._notes = updated

        NOTE_OPERATIONS.labels(operation="delete").inc()
        if removed:
            logger.info("Deleted note %s", note_id)
        else:
            logger.info("Delete of unknown note %s ignored", note_id)

    def _fresh_id(self) -> str:
        taken = {n.id for n in self._notes}
        note_id = self._id_factory()
        while note_id in taken:
            note_id = self._id_factory()
        return note_id
