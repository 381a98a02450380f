"""Note persistence over a key-value backend.

The whole note list lives under one key as a versioned JSON envelope and is
rewritten in full on every save. Values that cannot be read back are
treated as an empty collection, since the page offers no way to repair them.
"""

import json
import logging
from collections.abc import Sequence

from pydantic import ValidationError

from notes.kv import KeyValueStore
from notes.metrics import NOTE_OPERATIONS, STORE_LOAD_FAILURES, STORED_NOTES
from notes.models import ENVELOPE_VERSION, Note, NoteEnvelope

logger = logging.getLogger(__name__)

DEFAULT_KEY = "notes"
LEGACY_VERSION = 0


class NoteStorage:
    """Durable mirror of the note collection, scoped to one storage key."""

    def __init__(self, backend: KeyValueStore, key: str = DEFAULT_KEY) -> None:
        self._backend = backend
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[Note]:
        """Return the persisted notes, or an empty list if absent or unreadable."""
        NOTE_OPERATIONS.labels(operation="load").inc()
        raw = self._backend.get(self._key)
        if raw is None:
            logger.info("No notes stored under '%s' — starting fresh", self._key)
            STORED_NOTES.set(0)
            return []

        notes = self._decode(raw)
        STORED_NOTES.set(len(notes))
        logger.info("Loaded %d notes from '%s'", len(notes), self._key)
        return notes

    def save(self, notes: Sequence[Note]) -> None:
        """Overwrite the stored collection with ``notes``."""
        envelope = NoteEnvelope(version=ENVELOPE_VERSION, notes=list(notes))
        self._backend.set(self._key, envelope.model_dump_json())
        STORED_NOTES.set(len(envelope.notes))
        logger.info("Saved %d notes to '%s'", len(envelope.notes), self._key)

    def _decode(self, raw: str) -> list[Note]:
        try:
            payload = json.loads(raw)
        except (json.JSONDecodeError, RecursionError) as exc:
            return self._degrade("invalid_json", exc)

        # Bare arrays predate the versioned envelope
        if isinstance(payload, list):
            payload = {"version": LEGACY_VERSION, "notes": payload}

        if isinstance(payload, dict) and payload.get("version") not in (
            LEGACY_VERSION,
            ENVELOPE_VERSION,
        ):
            return self._degrade(
                "unknown_version", f"version={payload.get('version')!r}"
            )

        try:
            envelope = NoteEnvelope.model_validate(payload)
        except ValidationError as exc:
            return self._degrade("invalid_schema", exc)
        except RecursionError as exc:
            return self._degrade("invalid_json", exc)
        return envelope.notes

    def _degrade(self, reason: str, detail: object) -> list[Note]:
        STORE_LOAD_FAILURES.labels(reason=reason).inc()
        logger.warning(
            "Discarding unreadable notes under '%s' (%s): %s — starting fresh",
            self._key,
            reason,
            detail,
        )
        return []
