"""Seed the notes store with a few Markdown samples.

Uses the same backend settings as the page (.env / environment).

Usage:
    python scripts/seed_notes.py [--reset]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from notes.config import settings  # noqa: E402
from notes.kv import StorageError, create_key_value_store  # noqa: E402
from notes.storage import NoteStorage  # noqa: E402
from notes.view_model import NotesViewModel  # noqa: E402

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)
logger = logging.getLogger("seed_notes")

# (title, markdown content)
SAMPLES: list[tuple[str, str]] = [
    (
        "Reading list",
        "## Papers\n\n- *Attention Is All You Need*\n- *ReAct*\n\n"
        "See [arXiv](https://arxiv.org) for more.",
    ),
    (
        "Idea",
        "**Entanglement** visualizer should support _Bell states_ first.",
    ),
    (
        "Climate pipeline",
        "1. Pull NOAA data\n2. Clean outliers\n3. Fit the **baseline** model",
    ),
]


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed sample notes")
    parser.add_argument(
        "--reset", action="store_true", help="Remove existing notes first"
    )
    args = parser.parse_args()

    storage = NoteStorage(create_key_value_store(settings), key=settings.notes_key)
    vm = NotesViewModel(storage)
    try:
        vm.initialize()
        if args.reset:
            for note in vm.notes:
                vm.delete(note.id)
        for title, content in SAMPLES:
            vm.submit(title, content)
    except StorageError as e:
        logger.error("Seeding failed: %s", e)
        return 1

    logger.info("Store now holds %d notes", len(vm.notes))
    return 0


if __name__ == "__main__":
    sys.exit(main())
