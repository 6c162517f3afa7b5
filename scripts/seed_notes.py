"""Seed local storage with sample notes for demos and screenshots.

Writes through the same NoteStore the app uses, so the result is exactly
what the UI would have produced.

Usage:
    python scripts/seed_notes.py [--storage PATH] [--key KEY] [--reset]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Allow running as a plain script from the project root.
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from pocket_notes.config import settings  # noqa: E402
from pocket_notes.store import NoteStore  # noqa: E402

logger = logging.getLogger("seed_notes")

# Each entry: (title, content, tags)
SAMPLE_NOTES: list[tuple[str, str, list[str]]] = [
    ("Groceries", "Milk, eggs, bread, coffee beans", ["home", "shopping"]),
    (
        "Project ideas",
        "A tiny notes app that keeps everything in one local file.",
        ["ideas"],
    ),
    (
        "Meeting notes",
        "Agreed to ship the tag filter first, search second.",
        ["work", "meetings"],
    ),
    ("Reading list", "Designing Data-Intensive Applications; SICP", ["reading"]),
    ("", "Call the dentist on Monday", ["home"]),
    ("Packing", "Passport, charger, umbrella", ["travel", "home"]),
]


def main() -> None:
    """Create every sample note and report the result."""
    parser = argparse.ArgumentParser(description="Seed sample notes")
    parser.add_argument(
        "--storage",
        type=Path,
        default=settings.storage_path,
        help=f"Storage file (default: {settings.storage_path})",
    )
    parser.add_argument(
        "--key",
        default=settings.storage_key,
        help=f"Storage key (default: {settings.storage_key})",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Delete existing notes before seeding",
    )
    args = parser.parse_args()
    settings.configure_logging()

    store = NoteStore.open(args.storage, args.key)
    if args.reset:
        for note in store.notes:
            store.delete(note.id)
        logger.info("Cleared existing notes")

    for title, content, tags in SAMPLE_NOTES:
        store.create(title, content, tags)

    print(f"\n  Seeded {len(SAMPLE_NOTES)} notes into {args.storage}")
    print(f"  Total notes: {store.count}")
    print("  Start the app with: streamlit run ui/app.py\n")


if __name__ == "__main__":
    main()
