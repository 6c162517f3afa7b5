"""Local key-value storage and the notes persistence adapter."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from .errors import MalformedNotesError
from .models import NoteCollection, StoredNote, is_blank

logger = logging.getLogger("pocket_notes.storage")

DEFAULT_STORAGE_KEY = "notes"
MALFORMED_SUFFIX = ".malformed"

_STORED_NOTES = TypeAdapter(list[StoredNote])


class LocalStorage:
    """String key-value store kept in a single JSON object file.

    Every write rewrites the whole file through a temporary file and an
    atomic rename, so readers never observe a half-written file.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._items: dict[str, str] = {}
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        """Read the file from disk. A missing file means empty storage."""
        if not self._path.exists():
            logger.info("No storage file found at %s — starting fresh", self._path)
            return
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            self._quarantine(f"invalid JSON ({exc})")
            return
        if not isinstance(raw, dict) or not all(
            isinstance(value, str) for value in raw.values()
        ):
            self._quarantine("expected an object of string values")
            return
        self._items = raw

    def _quarantine(self, reason: str) -> None:
        backup = self._path.with_name(self._path.name + ".corrupt")
        logger.error(
            "Unreadable storage file %s: %s — moved to %s, starting fresh",
            self._path,
            reason,
            backup,
        )
        self._path.replace(backup)

    def _flush(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(self._items, fh, indent=2)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get_item(self, key: str) -> str | None:
        """Return the value stored under key, or None."""
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        """Store value under key and write the file."""
        self._items[key] = value
        self._flush()


def decode_collection(raw: str) -> NoteCollection:
    """Parse a persisted notes blob.

    Raises:
        MalformedNotesError: if raw is not a JSON array of complete note
            records, repeats an id, or holds a note with neither title nor
            content.
    """
    try:
        records = _STORED_NOTES.validate_json(raw)
    except ValidationError as exc:
        raise MalformedNotesError(str(exc)) from exc
    seen: set[str] = set()
    for record in records:
        if record.id in seen:
            raise MalformedNotesError(f"Duplicate note id: {record.id}")
        if is_blank(record.title, record.content):
            raise MalformedNotesError(f"Note {record.id} has no title or content")
        seen.add(record.id)
    return NoteCollection([record.to_note() for record in records])


class NotePersistence:
    """Reads and writes the whole note collection under one storage key."""

    def __init__(self, storage: LocalStorage, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    @property
    def backup_key(self) -> str:
        return self._key + MALFORMED_SUFFIX

    def load(self) -> NoteCollection:
        """Return the stored collection, or an empty one.

        Malformed data does not stop the application: the unreadable blob is
        copied to ``backup_key`` and an empty collection is returned.
        """
        raw = self._storage.get_item(self._key)
        if raw is None:
            logger.info("No notes stored under '%s' — starting empty", self._key)
            return NoteCollection()
        try:
            collection = decode_collection(raw)
        except MalformedNotesError as exc:
            logger.error(
                "Stored notes under '%s' are malformed, starting empty "
                "(original kept under '%s'): %s",
                self._key,
                self.backup_key,
                exc,
            )
            self._storage.set_item(self.backup_key, raw)
            return NoteCollection()
        logger.info("Loaded %d notes from '%s'", len(collection), self._key)
        return collection

    def save(self, collection: NoteCollection) -> None:
        """Overwrite the stored blob with the full collection."""
        self._storage.set_item(self._key, collection.to_json())
