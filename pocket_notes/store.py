"""Note store: the single source of truth for the note collection."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime
from pathlib import Path

from .errors import NoteNotFoundError
from .models import Note, NoteCollection, is_blank, normalize_tags, utc_now
from .storage import DEFAULT_STORAGE_KEY, LocalStorage, NotePersistence

logger = logging.getLogger("pocket_notes.store")


class NoteStore:
    """Owns the note collection and persists it after every mutation.

    Notes handed out by the store are copies; the only way to change the
    collection is through create, update and delete.
    """

    def __init__(
        self,
        persistence: NotePersistence,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._persistence = persistence
        self._clock = clock
        self._collection = NoteCollection()
        self.load()

    @classmethod
    def open(cls, path: Path, key: str = DEFAULT_STORAGE_KEY) -> NoteStore:
        """Build a store backed by the JSON storage file at path."""
        return cls(NotePersistence(LocalStorage(path), key))

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def load(self) -> NoteCollection:
        """Replace in-memory state with what is persisted."""
        self._collection = self._persistence.load()
        return self._collection.model_copy(deep=True)

    @property
    def notes(self) -> list[Note]:
        """Every note, newest-created first."""
        return [note.model_copy(deep=True) for note in self._collection]

    @property
    def count(self) -> int:
        return len(self._collection)

    def get(self, note_id: str) -> Note:
        """Return the note with note_id or raise NoteNotFoundError."""
        index = self._index_of(note_id)
        if index is None:
            raise NoteNotFoundError(note_id)
        return self._collection[index].model_copy(deep=True)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create(self, title: str, content: str, tags: Iterable[str] = ()) -> Note | None:
        """Create a note at the front of the collection.

        Returns None without touching the collection when both title and
        content are blank.
        """
        if is_blank(title, content):
            logger.debug("Rejected blank note on create")
            return None
        now = self._clock()
        note = Note(
            title=title,
            content=content,
            tags=list(tags),
            created_at=now,
            updated_at=now,
        )
        self._collection.root.insert(0, note)
        self._persist()
        logger.info("Created note %s — '%s'", note.id, note.title)
        return note.model_copy(deep=True)

    def update(
        self, note_id: str, title: str, content: str, tags: Iterable[str] = ()
    ) -> Note | None:
        """Replace title, content and tags of an existing note.

        Returns None when both title and content are blank.

        Raises:
            NoteNotFoundError: if no note has note_id.
        """
        if is_blank(title, content):
            logger.debug("Rejected blank note on update of %s", note_id)
            return None
        index = self._index_of(note_id)
        if index is None:
            raise NoteNotFoundError(note_id)
        note = self._collection[index].model_copy(
            update={
                "title": title,
                "content": content,
                "tags": normalize_tags(tags),
                "updated_at": self._clock(),
            }
        )
        self._collection.root[index] = note
        self._persist()
        logger.info("Updated note %s — '%s'", note.id, note.title)
        return note.model_copy(deep=True)

    def delete(self, note_id: str) -> None:
        """Remove the note if present. Unknown ids are ignored."""
        index = self._index_of(note_id)
        if index is None:
            logger.debug("Delete of unknown note %s ignored", note_id)
            return
        del self._collection.root[index]
        self._persist()
        logger.info("Deleted note %s", note_id)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _index_of(self, note_id: str) -> int | None:
        for index, note in enumerate(self._collection):
            if note.id == note_id:
                return index
        return None

    def _persist(self) -> None:
        self._persistence.save(self._collection)
