"""Editing session: browse filters plus the create/edit draft workflow."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from . import query
from .errors import NoteNotFoundError, SessionStateError
from .models import Note, normalize_tag
from .store import NoteStore

logger = logging.getLogger("pocket_notes.session")

ConfirmFn = Callable[[str], bool]

DELETE_PROMPT = "Delete this note?"


class Mode(str, Enum):
    BROWSING = "browsing"
    EDITING = "editing"


@dataclass
class Draft:
    """Unsaved working copy of a note being created or edited."""

    note_id: str | None = None
    title: str = ""
    content: str = ""
    tags: list[str] = field(default_factory=list)
    tag_input: str = ""

    @property
    def is_new(self) -> bool:
        return self.note_id is None


class EditingSession:
    """Transient state for one user session over a NoteStore.

    Holds the search text and selected tag used while browsing, and the
    draft while editing. The draft only reaches the store on save().

    Args:
        store: The note store to read from and write to.
        confirm: Yes/no prompt asked before a delete. Can also be passed
            per call to delete().
    """

    def __init__(self, store: NoteStore, confirm: ConfirmFn | None = None) -> None:
        self._store = store
        self._confirm = confirm
        self._draft: Draft | None = None
        self.search_query: str = ""
        self.selected_tag: str | None = None

    @property
    def store(self) -> NoteStore:
        return self._store

    @property
    def mode(self) -> Mode:
        return Mode.BROWSING if self._draft is None else Mode.EDITING

    @property
    def is_editing(self) -> bool:
        return self._draft is not None

    @property
    def draft(self) -> Draft | None:
        return self._draft

    # ------------------------------------------------------------------
    # Browsing
    # ------------------------------------------------------------------

    @property
    def visible_notes(self) -> list[Note]:
        return query.visible_notes(
            self._store.notes, self.search_query, self.selected_tag
        )

    @property
    def all_tags(self) -> list[str]:
        return query.all_tags(self._store.notes)

    @property
    def has_filters(self) -> bool:
        """Whether an empty visible list is due to filters rather than no notes."""
        return bool(self.search_query or self.selected_tag)

    def set_search(self, text: str) -> None:
        self.search_query = text

    def toggle_tag(self, tag: str) -> None:
        """Select tag, or clear the filter if tag is already selected."""
        self.selected_tag = None if tag == self.selected_tag else tag

    def clear_tag(self) -> None:
        self.selected_tag = None

    def delete(self, note_id: str, confirm: ConfirmFn | None = None) -> bool:
        """Delete a listed note after the user confirms.

        Returns True if the delete went ahead, False if it was declined.
        """
        if self.is_editing:
            raise SessionStateError("Cannot delete notes while editing")
        confirm = confirm or self._confirm
        if confirm is None:
            raise SessionStateError("No confirmation prompt configured")
        if not confirm(DELETE_PROMPT):
            logger.debug("Delete of %s declined", note_id)
            return False
        self._store.delete(note_id)
        return True

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def start_create(self) -> Draft:
        """Open an empty draft for a new note."""
        self._draft = Draft()
        return self._draft

    def start_edit(self, note: Note | str) -> Draft:
        """Open a draft copied from an existing note (or its id)."""
        if isinstance(note, str):
            note = self._store.get(note)
        self._draft = Draft(
            note_id=note.id,
            title=note.title,
            content=note.content,
            tags=list(note.tags),
        )
        return self._draft

    def set_title(self, title: str) -> None:
        self._require_draft().title = title

    def set_content(self, content: str) -> None:
        self._require_draft().content = content

    def set_tag_input(self, text: str) -> None:
        self._require_draft().tag_input = text

    def add_tag(self, text: str | None = None) -> bool:
        """Add the pending tag input to the draft.

        The input is trimmed and lowercased. Empty or duplicate tags are
        ignored and leave the input untouched. Returns whether a tag was
        added.
        """
        draft = self._require_draft()
        if text is not None:
            draft.tag_input = text
        tag = normalize_tag(draft.tag_input)
        if not tag or tag in draft.tags:
            return False
        draft.tags.append(tag)
        draft.tag_input = ""
        return True

    def remove_tag(self, tag: str) -> None:
        draft = self._require_draft()
        draft.tags = [t for t in draft.tags if t != tag]

    def save(self) -> Note | None:
        """Write the draft to the store and return to browsing.

        Blank drafts are dropped by the store; the session still leaves
        editing mode. If the edited note was removed in the meantime the
        save is skipped.
        """
        draft = self._require_draft()
        try:
            if draft.is_new:
                note = self._store.create(draft.title, draft.content, draft.tags)
            else:
                note = self._store.update(
                    draft.note_id, draft.title, draft.content, draft.tags
                )
        except NoteNotFoundError as exc:
            logger.warning("Note %s no longer exists — draft dropped", exc.note_id)
            note = None
        self._draft = None
        return note

    def cancel(self) -> None:
        """Leave editing mode, discarding the draft."""
        self._draft = None

    def _require_draft(self) -> Draft:
        if self._draft is None:
            raise SessionStateError("No note is being edited")
        return self._draft
