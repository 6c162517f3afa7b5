"""Exception types raised by the notes core."""

from __future__ import annotations


class NotesError(Exception):
    """Base class for all notes errors."""


class NoteNotFoundError(NotesError, LookupError):
    """No note with the given identifier exists."""

    def __init__(self, note_id: str) -> None:
        super().__init__(f"Note not found: {note_id}")
        self.note_id = note_id


class MalformedNotesError(NotesError, ValueError):
    """The persisted notes blob does not decode to a list of notes."""


class SessionStateError(NotesError, RuntimeError):
    """An editing-session action was used in the wrong mode."""
