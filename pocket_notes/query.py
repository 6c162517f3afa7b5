"""Derived views over the note collection: filtering, sorting, tag lists.

Everything here is a pure function of its arguments and is recomputed on
every call.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import Note


def matches_tag(note: Note, selected_tag: str | None) -> bool:
    """True if no tag is selected or the note carries selected_tag."""
    if not selected_tag:
        return True
    return selected_tag in note.tags


def matches_search(note: Note, query: str) -> bool:
    """Case-insensitive substring match on title, content or any tag."""
    if not query:
        return True
    q = query.lower()
    return (
        q in note.title.lower()
        or q in note.content.lower()
        or any(q in tag.lower() for tag in note.tags)
    )


def visible_notes(
    notes: Iterable[Note], search_query: str = "", selected_tag: str | None = None
) -> list[Note]:
    """Notes passing both filters, most recently updated first."""
    matching = [
        note
        for note in notes
        if matches_tag(note, selected_tag) and matches_search(note, search_query)
    ]
    # sorted() is stable, so equal timestamps keep their input order.
    return sorted(matching, key=lambda note: note.updated_at, reverse=True)


def all_tags(notes: Iterable[Note]) -> list[str]:
    """Sorted, de-duplicated union of every note's tags."""
    return sorted({tag for note in notes for tag in note.tags})
