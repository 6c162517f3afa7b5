"""Browse page: search box, tag filter, and the list of note cards."""

from __future__ import annotations

import streamlit as st

from pocket_notes.models import Note
from pocket_notes.session import DELETE_PROMPT, EditingSession

_SEARCH_KEY = "search"

EMPTY_FILTERED = "No notes found"
EMPTY_COLLECTION = "No notes yet. Tap + to create one!"


def empty_message(session: EditingSession) -> str:
    """Explain an empty list: filters exclude everything, or nothing exists."""
    return EMPTY_FILTERED if session.has_filters else EMPTY_COLLECTION


@st.dialog("Delete note")
def _confirm_delete(session: EditingSession, note: Note) -> None:
    """Modal yes/no prompt shown before a delete."""
    st.write(DELETE_PROMPT)
    st.caption(note.title or "Untitled")
    col_yes, col_no = st.columns(2)
    with col_yes:
        if st.button("Delete", type="primary", use_container_width=True):
            # The dialog is the confirmation, so the session's prompt answers yes.
            session.delete(note.id, confirm=lambda _prompt: True)
            st.rerun()
    with col_no:
        if st.button("Cancel", use_container_width=True):
            st.rerun()


def _render_tag_filter(session: EditingSession) -> None:
    tags = session.all_tags
    if not tags:
        return
    cols = st.columns(len(tags) + 1)
    with cols[0]:
        st.button(
            "All",
            key="filter_all",
            type="primary" if session.selected_tag is None else "secondary",
            on_click=session.clear_tag,
        )
    for col, tag in zip(cols[1:], tags):
        with col:
            st.button(
                tag,
                key=f"filter_{tag}",
                type="primary" if session.selected_tag == tag else "secondary",
                on_click=session.toggle_tag,
                args=(tag,),
            )


def _render_card(session: EditingSession, note: Note) -> None:
    with st.container(border=True):
        col_title, col_edit, col_delete = st.columns([6, 1, 1])
        with col_title:
            st.markdown(f"### {note.title or 'Untitled'}")
        with col_edit:
            st.button(
                "✏️",
                key=f"edit_{note.id}",
                help="Edit",
                on_click=session.start_edit,
                args=(note,),
            )
        with col_delete:
            if st.button("×", key=f"delete_{note.id}", help="Delete"):
                _confirm_delete(session, note)

        if note.content:
            st.write(note.content)
        if note.tags:
            st.markdown("  ".join(f"`{tag}`" for tag in note.tags))
        st.caption(note.updated_at.astimezone().strftime("%x"))


def render(session: EditingSession) -> None:
    """Render the note list."""
    col_title, col_new = st.columns([6, 1])
    with col_title:
        st.title("Notes")
    with col_new:
        st.button("+", key="new_note", help="New note", on_click=session.start_create)

    # Widget state is dropped while the editor is shown; reseed from the session.
    st.session_state.setdefault(_SEARCH_KEY, session.search_query)
    st.text_input(
        "Search",
        placeholder="Search notes...",
        label_visibility="collapsed",
        key=_SEARCH_KEY,
    )
    session.set_search(st.session_state[_SEARCH_KEY])

    _render_tag_filter(session)

    notes = session.visible_notes
    if not notes:
        st.info(empty_message(session))
        return
    for note in notes:
        _render_card(session, note)
