"""Editor page: title, content and tags of the current draft."""

from __future__ import annotations

import streamlit as st

from pocket_notes.session import EditingSession

_TITLE_KEY = "draft_title"
_CONTENT_KEY = "draft_content"
_TAG_INPUT_KEY = "tag_input"


def _sync_draft(session: EditingSession) -> None:
    """Copy widget values into the draft.

    Button callbacks run before the script body, so they must pull the
    latest text themselves.
    """
    session.set_title(st.session_state.get(_TITLE_KEY, ""))
    session.set_content(st.session_state.get(_CONTENT_KEY, ""))


def _save(session: EditingSession) -> None:
    _sync_draft(session)
    session.save()


def _add_tag(session: EditingSession) -> None:
    """Add the typed tag; clears the input only when the tag was accepted."""
    if session.add_tag(st.session_state.get(_TAG_INPUT_KEY, "")):
        st.session_state[_TAG_INPUT_KEY] = ""


def render(session: EditingSession) -> None:
    """Render the editor for the session's draft."""
    draft = session.draft
    # Widget state is dropped while the editor is hidden; reseed from the draft.
    st.session_state.setdefault(_TITLE_KEY, draft.title)
    st.session_state.setdefault(_CONTENT_KEY, draft.content)

    col_back, _, col_save = st.columns([2, 4, 2])
    with col_back:
        st.button("← Back", on_click=session.cancel, use_container_width=True)
    with col_save:
        st.button(
            "Save",
            type="primary",
            on_click=_save,
            args=(session,),
            use_container_width=True,
        )

    st.text_input(
        "Title", placeholder="Title", label_visibility="collapsed", key=_TITLE_KEY
    )
    st.text_area(
        "Content",
        placeholder="Note content...",
        height=300,
        label_visibility="collapsed",
        key=_CONTENT_KEY,
    )
    _sync_draft(session)

    col_input, col_add = st.columns([5, 1])
    with col_input:
        st.text_input(
            "Tag",
            placeholder="Add tag...",
            label_visibility="collapsed",
            key=_TAG_INPUT_KEY,
            on_change=_add_tag,
            args=(session,),
        )
    with col_add:
        st.button("+", key="add_tag", on_click=_add_tag, args=(session,))

    if draft.tags:
        cols = st.columns(len(draft.tags))
        for col, tag in zip(cols, draft.tags):
            with col:
                st.button(
                    f"{tag} ×",
                    key=f"remove_tag_{tag}",
                    on_click=session.remove_tag,
                    args=(tag,),
                )
