"""Pocket Notes — Streamlit interface.

Run with:
    streamlit run ui/app.py
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so `pocket_notes.*` and `ui.*` imports
# resolve regardless of the working directory Streamlit uses.
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import streamlit as st  # noqa: E402

st.set_page_config(
    page_title="Notes",
    page_icon="📝",
    layout="centered",
)

from pocket_notes.config import settings  # noqa: E402
from pocket_notes.session import EditingSession  # noqa: E402
from pocket_notes.store import NoteStore  # noqa: E402
from ui.components import browser, editor  # noqa: E402


@st.cache_resource
def _get_store() -> NoteStore:
    """One store per process; Streamlit reruns reuse it."""
    settings.configure_logging()
    return NoteStore.open(settings.storage_path, settings.storage_key)


def _get_session() -> EditingSession:
    """One editing session per browser session."""
    if "notes_session" not in st.session_state:
        st.session_state.notes_session = EditingSession(_get_store())
    return st.session_state.notes_session


session = _get_session()

if session.is_editing:
    editor.render(session)
else:
    browser.render(session)

st.divider()
st.caption(f"Stored locally in {settings.storage_path}")
