"""Notes — Streamlit single-page interface.

Run with:
    streamlit run notes_ui/app.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Ensure the project root is on sys.path so `notes_ui.*` imports resolve
# regardless of the working directory Streamlit uses.
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import streamlit as st  # noqa: E402

st.set_page_config(page_title="Notes", page_icon="📝", layout="centered")

from notes_ui.api import NotesClient  # noqa: E402
from notes_ui.components import note_form, note_list  # noqa: E402
from notes_ui.config import settings  # noqa: E402
from notes_ui.manager import NoteManager  # noqa: E402

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)
logger = logging.getLogger("notes_ui")


def _ensure_manager() -> NoteManager:
    """Create the session's manager and load the notes on first run."""
    if "manager" not in st.session_state:
        client = NotesClient(settings.notes_api_url, timeout=settings.request_timeout)
        manager = NoteManager(client, confirm_delete=settings.confirm_delete)
        logger.info("New session — loading notes from %s", settings.notes_api_url)
        with st.spinner("Loading..."):
            manager.refresh()
        st.session_state.manager = manager
    return st.session_state.manager


manager = _ensure_manager()

st.title("Notes")

if manager.state.error:
    st.error(manager.state.error)
    col_dismiss, col_retry, _ = st.columns([1, 1, 4])
    col_dismiss.button("Dismiss", on_click=manager.dismiss_error)
    col_retry.button("Retry loading", on_click=manager.refresh)

note_form.render(manager)
st.divider()
note_list.render(manager)

st.divider()
st.caption(f"Notes service: {settings.notes_api_url}")
