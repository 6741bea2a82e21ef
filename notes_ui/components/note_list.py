"""Notes list: one card per note with Edit and Delete buttons."""

from __future__ import annotations

import streamlit as st

from notes_ui.manager import NoteManager
from notes_ui.models import Note

EMPTY_STATE = "No notes found. Add a new note to get started!"


def _on_delete(manager: NoteManager, note_id: str) -> None:
    with st.spinner("Loading..."):
        result = manager.request_delete(note_id)
    if result is not None and result.ok:
        st.toast("Note deleted.")


def _on_confirm_delete(manager: NoteManager) -> None:
    with st.spinner("Loading..."):
        result = manager.confirm_delete()
    if result.ok:
        st.toast("Note deleted.")


def _render_note(manager: NoteManager, note: Note) -> None:
    """A single note card."""
    with st.container(border=True):
        st.subheader(note.title, anchor=False)
        st.text(note.content)

        if manager.state.pending_delete == note.id:
            st.warning("Are you sure you want to delete this note?")
            col_yes, col_no, _ = st.columns([1, 1, 4])
            col_yes.button(
                "Yes, delete",
                key=f"confirm_{note.id}",
                type="primary",
                on_click=_on_confirm_delete,
                args=(manager,),
            )
            col_no.button("Cancel", key=f"cancel_{note.id}", on_click=manager.cancel_delete)
            return

        col_edit, col_delete, _ = st.columns([1, 1, 4])
        col_edit.button("Edit", key=f"edit_{note.id}", on_click=manager.edit, args=(note,))
        col_delete.button(
            "Delete",
            key=f"delete_{note.id}",
            on_click=_on_delete,
            args=(manager, note.id),
        )


def render(manager: NoteManager) -> None:
    """Render the list of notes."""
    st.subheader("Notes List", anchor=False)
    state = manager.state

    if not state.notes:
        st.info(EMPTY_STATE)
        return

    for note in state.notes:
        _render_note(manager, note)
