"""Note form: title and content fields with an Add/Update button."""

from __future__ import annotations

import streamlit as st

from notes_ui.manager import NoteManager


def _field_keys(revision: int) -> tuple[str, str]:
    """Widget keys for one generation of the form.

    A new revision means the draft was replaced (edit, cancel, save), so
    the widgets are rebuilt from the draft instead of keeping typed text.
    """
    return f"note_title_{revision}", f"note_content_{revision}"


def _on_submit(manager: NoteManager, title_key: str, content_key: str) -> None:
    """Copy the widget values into the draft and save it."""
    manager.update_draft(
        st.session_state.get(title_key, ""),
        st.session_state.get(content_key, ""),
    )
    with st.spinner("Saving..."):
        result = manager.submit()
    if result.ok:
        st.toast("Note saved.")


def render(manager: NoteManager) -> None:
    """Render the create/edit form."""
    state = manager.state
    title_key, content_key = _field_keys(state.form_revision)

    with st.form(key=f"note_form_{state.form_revision}"):
        st.text_input("Title:", value=state.draft.title, key=title_key)
        st.text_area("Content:", value=state.draft.content, key=content_key, height=120)
        label = "Update Note" if state.editing else "Add Note"
        st.form_submit_button(
            label,
            type="primary",
            disabled=state.submitting,
            on_click=_on_submit,
            args=(manager, title_key, content_key),
        )

    if state.editing:
        st.button("Cancel edit", on_click=manager.cancel_edit)
