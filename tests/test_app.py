"""Tests for the Streamlit page, run headless through AppTest.

The HTTP client is patched, so no notes service is needed.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from streamlit.testing.v1 import AppTest

from notes_ui.api import NotesApiError, NotesClient
from notes_ui.components.note_list import EMPTY_STATE
from notes_ui.models import Note

APP_PATH = str(Path(__file__).resolve().parent.parent / "notes_ui" / "app.py")

NOTE_1 = Note(id="1", title="Groceries", content="Eggs, milk")


def _run_app() -> AppTest:
    at = AppTest.from_file(APP_PATH, default_timeout=10)
    at.run()
    return at


class TestPageRender:
    def test_empty_list(self) -> None:
        with patch.object(NotesClient, "list_notes", return_value=[]):
            at = _run_app()
        assert not at.exception
        assert at.title[0].value == "Notes"
        assert any(info.value == EMPTY_STATE for info in at.info)
        assert [b.label for b in at.button] == ["Add Note"]

    def test_notes_listed(self) -> None:
        with patch.object(NotesClient, "list_notes", return_value=[NOTE_1]):
            at = _run_app()
        assert not at.exception
        assert "Groceries" in [s.value for s in at.subheader]
        labels = [b.label for b in at.button]
        assert "Edit" in labels
        assert "Delete" in labels

    def test_load_failure_is_visible(self) -> None:
        with patch.object(
            NotesClient, "list_notes", side_effect=NotesApiError("HTTP 500", 500)
        ):
            at = _run_app()
        assert not at.exception
        assert "Could not load notes" in at.error[0].value


class TestPageInteraction:
    def test_edit_fills_form(self) -> None:
        with patch.object(NotesClient, "list_notes", return_value=[NOTE_1]):
            at = _run_app()
            at.button(key="edit_1").click().run()
        assert not at.exception
        assert at.text_input[0].value == "Groceries"
        assert at.text_area[0].value == "Eggs, milk"
        assert "Update Note" in [b.label for b in at.button]

    def test_delete_asks_for_confirmation(self) -> None:
        with patch.object(
            NotesClient, "list_notes", side_effect=[[NOTE_1], []]
        ) as list_notes, patch.object(NotesClient, "delete_note") as delete_note:
            at = _run_app()
            at.button(key="delete_1").click().run()
            assert at.warning[0].value == "Are you sure you want to delete this note?"
            delete_note.assert_not_called()

            at.button(key="confirm_1").click().run()
            delete_note.assert_called_once_with("1")
            assert list_notes.call_count == 2
        assert not at.exception
        assert any(info.value == EMPTY_STATE for info in at.info)
