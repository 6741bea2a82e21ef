"""Unit tests for scripts/seed_data.py with a mocked client."""

from __future__ import annotations

from unittest.mock import MagicMock

from notes_ui.api import NotesApiError, NotesClient
from notes_ui.models import Note, NoteDraft
from scripts.seed_data import count_notes, seed_notes


def _make_client() -> MagicMock:
    return MagicMock(spec=NotesClient)


class TestSeedNotes:
    def test_creates_every_note(self) -> None:
        client = _make_client()
        client.create_note.side_effect = lambda d: Note(id="x", title=d.title, content=d.content)

        assert seed_notes(client, [("A", "a"), ("B", "b")]) == 2
        client.create_note.assert_any_call(NoteDraft(title="B", content="b"))

    def test_failure_skips_one_note(self) -> None:
        client = _make_client()
        client.create_note.side_effect = [
            NotesApiError("HTTP 500", status_code=500),
            Note(id="2", title="B", content="b"),
        ]

        assert seed_notes(client, [("A", "a"), ("B", "b")]) == 1


class TestCountNotes:
    def test_counts(self) -> None:
        client = _make_client()
        client.list_notes.return_value = [Note(id="1", title="A", content="a")]
        assert count_notes(client) == 1

    def test_service_gone(self, capsys) -> None:
        client = _make_client()
        client.list_notes.side_effect = NotesApiError("Cannot reach the notes service")

        assert count_notes(client) is None
        assert "Could not list notes" in capsys.readouterr().out
