"""End-to-end tests: NoteManager -> NotesClient -> notes service.

The client's session is a FastAPI TestClient, so every request goes
through the real routes and storage without opening a socket.
"""

from __future__ import annotations

import warnings
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from notes_server.main import create_app
from notes_server.storage import NoteStorage
from notes_ui.api import NotesClient
from notes_ui.manager import NoteManager
from notes_ui.result import Failure, Ok
from notes_ui.state import Creating


@pytest.fixture()
def service(tmp_path: Path):
    app = create_app(NoteStorage(storage_path=tmp_path / "notes.json"))
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def manager(service: TestClient) -> NoteManager:
    client = NotesClient("http://testserver", session=service)
    m = NoteManager(client, confirm_delete=False)
    m.refresh()
    return m


def _create(manager: NoteManager, title: str, content: str) -> str:
    manager.update_draft(title, content)
    result = manager.submit()
    assert isinstance(result, Ok)
    return result.value.id


class TestCrudCycle:
    def test_starts_empty(self, manager: NoteManager) -> None:
        assert manager.state.notes == ()
        assert manager.state.error is None

    def test_create_appears_with_new_id(self, manager: NoteManager) -> None:
        note_id = _create(manager, "A", "B")

        assert len(manager.state.notes) == 1
        note = manager.state.notes[0]
        assert note.id == note_id
        assert (note.title, note.content) == ("A", "B")
        assert note.created_at

    def test_update_keeps_id(self, manager: NoteManager) -> None:
        note_id = _create(manager, "A", "B")
        _create(manager, "Other", "Note")

        manager.edit(next(n for n in manager.state.notes if n.id == note_id))
        manager.update_draft("A2", "B2")
        assert isinstance(manager.submit(), Ok)

        updated = [n for n in manager.state.notes if n.id == note_id]
        assert len(updated) == 1
        assert (updated[0].title, updated[0].content) == ("A2", "B2")
        assert len(manager.state.notes) == 2
        assert manager.state.mode == Creating()

    def test_delete_removes_note(self, manager: NoteManager) -> None:
        note_id = _create(manager, "A", "B")
        keep_id = _create(manager, "C", "D")

        assert manager.request_delete(note_id) == Ok(note_id)

        assert [n.id for n in manager.state.notes] == [keep_id]

    def test_update_of_deleted_note_fails(
        self, manager: NoteManager, service: TestClient
    ) -> None:
        note_id = _create(manager, "A", "B")
        manager.edit(manager.state.notes[0])
        # Removed behind the page's back
        service.delete(f"/notes/{note_id}")

        manager.update_draft("A2", "B2")
        result = manager.submit()

        assert isinstance(result, Failure)
        assert result.status_code == 404
        assert manager.state.draft.title == "A2"
        assert [n.id for n in manager.state.notes] == [note_id]

    def test_last_write_wins(self, manager: NoteManager, service: TestClient) -> None:
        note_id = _create(manager, "A", "B")
        manager.edit(manager.state.notes[0])
        service.put(f"/notes/{note_id}", json={"title": "theirs", "content": "x"})

        manager.update_draft("mine", "y")
        assert isinstance(manager.submit(), Ok)

        assert manager.state.notes[0].title == "mine"


class TestSessionWarnings:
    def test_timeout_argument_warning_is_filtered(self, manager: NoteManager) -> None:
        # Filters come from [tool.pytest.ini_options]; nothing should get through
        with warnings.catch_warnings(record=True) as caught:
            manager.refresh()
        assert not [w for w in caught if "'timeout' argument" in str(w.message)]
