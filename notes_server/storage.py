"""JSON file-based storage layer for the notes service."""

import json
import logging
import os
import threading
from pathlib import Path

from pydantic import ValidationError

from .models import Note, NoteStore

logger = logging.getLogger("notes_server.storage")


class NoteStorage:
    """Manages note persistence using a local JSON file.

    Mutations build a new store, write it, and only then replace the
    in-memory copy, so a failed write leaves the served notes unchanged.
    """

    def __init__(self, storage_path: Path) -> None:
        self._path = storage_path
        self._store = NoteStore()
        # FastAPI runs sync endpoints in a thread pool
        self._lock = threading.Lock()
        self._load()

    def _load(self) -> None:
        """Load notes from disk. Creates file if missing."""
        if self._path.exists():
            try:
                raw = json.loads(self._path.read_text(encoding="utf-8"))
                self._store = NoteStore.model_validate(raw)
                logger.info(
                    "Loaded %d notes from %s", len(self._store.notes), self._path
                )
            except (json.JSONDecodeError, ValidationError) as exc:
                logger.error("Failed to load notes: %s — starting fresh", exc)
                self._store = NoteStore()
        else:
            logger.info("No storage file found at %s — starting fresh", self._path)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._persist(self._store)

    def _persist(self, store: NoteStore) -> None:
        """Write ``store`` to a temp file and move it over the data file."""
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_text(
            store.model_dump_json(indent=2, by_alias=True),
            encoding="utf-8",
        )
        os.replace(tmp_path, self._path)

    def _commit(self, notes: list[Note]) -> None:
        """Persist ``notes`` and make them the served state. Caller holds the lock."""
        store = NoteStore(notes=notes)
        self._persist(store)
        self._store = store

    def _find(self, note_id: str) -> int | None:
        for i, note in enumerate(self._store.notes):
            if note.id == note_id:
                return i
        return None

    def save(self, title: str, content: str) -> Note:
        """Create and persist a new note."""
        note = Note(title=title, content=content)
        with self._lock:
            self._commit([*self._store.notes, note])
        logger.info("Saved note %s — '%s'", note.id, note.title)
        return note

    def get_all(self) -> list[Note]:
        """Return every stored note, oldest first."""
        with self._lock:
            return list(self._store.notes)

    def update(self, note_id: str, title: str, content: str) -> Note | None:
        """Replace title and content. Returns None if the note does not exist."""
        with self._lock:
            idx = self._find(note_id)
            if idx is None:
                return None
            note = self._store.notes[idx].model_copy(
                update={"title": title, "content": content}
            )
            notes = list(self._store.notes)
            notes[idx] = note
            self._commit(notes)
        logger.info("Updated note %s", note_id)
        return note

    def delete(self, note_id: str) -> bool:
        """Remove a note. Returns False if it did not exist."""
        with self._lock:
            idx = self._find(note_id)
            if idx is None:
                return False
            notes = list(self._store.notes)
            del notes[idx]
            self._commit(notes)
        logger.info("Deleted note %s", note_id)
        return True

    @property
    def count(self) -> int:
        """Number of stored notes."""
        return len(self._store.notes)
