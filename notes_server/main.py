"""Development notes service.

Serves the REST contract the notes UI consumes, backed by a JSON file.

Endpoints:
  GET    /notes         — List all notes
  POST   /notes         — Create a note
  PUT    /notes/{id}    — Replace a note's title and content
  DELETE /notes/{id}    — Delete a note
  GET    /health        — Service status and note count

Run with:
    python -m notes_server.main
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from notes_server.config import settings
from notes_server.models import Note, NoteIn
from notes_server.storage import NoteStorage

logger = logging.getLogger("notes_server")


def get_storage(request: Request) -> NoteStorage:
    """Storage bound to the running application."""
    return request.app.state.storage


def list_notes(storage: NoteStorage = Depends(get_storage)) -> list[Note]:
    """Every note, oldest first."""
    return storage.get_all()


def create_note(payload: NoteIn, storage: NoteStorage = Depends(get_storage)) -> Note:
    """Create a note; the id and creation time are assigned here."""
    return storage.save(title=payload.title, content=payload.content)


def update_note(
    note_id: str, payload: NoteIn, storage: NoteStorage = Depends(get_storage)
) -> Note:
    """Replace title and content. No version check: last write wins."""
    note = storage.update(note_id, title=payload.title, content=payload.content)
    if note is None:
        raise HTTPException(status_code=404, detail="Note not found")
    return note


def delete_note(note_id: str, storage: NoteStorage = Depends(get_storage)) -> Response:
    if not storage.delete(note_id):
        raise HTTPException(status_code=404, detail="Note not found")
    return Response(status_code=204)


def health(storage: NoteStorage = Depends(get_storage)) -> dict[str, Any]:
    return {
        "status": "healthy",
        "server": "notes",
        "total_notes": storage.count,
        "timestamp": datetime.now(UTC).isoformat(),
    }


def create_app(storage: NoteStorage | None = None) -> FastAPI:
    """Build the service around ``storage`` (file from settings by default)."""
    app = FastAPI(title="Notes Service", version="1.0.0")
    if storage is None:
        storage = NoteStorage(settings.storage_path)
    app.state.storage = storage

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_api_route("/notes", list_notes, methods=["GET"], response_model=list[Note])
    app.add_api_route(
        "/notes", create_note, methods=["POST"], response_model=Note, status_code=201
    )
    app.add_api_route(
        "/notes/{note_id}", update_note, methods=["PUT"], response_model=Note
    )
    app.add_api_route(
        "/notes/{note_id}", delete_note, methods=["DELETE"], status_code=204
    )
    app.add_api_route("/health", health, methods=["GET"])
    return app


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    )
    logger.info("Starting notes service on port %d ...", settings.port)
    uvicorn.run(create_app(), host=settings.host, port=settings.port)
