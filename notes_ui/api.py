"""Thin HTTP client for the notes REST service.

Every method returns parsed models or raises ``NotesApiError``.
Uses requests (synchronous) since Streamlit reruns are synchronous.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests
from pydantic import TypeAdapter, ValidationError

from notes_ui.models import Note, NoteDraft

logger = logging.getLogger(__name__)

_NOTE_LIST = TypeAdapter(list[Note])


class NotesApiError(Exception):
    """A call to the notes service failed.

    Covers connection errors, timeouts, non-2xx responses and bodies that
    are not valid JSON notes.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NotesClient:
    """Client for ``/notes`` on the configured base URL.

    ``session`` may be anything with the ``requests.Session`` call surface
    (``get``/``post``/``put``/``delete`` returning a response object).
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        session: Any | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session if session is not None else requests.Session()

    def _url(self, note_id: str | None = None) -> str:
        if note_id is None:
            return f"{self.base_url}/notes"
        return f"{self.base_url}/notes/{quote(note_id, safe='')}"

    def _send(self, method: str, url: str, **kwargs: Any) -> Any:
        """Issue a request and return the raised-for-status response."""
        try:
            resp = getattr(self._session, method)(url, timeout=self.timeout, **kwargs)
        except requests.Timeout as exc:
            raise NotesApiError(f"Request to {url} timed out") from exc
        except requests.ConnectionError as exc:
            raise NotesApiError(f"Cannot reach the notes service at {self.base_url}") from exc
        except requests.RequestException as exc:
            raise NotesApiError(f"Request to {url} failed: {exc}") from exc

        if resp.status_code >= 400:
            raise NotesApiError(
                f"{method.upper()} {url} returned HTTP {resp.status_code}",
                status_code=resp.status_code,
            )
        return resp

    @staticmethod
    def _parse(resp: Any, parser: Any) -> Any:
        try:
            return parser(resp.json())
        except (ValueError, ValidationError) as exc:
            raise NotesApiError(f"Malformed response from notes service: {exc}") from exc

    def list_notes(self) -> list[Note]:
        """GET /notes — every note, in server order."""
        resp = self._send("get", self._url())
        return self._parse(resp, _NOTE_LIST.validate_python)

    def create_note(self, draft: NoteDraft) -> Note:
        """POST /notes — the server assigns id and createdAt."""
        resp = self._send("post", self._url(), json=draft.model_dump())
        note = self._parse(resp, Note.model_validate)
        logger.info("Created note %s", note.id)
        return note

    def update_note(self, note_id: str, draft: NoteDraft) -> Note:
        """PUT /notes/{id} — unconditional replace of title and content."""
        resp = self._send("put", self._url(note_id), json=draft.model_dump())
        note = self._parse(resp, Note.model_validate)
        logger.info("Updated note %s", note_id)
        return note

    def delete_note(self, note_id: str) -> None:
        """DELETE /notes/{id}."""
        self._send("delete", self._url(note_id))
        logger.info("Deleted note %s", note_id)
