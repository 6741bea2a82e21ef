"""Note manager: the list, submit, edit and delete operations of the page.

Each operation talks to the notes service through :class:`NotesClient`,
advances the immutable state through the reducer, and returns a
:class:`~notes_ui.result.Result` so the caller decides how to present it.
Failures never raise out of this module.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from notes_ui.api import NotesApiError, NotesClient
from notes_ui.models import Note, NoteDraft
from notes_ui.result import Failure, Ok, Result
from notes_ui.state import (
    Action,
    DeleteCancelled,
    DeleteFailed,
    DeleteRequested,
    DeleteSucceeded,
    DraftEdited,
    EditCancelled,
    Editing,
    EditRequested,
    ErrorDismissed,
    FetchFailed,
    FetchStarted,
    NotesLoaded,
    NotesState,
    SubmitFailed,
    SubmitStarted,
    SubmitSucceeded,
    reduce,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Title and content are both required."
SUBMIT_IN_PROGRESS_MESSAGE = "A save is already in progress."


class NoteManager:
    """Owns the page state and drives it through the notes service."""

    def __init__(
        self,
        client: NotesClient,
        confirm_delete: bool = True,
        state: NotesState | None = None,
    ) -> None:
        self.client = client
        self.confirm_delete_enabled = confirm_delete
        self._state = state or NotesState()

    @property
    def state(self) -> NotesState:
        return self._state

    def dispatch(self, action: Action) -> NotesState:
        """Apply ``action`` to the current state and keep the result."""
        self._state = reduce(self._state, action)
        return self._state

    # ------------------------------------------------------------------
    # List
    # ------------------------------------------------------------------

    def refresh(self) -> Result[list[Note]]:
        """Fetch every note and replace the in-memory list.

        On failure the previous list stays as it was.
        """
        self.dispatch(FetchStarted())
        try:
            notes = self.client.list_notes()
        except NotesApiError as exc:
            logger.error("Error fetching notes: %s", exc.message)
            self.dispatch(FetchFailed(f"Could not load notes: {exc.message}"))
            return Failure(exc.message, exc.status_code)

        self.dispatch(NotesLoaded(tuple(notes)))
        logger.debug("Loaded %d notes", len(notes))
        return Ok(notes)

    # ------------------------------------------------------------------
    # Draft
    # ------------------------------------------------------------------

    def update_draft(self, title: str, content: str) -> None:
        self.dispatch(DraftEdited(title=title, content=content))

    def edit(self, note: Note) -> None:
        """Load ``note`` into the draft; the next submit updates it."""
        self.dispatch(EditRequested(note))

    def cancel_edit(self) -> None:
        self.dispatch(EditCancelled())

    def submit(self) -> Result[Note]:
        """Create or update a note from the current draft.

        ``Creating`` posts a new note, ``Editing(id)`` puts to that id.
        On success the draft is cleared and the list re-fetched; on
        failure the draft is kept and nothing is re-fetched.
        """
        state = self._state
        if state.submitting:
            logger.warning("Submit ignored: another save is in flight")
            return Failure(SUBMIT_IN_PROGRESS_MESSAGE)

        try:
            draft = NoteDraft(title=state.draft.title, content=state.draft.content)
        except ValidationError:
            self.dispatch(SubmitFailed(REQUIRED_FIELDS_MESSAGE))
            return Failure(REQUIRED_FIELDS_MESSAGE)

        mode = state.mode
        self.dispatch(SubmitStarted())
        try:
            if isinstance(mode, Editing):
                note = self.client.update_note(mode.note_id, draft)
            else:
                note = self.client.create_note(draft)
        except NotesApiError as exc:
            logger.error("Error saving note: %s", exc.message)
            self.dispatch(SubmitFailed(f"Could not save note: {exc.message}"))
            return Failure(exc.message, exc.status_code)

        self.dispatch(SubmitSucceeded())
        self.refresh()
        return Ok(note)

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def request_delete(self, note_id: str) -> Result[str] | None:
        """Start deleting ``note_id``.

        With confirmation enabled this only marks the note as pending and
        returns None; :meth:`confirm_delete` finishes the job.
        """
        if self.confirm_delete_enabled:
            self.dispatch(DeleteRequested(note_id))
            return None
        return self.delete(note_id)

    def confirm_delete(self) -> Result[str]:
        note_id = self._state.pending_delete
        if note_id is None:
            return Failure("No note is waiting to be deleted.")
        return self.delete(note_id)

    def cancel_delete(self) -> None:
        self.dispatch(DeleteCancelled())

    def delete(self, note_id: str) -> Result[str]:
        """Delete ``note_id`` and re-fetch the list on success."""
        try:
            self.client.delete_note(note_id)
        except NotesApiError as exc:
            logger.error("Error deleting note %s: %s", note_id, exc.message)
            self.dispatch(DeleteFailed(f"Could not delete note: {exc.message}"))
            return Failure(exc.message, exc.status_code)

        self.dispatch(DeleteSucceeded(note_id))
        self.refresh()
        return Ok(note_id)

    def dismiss_error(self) -> None:
        self.dispatch(ErrorDismissed())
