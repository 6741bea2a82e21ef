"""Immutable UI state for the notes page and the reducer that advances it.

The page never mutates state in place: every change is an action passed
through :func:`reduce`, which returns a new :class:`NotesState`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Union

from notes_ui.models import Note

# ---------------------------------------------------------------------------
# Draft
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Creating:
    """Submitting the draft creates a new note."""


@dataclass(frozen=True)
class Editing:
    """Submitting the draft updates the note with ``note_id``."""

    note_id: str


DraftMode = Union[Creating, Editing]


@dataclass(frozen=True)
class Draft:
    """Unsaved form fields."""

    title: str = ""
    content: str = ""


@dataclass(frozen=True)
class NotesState:
    """Everything the page renders.

    ``form_revision`` increases whenever the draft is replaced from outside
    the form (edit, cancel, successful submit) so the form can be rebuilt
    with the new values.
    """

    notes: tuple[Note, ...] = ()
    draft: Draft = field(default_factory=Draft)
    mode: DraftMode = field(default_factory=Creating)
    loading: bool = False
    submitting: bool = False
    pending_delete: str | None = None
    error: str | None = None
    form_revision: int = 0

    @property
    def editing(self) -> bool:
        return isinstance(self.mode, Editing)


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FetchStarted:
    pass


@dataclass(frozen=True)
class NotesLoaded:
    notes: tuple[Note, ...]


@dataclass(frozen=True)
class FetchFailed:
    message: str


@dataclass(frozen=True)
class DraftEdited:
    title: str
    content: str


@dataclass(frozen=True)
class EditRequested:
    note: Note


@dataclass(frozen=True)
class EditCancelled:
    pass


@dataclass(frozen=True)
class SubmitStarted:
    pass


@dataclass(frozen=True)
class SubmitSucceeded:
    pass


@dataclass(frozen=True)
class SubmitFailed:
    message: str


@dataclass(frozen=True)
class DeleteRequested:
    note_id: str


@dataclass(frozen=True)
class DeleteCancelled:
    pass


@dataclass(frozen=True)
class DeleteSucceeded:
    note_id: str


@dataclass(frozen=True)
class DeleteFailed:
    message: str


@dataclass(frozen=True)
class ErrorDismissed:
    pass


Action = Union[
    FetchStarted,
    NotesLoaded,
    FetchFailed,
    DraftEdited,
    EditRequested,
    EditCancelled,
    SubmitStarted,
    SubmitSucceeded,
    SubmitFailed,
    DeleteRequested,
    DeleteCancelled,
    DeleteSucceeded,
    DeleteFailed,
    ErrorDismissed,
]


# ---------------------------------------------------------------------------
# Reducer
# ---------------------------------------------------------------------------


def _cleared_draft(state: NotesState) -> NotesState:
    return replace(
        state,
        draft=Draft(),
        mode=Creating(),
        form_revision=state.form_revision + 1,
    )


def reduce(state: NotesState, action: Action) -> NotesState:
    """Return the state that follows ``state`` after ``action``."""
    if isinstance(action, FetchStarted):
        return replace(state, loading=True)
    if isinstance(action, NotesLoaded):
        # The server's list replaces ours wholesale
        return replace(state, notes=tuple(action.notes), loading=False, error=None)
    if isinstance(action, FetchFailed):
        return replace(state, loading=False, error=action.message)

    if isinstance(action, DraftEdited):
        return replace(state, draft=Draft(title=action.title, content=action.content))
    if isinstance(action, EditRequested):
        note = action.note
        return replace(
            state,
            draft=Draft(title=note.title, content=note.content),
            mode=Editing(note.id),
            form_revision=state.form_revision + 1,
        )
    if isinstance(action, EditCancelled):
        return _cleared_draft(state)

    if isinstance(action, SubmitStarted):
        return replace(state, submitting=True)
    if isinstance(action, SubmitSucceeded):
        return replace(_cleared_draft(state), submitting=False, error=None)
    if isinstance(action, SubmitFailed):
        return replace(state, submitting=False, error=action.message)

    if isinstance(action, DeleteRequested):
        return replace(state, pending_delete=action.note_id)
    if isinstance(action, DeleteCancelled):
        return replace(state, pending_delete=None)
    if isinstance(action, DeleteSucceeded):
        new_state = replace(state, pending_delete=None, error=None)
        if state.mode == Editing(action.note_id):
            new_state = _cleared_draft(new_state)
        return new_state
    if isinstance(action, DeleteFailed):
        return replace(state, pending_delete=None, error=action.message)

    if isinstance(action, ErrorDismissed):
        return replace(state, error=None)

    raise TypeError(f"Unknown action: {action!r}")
