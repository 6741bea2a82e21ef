"""Pydantic models for notes exchanged with the notes service."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Note(BaseModel):
    """A note as returned by the notes service.

    The service names the identifier ``_id`` and the timestamp
    ``createdAt``; both are accepted under their Python names too.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., alias="_id", description="Server-assigned identifier")
    title: str = Field(..., description="Note title")
    content: str = Field(..., description="Note content")
    created_at: str | None = Field(
        default=None,
        alias="createdAt",
        description="Server-assigned creation timestamp",
    )


class NoteDraft(BaseModel):
    """The form fields sent as the body of create and update requests."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1, description="Note title")
    content: str = Field(..., min_length=1, description="Note content")
