"""Outcome of a note manager operation: ``Ok(value)`` or ``Failure(message)``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """The operation completed; ``value`` is what it produced."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """The operation did not complete.

    ``status_code`` is set when the service answered with an HTTP error.
    """

    message: str
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Failure]
