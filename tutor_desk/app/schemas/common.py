"""Shared response envelopes."""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, computed_field

T = TypeVar("T")


class ReadResult(BaseModel, Generic[T]):
    """Outcome of a repository read: data on success, a diagnostic on failure.

    A failed read carries no items, so ``ok`` is the only way to tell
    "nothing stored" apart from "could not load".
    """

    items: List[T] = []
    error: Optional[str] = None

    @computed_field
    @property
    def ok(self) -> bool:
        return self.error is None


class DeleteResponse(BaseModel):
    status: str = "deleted"
    id: str
