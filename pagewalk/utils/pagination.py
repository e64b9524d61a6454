from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ItemsPage(BaseModel, Generic[T]):
    """Offset-style page payload: one slice of items plus the total count."""

    items: list[T]
    count: int


class CursorPage(BaseModel, Generic[T]):
    """Cursor-style page payload with an opaque continuation cursor."""

    items: list[T]
    next_cursor: str | None = None
