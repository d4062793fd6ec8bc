"""Pydantic payloads accepted and returned by the /todos endpoints."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class TodoCreate(BaseModel):
    title: str
    completed: bool = False


class TodoUpdate(BaseModel):
    """PATCH body. Fields left out keep their stored value."""

    title: Optional[str] = None
    completed: Optional[bool] = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class TodoOut(BaseModel):
    id: int
    title: str
    completed: bool
