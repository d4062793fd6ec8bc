"""Todo entity kept by the repositories."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional


@dataclass
class Todo:
    """A task record. ``id`` stays None until a repository stores it."""

    title: str
    completed: bool = False
    id: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
