"""Process-local todo store."""
from __future__ import annotations

import threading
from dataclasses import replace
from typing import Dict, Optional

from api.domain.todos import Todo


class InMemoryTodoRepository:
    """CRUD helpers over a dict keyed by todo id (insertion ordered)."""

    def __init__(self) -> None:
        self._items: Dict[int, Todo] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def get_all(self) -> list[Todo]:
        with self._lock:
            return [replace(todo) for todo in self._items.values()]

    def find_by_id(self, todo_id: int) -> Optional[Todo]:
        with self._lock:
            todo = self._items.get(todo_id)
            return replace(todo) if todo else None

    def save(self, todo: Todo) -> Todo:
        """Store a copy of ``todo`` under a fresh id; any incoming id is ignored."""
        with self._lock:
            stored = replace(todo, id=self._next_id)
            self._items[stored.id] = stored
            self._next_id += 1
            return replace(stored)

    def delete_by_id(self, todo_id: int) -> bool:
        with self._lock:
            return self._items.pop(todo_id, None) is not None

    def update(self, todo_id: int, new_todo: Todo) -> Optional[Todo]:
        with self._lock:
            current = self._items.get(todo_id)
            if current is None:
                return None
            current.title = new_todo.title
            current.completed = new_todo.completed
            return replace(current)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()
            self._next_id = 1

    def __len__(self) -> int:
        return len(self._items)
