"""Todo use cases (list, lookup, create, update, delete)."""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from api.domain.todos import Todo
from api.repositories.memory_repository import InMemoryTodoRepository

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "completed")

SAMPLE_TODOS = (
    ("Remove unused imports", True),
    ("Write release notes", False),
    ("Review open pull requests", False),
)


class TodoError(Exception):
    def __init__(self, message: str, code: str = "invalid", status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class TodoNotFoundError(TodoError):
    """Raised when no todo matches the requested id."""

    def __init__(self, todo_id: int):
        super().__init__(f"Todo {todo_id} not found", "not_found", 404)
        self.todo_id = todo_id


class InvalidTodoPayloadError(TodoError):
    """Raised when an update carries nothing usable."""

    def __init__(self, message: str = "Request body must set title and/or completed"):
        super().__init__(message, "invalid_payload", 400)


class TodoService:
    def __init__(self, repository: Optional[InMemoryTodoRepository] = None) -> None:
        self.repository = repository if repository is not None else InMemoryTodoRepository()

    def list_todos(self) -> list[Todo]:
        return self.repository.get_all()

    def get_todo(self, todo_id: int) -> Todo:
        todo = self.repository.find_by_id(todo_id)
        if todo is None:
            logger.debug("todo %s not found", todo_id)
            raise TodoNotFoundError(todo_id)
        return todo

    def create_todo(self, title: str, completed: bool = False) -> Todo:
        todo = self.repository.save(Todo(title=title, completed=completed))
        logger.info("created todo %s", todo.id)
        return todo

    def update_todo(self, todo_id: int, changes: Optional[Mapping[str, Any]]) -> Todo:
        """
        Apply ``changes`` (title and/or completed) to an existing todo.

        The payload is checked before the lookup, so an empty body on an
        unknown id is still an InvalidTodoPayloadError.
        """
        fields = {k: v for k, v in (changes or {}).items() if k in UPDATABLE_FIELDS and v is not None}
        if not fields:
            raise InvalidTodoPayloadError()
        current = self.get_todo(todo_id)
        merged = Todo(
            title=fields.get("title", current.title),
            completed=fields.get("completed", current.completed),
        )
        updated = self.repository.update(todo_id, merged)
        if updated is None:
            # removido entre a leitura e a escrita
            raise TodoNotFoundError(todo_id)
        logger.info("updated todo %s (%s)", todo_id, ", ".join(sorted(fields)))
        return updated

    def delete_todo(self, todo_id: int) -> None:
        if not self.repository.delete_by_id(todo_id):
            logger.debug("todo %s not found", todo_id)
            raise TodoNotFoundError(todo_id)
        logger.info("deleted todo %s", todo_id)

    def seed(self) -> list[Todo]:
        """Store the sample todos used by local/dev environments."""
        return [self.create_todo(title, completed) for title, completed in SAMPLE_TODOS]
