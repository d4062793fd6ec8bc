"""
Persistence adapters.

Services depend on the repository methods (get_all/find_by_id/save/
delete_by_id/update) rather than on how todos are stored.
"""

from .memory_repository import InMemoryTodoRepository

__all__ = ["InMemoryTodoRepository"]
