"""Repository holding the todo collection.

The repository is the single source of truth for todos. Records are
kept in one ordered mapping keyed by id: iterating it yields insertion
order and indexing it is the id lookup, so the list view and the id
index always agree. `update` mutates the stored object in place, which
means every reference handed out earlier sees the change.
"""

import logging
import threading
import uuid
from collections import OrderedDict
from typing import List, Optional
from uuid import UUID

from . import models, schemas

_LOGGER = logging.getLogger("todo_app.repository")


class InMemoryTodoRepository:
    """CRUD operations for `CreatedTodo` objects kept in process memory."""

    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")
        self._todos: "OrderedDict[UUID, models.CreatedTodo]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def read_all(self) -> List[models.CreatedTodo]:
        """Return all todos in insertion order."""
        with self._lock:
            return list(self._todos.values())

    def create(self, todo: schemas.Todo) -> models.CreatedTodo:
        """Store a new todo under a fresh id and return the stored record."""
        with self._lock:
            todo_id = uuid.uuid4()
            while todo_id in self._todos:
                todo_id = uuid.uuid4()
            created = models.CreatedTodo(
                id=todo_id,
                url=f"{self.base_url}/{todo_id}",
                title=todo.title,
                order=todo.order,
                completed=todo.completed,
            )
            self._todos[todo_id] = created
        _LOGGER.debug("todo_created id=%s", todo_id)
        return created

    def delete_all(self) -> None:
        """Remove every todo."""
        with self._lock:
            count = len(self._todos)
            self._todos.clear()
        _LOGGER.debug("todos_cleared count=%d", count)

    def find_by_id(self, todo_id: UUID) -> Optional[models.CreatedTodo]:
        """Return the todo for `todo_id` or `None` if not found."""
        with self._lock:
            return self._todos.get(todo_id)

    def update(self, todo_id: UUID, changes: schemas.TodoChanges) -> Optional[models.CreatedTodo]:
        """Apply the present fields of `changes` to the stored todo.

        Absent fields are left untouched. Returns the updated todo, or
        `None` when `todo_id` is unknown.
        """
        with self._lock:
            todo = self._todos.get(todo_id)
            if todo is None:
                return None
            fields = changes.present()
            for name, value in fields.items():
                setattr(todo, name, value)
        _LOGGER.debug("todo_updated id=%s fields=%s", todo_id, sorted(fields))
        return todo

    def delete(self, todo_id: UUID) -> None:
        """Remove the todo for `todo_id`; unknown ids are ignored."""
        with self._lock:
            removed = self._todos.pop(todo_id, None)
        if removed is not None:
            _LOGGER.debug("todo_deleted id=%s", todo_id)
