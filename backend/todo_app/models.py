"""SQLModel data models.

This module defines the record the repository stores for every created
todo. The models are plain data models (no `table=True`): todos live in
memory only, but the class keeps the same shape a table would have so
the storage can be swapped without touching the controllers.
"""

from typing import Optional
from uuid import UUID

from sqlmodel import SQLModel


class TodoBase(SQLModel):
    """Fields shared by user input and stored todos."""
    title: str
    order: Optional[int] = None
    completed: bool = False


class CreatedTodo(TodoBase):
    """A todo after creation.

    Fields:
    - `id`: server-assigned identifier, unique for the process lifetime
    - `url`: self-referencing URL built from the configured base URL and `id`

    Only `InMemoryTodoRepository` constructs or mutates instances.
    """
    id: UUID
    url: str
