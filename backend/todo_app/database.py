"""Backing store and helpers.

Todos are kept in memory for the lifetime of the process. This module
owns the single repository instance the application uses and provides
the FastAPI dependency that hands it to controllers. Tests replace the
dependency through `app.dependency_overrides`.
"""

from .config import settings
from .repositories import InMemoryTodoRepository

repository = InMemoryTodoRepository(settings.BASE_URL)


def get_repository() -> InMemoryTodoRepository:
    """Return the process-wide repository for FastAPI dependency injection."""
    return repository
