"""Pydantic request/response schemas used by the API.

Schemas keep API input/output shapes stable and provide validation for
controller handlers and tests.
"""

from pydantic import BaseModel
from typing import Optional


class Todo(BaseModel):
    """Payload for creating a todo. Only `title` is required."""
    title: str
    order: Optional[int] = None
    completed: bool = False


class TodoChanges(BaseModel):
    """Partial update for an existing todo.

    A field left out (or sent as `null`) leaves the stored value as it is.
    """
    title: Optional[str] = None
    completed: Optional[bool] = None
    order: Optional[int] = None

    def present(self) -> dict:
        """Return only the fields that carry a value."""
        return {k: v for k, v in self.model_dump().items() if v is not None}


class TodoOut(BaseModel):
    """Response format for a created todo."""
    title: str
    order: Optional[int] = None
    completed: bool
    url: str
