"""FastAPI application entrypoint and HTTP controllers.

This module defines the HTTP endpoints of the todo backend. Controllers
are intentionally thin: they accept requests, delegate to the
repository, and return JSON responses.

Endpoints implemented:
- GET /
- POST /
- DELETE /
- GET /health
- GET /{todo_id}
- PATCH /{todo_id}
- DELETE /{todo_id}
"""

from fastapi import FastAPI, Depends, Request
from fastapi.responses import Response
from fastapi.middleware.cors import CORSMiddleware
from typing import List, Optional
from uuid import UUID
import json
import logging
import time
import uuid
from .database import get_repository
from .repositories import InMemoryTodoRepository
from .schemas import Todo, TodoChanges, TodoOut
from .config import settings

app = FastAPI(title="Todo Backend")
logger = logging.getLogger("todo_app.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

# Browser clients such as the todobackend.com test runner call the API from another origin.
if settings.ALLOW_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    response: Response
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        logger.exception(
            "request_failed %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "path": request.url.path,
                    "method": request.method,
                    "duration_ms": elapsed_ms,
                },
                ensure_ascii=True,
            ),
        )
        raise
    response.headers["X-Request-ID"] = req_id
    elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
    logger.info(
        "request_done %s",
        json.dumps(
            {
                "request_id": req_id,
                "path": request.url.path,
                "method": request.method,
                "status_code": response.status_code,
                "duration_ms": elapsed_ms,
            },
            ensure_ascii=True,
        ),
    )
    return response


def _parse_id(raw: str) -> Optional[UUID]:
    """Parse a path id; anything that is not a UUID cannot name a todo."""
    try:
        return UUID(raw)
    except ValueError:
        return None


@app.get('/', response_model=List[TodoOut])
def read_all(repo: InMemoryTodoRepository = Depends(get_repository)):
    """List all todos in the order they were created."""
    return repo.read_all()


@app.post('/', response_model=TodoOut)
def create(todo: Todo, repo: InMemoryTodoRepository = Depends(get_repository)):
    """Create a todo and return it with its self `url`."""
    return repo.create(todo)


@app.delete('/')
def delete_all(repo: InMemoryTodoRepository = Depends(get_repository)):
    """Remove every todo."""
    repo.delete_all()
    return Response(status_code=200)


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}


@app.get('/{todo_id}', response_model=TodoOut)
def find_by_id(todo_id: str, repo: InMemoryTodoRepository = Depends(get_repository)):
    """Fetch a single todo; 404 with an empty body when unknown."""
    parsed = _parse_id(todo_id)
    todo = repo.find_by_id(parsed) if parsed is not None else None
    if todo is None:
        return Response(status_code=404)
    return todo


@app.patch('/{todo_id}', response_model=TodoOut)
def update(todo_id: str, changes: TodoChanges, repo: InMemoryTodoRepository = Depends(get_repository)):
    """Apply a partial update and return the updated todo.

    Only the fields sent in the body are changed. Unknown ids give an
    empty 404.
    """
    parsed = _parse_id(todo_id)
    todo = repo.update(parsed, changes) if parsed is not None else None
    if todo is None:
        return Response(status_code=404)
    return todo


@app.delete('/{todo_id}')
def delete(todo_id: str, repo: InMemoryTodoRepository = Depends(get_repository)):
    """Delete a single todo. Always 200, whether or not it existed."""
    parsed = _parse_id(todo_id)
    if parsed is not None:
        repo.delete(parsed)
    return Response(status_code=200)
