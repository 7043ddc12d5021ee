import pytest
from fastapi.testclient import TestClient

from todo_app.database import get_repository
from todo_app.main import app
from todo_app.repositories import InMemoryTodoRepository


@pytest.fixture
def repo():
    """A fresh, empty repository whose urls point at the test client host."""
    return InMemoryTodoRepository("http://testserver")


@pytest.fixture
def client(repo):
    """TestClient wired to the per-test repository."""
    app.dependency_overrides[get_repository] = lambda: repo
    yield TestClient(app)
    app.dependency_overrides.clear()
