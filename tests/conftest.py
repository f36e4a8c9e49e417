"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from todo_api.core.config import Settings
from todo_api.db.seed import DEFAULT_TODOS
from todo_api.domain.repositories import InMemoryTodoRepository
from todo_api.domain.services import TodoService
from todo_api.main import create_app


@pytest.fixture
def test_settings(monkeypatch) -> Settings:
    """Settings isolated from the developer's environment."""
    for name in ("APP_NAME", "ENV", "HOST", "PORT", "LOG_LEVEL", "CORS_ORIGINS", "SEED_PATH"):
        monkeypatch.delenv(name, raising=False)
    return Settings(_env_file=None, ENV="test", LOG_LEVEL="WARNING")


@pytest.fixture
def repo() -> InMemoryTodoRepository:
    return InMemoryTodoRepository(DEFAULT_TODOS)


@pytest.fixture
def service(repo: InMemoryTodoRepository) -> TodoService:
    return TodoService(repo)


@pytest.fixture
def app(test_settings: Settings):
    return create_app(test_settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
