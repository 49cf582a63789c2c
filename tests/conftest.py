"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from todo_api.main import app
from todo_api.todo.store import SEED_TODOS, todo_store


@pytest.fixture(autouse=True)
def reset_store():
    """Restore the two seed records before and after every test"""
    todo_store.unique_ids = True
    todo_store.reset(SEED_TODOS)
    yield
    todo_store.unique_ids = True
    todo_store.reset(SEED_TODOS)


@pytest.fixture
def client():
    """Test client with the application lifespan running"""
    with TestClient(app) as test_client:
        yield test_client
