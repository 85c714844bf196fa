import pytest
from fastapi.testclient import TestClient

from main import create_app
from memory_store import MemoryStore


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def client(store):
    return TestClient(create_app(store=store))
