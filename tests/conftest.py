"""
Shared test fixtures: FastAPI test client and a clean cut list store.
"""

import pytest
from fastapi.testclient import TestClient

from ripsaw.main import app
from ripsaw.store import store


@pytest.fixture(autouse=True)
def clean_store():
    """Drop every cut list between tests."""
    store.clear()
    yield
    store.clear()


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def cut_list_id(client):
    """An empty cut list created through the API."""
    response = client.post("/api/cut-lists/", json={})
    assert response.status_code == 200
    return response.json()["id"]
