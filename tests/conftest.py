import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture
def client():
    # Entering the client runs the lifespan, which builds a fresh in-memory store
    with TestClient(app) as test_client:
        yield test_client
