"""
Pytest configuration for API tests

Fixtures and configuration for FastAPI endpoint testing.
Tests run the collector in in-memory mode unless a test patches storage itself.
"""

import pytest
from fastapi.testclient import TestClient

from api.config import settings
from api.main import app
from api.tests.mocks import FailingTransactionStore


@pytest.fixture(autouse=True)
def memory_mode(monkeypatch):
    """Ignore any MONGODB_URI from the developer environment"""
    monkeypatch.setattr(settings, "mongodb_uri", "")
    yield


@pytest.fixture
def client():
    """Create FastAPI test client"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def failing_client(client):
    """Test client whose store raises on every call"""
    service = client.app.state.transaction_service
    service.store = FailingTransactionStore()
    yield client
