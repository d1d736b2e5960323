"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from alert_relay.app import app
from alert_relay.telegram.client import reset_notifier


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def _reset_notifier_singleton():
    """Ensure no cached notifier leaks between tests."""
    reset_notifier()
    yield
    reset_notifier()
