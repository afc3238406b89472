from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from client_registration.api.apps import app_repo
from client_registration.main import app

# Base URL FastAPI's TestClient answers on; pass it to register() together
# with the client fixture to talk to the stand-in endpoint in-process.
TEST_INSTANCE = "http://testserver"


@pytest.fixture(autouse=True)
def reset_app_repo() -> None:
    """Forget registered apps between tests."""
    app_repo._by_client_id.clear()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def instance() -> str:
    return TEST_INSTANCE
