# tests/conftest.py
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from inventory_tracker.core.config import Settings, get_settings
from inventory_tracker.core.rate_limit import limiter
from inventory_tracker.main import app


@pytest.fixture
def test_settings() -> Settings:
    return Settings(api_keys={"test-key-alice": "alice", "test-key-bob": "bob"})


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    # Entering the TestClient runs the lifespan, which builds a fresh seeded
    # store for every test.
    limiter.reset()
    app.dependency_overrides[get_settings] = lambda: test_settings
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.pop(get_settings, None)


@pytest.fixture
def alice_headers() -> dict:
    return {"X-API-Key": "test-key-alice"}
