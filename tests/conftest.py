from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest

from stafftrack.container import build_container
from stafftrack.main import create_app
from stafftrack.storage.backend import InMemoryBackend
from stafftrack.storage.seed import build_seed_document
from stafftrack.storage.store import DataStore


@pytest.fixture
def fixed_today() -> date:
    return date(2025, 3, 14)


@pytest.fixture
def seed(fixed_today):
    return build_seed_document(fixed_today)


@pytest.fixture
def backend() -> InMemoryBackend:
    return InMemoryBackend()


@pytest.fixture
def store(backend, fixed_today) -> DataStore:
    return DataStore(backend, today=lambda: fixed_today)


@pytest.fixture
def container(backend, fixed_today):
    return build_container(backend=backend, today=lambda: fixed_today)


@pytest.fixture
def app(container):
    settings = SimpleNamespace(SECRET_KEY="test-secret", TESTING=True, LOG_LEVEL="WARNING")
    return create_app(settings, container=container)


@pytest.fixture
def client(app):
    return app.test_client()
