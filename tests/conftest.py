from __future__ import annotations

from datetime import datetime

import pytest

from digital_logbook.container import build_container
from digital_logbook.main import create_app
from digital_logbook.mock.fixtures import MockDataStore


@pytest.fixture
def fixed_now():
    return datetime(2026, 2, 2, 8, 30, 15)


@pytest.fixture
def store():
    return MockDataStore()


@pytest.fixture
def mock_container(store):
    return build_container(None, store=store)


@pytest.fixture
def app():
    return create_app("digital_logbook.config.testing")


@pytest.fixture
def client(app):
    return app.test_client()
