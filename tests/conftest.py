"""Shared fixtures: isolated applications, test clients and a fake clock.

Every test gets its own application built by ``create_app`` so stores
never leak between tests.  The clock advances one second per call,
which makes ``createdAt``/``updatedAt`` ordering deterministic.
"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from crud_demo_api.app.core.config import Settings
from crud_demo_api.app.main import create_app


class SteppingClock:
    """Callable returning a new timestamp, one second later, on each call."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def clock():
    return SteppingClock()


@pytest.fixture
def dev_settings():
    return Settings(environment="development", seed_demo_data=False, log_level="WARNING", static_dir="")


@pytest.fixture
def app(dev_settings, clock):
    """Application with empty stores."""
    return create_app(dev_settings, seed=False, clock=clock)


@pytest.fixture
def seeded_app(dev_settings, clock):
    """Application preloaded with the demo users, products and tasks."""
    return create_app(dev_settings, seed=True, clock=clock)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(seeded_app):
    with TestClient(seeded_app) as test_client:
        yield test_client


@pytest.fixture
def services(app):
    return app.state.services
