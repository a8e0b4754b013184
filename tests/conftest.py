"""
Shared fixtures: isolated user and flight applications.

Every test gets fresh in-memory stores, and the flight application
gets a fake user checker instead of a real HTTP client.
"""
import pytest
from fastapi.testclient import TestClient

from flight_booking_api.app.core.config import Settings
from flight_booking_api.app.core.errors import UpstreamUnavailableError
from flight_booking_api.app.core.store import InMemoryRecordStore
from flight_booking_api.app.main import create_flight_app, create_user_app
from flight_booking_api.app.services.flight_service import FLIGHT_FIELDS
from flight_booking_api.app.services.user_service import USER_FIELDS


class FakeUserChecker:
    """Answers existence checks from a fixed set of user ids."""

    def __init__(self, existing=(), error=None):
        self.existing = set(existing)
        self.error = error
        self.calls = []

    def check_exists(self, user_id):
        self.calls.append(user_id)
        if self.error is not None:
            raise UpstreamUnavailableError(self.error)
        return user_id in self.existing


@pytest.fixture
def test_settings():
    return Settings(database_url="", api_prefix="", log_level="WARNING")


@pytest.fixture
def user_store():
    return InMemoryRecordStore(USER_FIELDS)


@pytest.fixture
def flight_store():
    return InMemoryRecordStore(FLIGHT_FIELDS)


@pytest.fixture
def user_checker():
    return FakeUserChecker(existing={1})


@pytest.fixture
def user_client(test_settings, user_store):
    app = create_user_app(settings=test_settings, store=user_store)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def flight_client(test_settings, flight_store, user_checker):
    app = create_flight_app(settings=test_settings, store=flight_store, user_checker=user_checker)
    with TestClient(app) as client:
        yield client
