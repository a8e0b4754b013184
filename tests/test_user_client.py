"""
Tests for the user service client used by the flight service.
"""
import pytest
import requests
from fastapi.testclient import TestClient

from flight_booking_api.app.core.errors import UpstreamUnavailableError
from flight_booking_api.app.main import create_flight_app, create_user_app
from flight_booking_api.app.services.user_client import UserServiceClient


class FakeResponse:
    def __init__(self, status_code):
        self.status_code = status_code


class FakeSession:
    """Stands in for ``requests.Session`` and records requested URLs."""

    def __init__(self, status_code=200, error=None):
        self.status_code = status_code
        self.error = error
        self.requests = []

    def get(self, url, timeout=None):
        self.requests.append((url, timeout))
        if self.error is not None:
            raise self.error
        return FakeResponse(self.status_code)


class TestCheckExists:
    def test_success_status_means_user_exists(self):
        session = FakeSession(status_code=200)
        client = UserServiceClient(base_url="http://users:3001/", timeout=2.5, session=session)
        assert client.check_exists(1) is True
        assert session.requests == [("http://users:3001/users/1", 2.5)]

    def test_not_found_means_user_missing(self):
        client = UserServiceClient(base_url="http://users:3001", session=FakeSession(status_code=404))
        assert client.check_exists(1) is False

    def test_unexpected_status_raises(self):
        client = UserServiceClient(base_url="http://users:3001", session=FakeSession(status_code=503))
        with pytest.raises(UpstreamUnavailableError) as excinfo:
            client.check_exists(1)
        assert excinfo.value.error == "unexpected status 503"

    def test_timeout_raises(self):
        session = FakeSession(error=requests.Timeout("read timed out"))
        client = UserServiceClient(base_url="http://users:3001", timeout=1.0, session=session)
        with pytest.raises(UpstreamUnavailableError) as excinfo:
            client.check_exists(1)
        assert "timed out" in excinfo.value.error

    def test_connection_error_raises(self):
        session = FakeSession(error=requests.ConnectionError("connection refused"))
        client = UserServiceClient(base_url="http://users:3001", session=session)
        with pytest.raises(UpstreamUnavailableError):
            client.check_exists(1)


class InProcessSession:
    """Routes client requests into an in-process user application."""

    def __init__(self, client):
        self.client = client

    def get(self, url, timeout=None):
        return self.client.get(url)


def test_flight_creation_against_real_user_service(test_settings, user_store, flight_store):
    user_app = create_user_app(settings=test_settings, store=user_store)
    with TestClient(user_app, base_url="http://users") as users:
        checker = UserServiceClient(base_url="http://users", session=InProcessSession(users))
        flight_app = create_flight_app(settings=test_settings, store=flight_store, user_checker=checker)
        with TestClient(flight_app) as flights:
            body = {"origin": "New York", "destination": "Los Angeles", "price": 300, "userId": 1}

            missing = flights.post("/flights", json=body)
            assert missing.status_code == 404
            assert flight_store.count() == 0

            users.post("/users", json={"name": "Alice Johnson", "email": "alice@example.com"})
            created = flights.post("/flights", json=body)
            assert created.status_code == 201
            assert created.json() == {"id": 1, **body}
