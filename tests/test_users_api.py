"""
HTTP tests for the user service.
"""
from fastapi.testclient import TestClient

from flight_booking_api.app.main import create_user_app

ALICE = {"name": "Alice Johnson", "email": "alice@example.com"}


class TestCreateUser:
    def test_create_returns_201_with_id(self, user_client):
        response = user_client.post("/users", json=ALICE)
        assert response.status_code == 201
        assert response.json() == {"id": 1, **ALICE}

    def test_invalid_email_rejected_without_creating(self, user_client, user_store):
        response = user_client.post("/users", json={"name": "Alice", "email": "not-an-email"})
        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation failed"
        assert body["errors"] == [
            {"field": "email", "message": "email must be a valid email address"}
        ]
        assert user_store.count() == 0

    def test_email_with_whitespace_rejected(self, user_client):
        response = user_client.post("/users", json={"name": "Alice", "email": "alice @example.com"})
        assert response.status_code == 400

    def test_every_failing_field_is_listed(self, user_client, user_store):
        response = user_client.post("/users", json={"name": "  ", "email": "nope"})
        assert response.status_code == 400
        fields = [error["field"] for error in response.json()["errors"]]
        assert fields == ["name", "email"]
        assert user_store.count() == 0

    def test_missing_fields_rejected(self, user_client):
        response = user_client.post("/users", json={})
        assert response.status_code == 400
        fields = [error["field"] for error in response.json()["errors"]]
        assert fields == ["name", "email"]


class TestReadUsers:
    def test_list_empty(self, user_client):
        response = user_client.get("/users")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_in_creation_order(self, user_client):
        user_client.post("/users", json=ALICE)
        user_client.post("/users", json={"name": "Bob", "email": "bob@example.com"})
        names = [user["name"] for user in user_client.get("/users").json()]
        assert names == ["Alice Johnson", "Bob"]

    def test_get_existing(self, user_client):
        user_client.post("/users", json=ALICE)
        response = user_client.get("/users/1")
        assert response.status_code == 200
        assert response.json() == {"id": 1, **ALICE}

    def test_get_missing_returns_404(self, user_client):
        response = user_client.get("/users/999")
        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}

    def test_non_integer_id_rejected(self, user_client):
        response = user_client.get("/users/abc")
        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "user_id"


class TestUpdateUser:
    def test_update_replaces_fields(self, user_client):
        user_client.post("/users", json=ALICE)
        response = user_client.put("/users/1", json={"name": "Alice Smith", "email": "alice@smith.org"})
        assert response.status_code == 200
        assert response.json() == {"id": 1, "name": "Alice Smith", "email": "alice@smith.org"}
        assert user_client.get("/users/1").json()["name"] == "Alice Smith"

    def test_update_missing_returns_404(self, user_client, user_store):
        response = user_client.put("/users/5", json=ALICE)
        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}
        assert user_store.count() == 0

    def test_update_validates_body(self, user_client):
        user_client.post("/users", json=ALICE)
        response = user_client.put("/users/1", json={"name": "Alice", "email": "bad"})
        assert response.status_code == 400
        assert user_client.get("/users/1").json()["email"] == "alice@example.com"


class TestDeleteUser:
    def test_delete_returns_204(self, user_client):
        user_client.post("/users", json=ALICE)
        response = user_client.delete("/users/1")
        assert response.status_code == 204
        assert response.content == b""
        assert user_client.get("/users/1").status_code == 404

    def test_delete_missing_still_204(self, user_client):
        assert user_client.delete("/users/999").status_code == 204
        assert user_client.delete("/users/999").status_code == 204

    def test_ids_not_reused_after_delete(self, user_client):
        user_client.post("/users", json=ALICE)
        user_client.post("/users", json=ALICE)
        user_client.delete("/users/2")
        response = user_client.post("/users", json=ALICE)
        assert response.json()["id"] == 3


def test_health_reports_record_count(user_client):
    user_client.post("/users", json=ALICE)
    response = user_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "user-service", "records": 1}


def test_api_prefix_is_applied(test_settings, user_store):
    test_settings.api_prefix = "/api/v1"
    app = create_user_app(settings=test_settings, store=user_store)
    with TestClient(app) as client:
        assert client.post("/api/v1/users", json=ALICE).status_code == 201
        assert client.get("/users").status_code == 404


def test_unexpected_store_failure_returns_500(test_settings):
    class BrokenStore:
        def insert(self, data):
            raise RuntimeError("disk on fire")

    app = create_user_app(settings=test_settings, store=BrokenStore())
    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.post("/users", json=ALICE)
    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}


def test_email_with_trailing_newline_rejected(user_client, user_store):
    response = user_client.post("/users", json={"name": "A", "email": "alice@example.com\n"})
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "email"
    assert user_store.count() == 0
