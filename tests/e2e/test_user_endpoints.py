"""End-to-end tests for user endpoints."""

import pytest
from fastapi.testclient import TestClient

from verisart.domain.value import derive_identifier
from verisart.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client over fresh process-local stores."""
    test_container = build_test_container(unmock={"persistence"})
    return TestClient(create_app(container=test_container))


class TestHealthEndpoint:
    """Tests for the health check."""

    def test_health(self, client):
        """Should report the service as healthy."""
        # Act
        response = client.get("/health")

        # Assert
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestUserEndpoints:
    """End-to-end tests for user API endpoints."""

    def test_create_and_list_users(self, client):
        """Created users should appear in the listing."""
        # Act
        created = client.post("/users/", json={"email": "bob@x.com", "name": "Bob"})
        listed = client.get("/users/")

        # Assert
        assert created.status_code == 201
        assert created.json() == {
            "id": derive_identifier("bob@x.com"),
            "email": "bob@x.com",
            "name": "Bob",
        }
        assert listed.status_code == 200
        assert listed.json()["total"] == 1
        assert listed.json()["users"][0]["email"] == "bob@x.com"

    def test_list_users_empty(self, client):
        """Should return an empty listing, not an error."""
        response = client.get("/users/")

        assert response.status_code == 200
        assert response.json() == {"users": [], "total": 0}

    def test_duplicate_email_conflicts(self, client):
        """Registering the same email twice should return 409."""
        # Arrange
        client.post("/users/", json={"email": "bob@x.com", "name": "Bob"})

        # Act
        response = client.post("/users/", json={"email": "bob@x.com", "name": "Robert"})

        # Assert
        assert response.status_code == 409
        assert response.json()["code"] == "AlreadyExistsError"

        users = client.get("/users/").json()["users"]
        assert [u["name"] for u in users] == ["Bob"]

    def test_invalid_email_rejected(self, client):
        """Malformed emails should be rejected before reaching the directory."""
        response = client.post("/users/", json={"email": "not-an-email", "name": "X"})

        assert response.status_code == 422
        assert client.get("/users/").json()["total"] == 0

    def test_missing_name_rejected(self, client):
        """Incomplete bodies should be rejected, not zero-filled."""
        response = client.post("/users/", json={"email": "bob@x.com"})

        assert response.status_code == 422

    def test_unknown_user_has_no_certificates(self, client):
        """Listing certificates of an unknown user should return an empty list."""
        response = client.get("/users/unknown/certificates/")

        assert response.status_code == 200
        assert response.json() == {"certificates": [], "total": 0}

    def test_email_domain_is_normalized_before_deriving_id(self, client):
        """The id is derived from the email as stored, domain lowercased."""
        # Act
        response = client.post("/users/", json={"email": "Bob@X.COM", "name": "Bob"})

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "Bob@x.com"
        assert body["id"] == derive_identifier("Bob@x.com")

        # The local part keeps its case, so this is a different user
        other = client.post("/users/", json={"email": "bob@x.com", "name": "bob"})
        assert other.status_code == 201
        assert client.get("/users/").json()["total"] == 2
