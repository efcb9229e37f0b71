"""Integration tests for the /auth endpoints via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from identity.api import router
from identity.user.user import User
from protean.utils.globals import current_domain
from shared.errors import register_error_handlers


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(router)
    register_error_handlers(app)
    return TestClient(app)


def _signup(client, **overrides):
    body = {
        "username": "meera",
        "email": "meera@example.com",
        "phone": "9845012345",
        "password": "warli-art-42",
    }
    body.update(overrides)
    return client.post("/auth/signup", json=body)


class TestSignup:
    def test_signup_returns_201_with_token(self, client):
        response = _signup(client)
        assert response.status_code == 201
        data = response.json()
        assert data["token"]
        assert data["user"]["email"] == "meera@example.com"
        assert data["user"]["role"] == "user"
        assert "password_hash" not in data["user"]

        assert current_domain.repository_for(User).get(data["user"]["id"]).username == "meera"

    def test_duplicate_signup_returns_400(self, client):
        _signup(client)
        response = _signup(client, username="meera2")
        assert response.status_code == 400
        assert response.json()["errors"]["email"] == ["User already exists"]

    def test_invalid_email_returns_400(self, client):
        response = _signup(client, email="meera-at-example")
        assert response.status_code == 400

    def test_missing_password_returns_422(self, client):
        response = client.post("/auth/signup", json={"username": "x", "email": "x@example.com"})
        assert response.status_code == 422


class TestLogin:
    def test_login_returns_token(self, client):
        _signup(client)
        response = client.post("/auth/login", json={"email": "meera@example.com", "password": "warli-art-42"})
        assert response.status_code == 200
        assert response.json()["message"] == "Login successful"

    def test_bad_password_returns_401(self, client):
        _signup(client)
        response = client.post("/auth/login", json={"email": "meera@example.com", "password": "nope-nope"})
        assert response.status_code == 401
        assert response.json() == {"message": "Invalid credentials"}


class TestMe:
    def test_me_returns_current_profile(self, client):
        token = _signup(client).json()["token"]
        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200
        assert response.json()["username"] == "meera"

    def test_me_without_token_returns_401(self, client):
        response = client.get("/auth/me")
        assert response.status_code == 401
        assert response.json() == {"message": "Access token required"}

    def test_me_with_garbage_token_returns_403(self, client):
        response = client.get("/auth/me", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 403
        assert response.json() == {"message": "Invalid or expired token"}
