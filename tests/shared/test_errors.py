"""Tests for the HTTP mapping of marketplace errors."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.exceptions import ObjectNotFoundError, ValidationError
from sqlalchemy.exc import OperationalError
from shared.errors import AuthError, EmptyCartError, InvalidTransitionError, StorageError, register_error_handlers
from shared.validation import require_fields


@pytest.fixture()
def client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/validation")
    async def validation():
        raise ValidationError({"price": ["is required"]})

    @app.get("/missing")
    async def missing():
        raise ObjectNotFoundError("Order not found")

    @app.get("/empty-cart")
    async def empty_cart():
        raise EmptyCartError()

    @app.get("/transition")
    async def transition():
        raise InvalidTransitionError("Cannot cancel this order")

    @app.get("/forbidden")
    async def forbidden():
        raise AuthError("Admin access required", status_code=403)

    @app.get("/storage")
    async def storage():
        raise StorageError("disk full")

    @app.get("/database")
    async def database():
        raise OperationalError("UPDATE orders", {}, ConnectionRefusedError("postgres:5432 refused"))

    return TestClient(app)


class TestErrorMapping:
    def test_validation_error_is_400(self, client):
        response = client.get("/validation")
        assert response.status_code == 400
        assert response.json()["errors"] == {"price": ["is required"]}

    def test_not_found_is_404(self, client):
        response = client.get("/missing")
        assert response.status_code == 404
        assert response.json() == {"message": "Order not found"}

    def test_empty_cart_is_400(self, client):
        response = client.get("/empty-cart")
        assert response.status_code == 400
        assert response.json()["message"] == "Cart is empty"

    def test_invalid_transition_is_400(self, client):
        response = client.get("/transition")
        assert response.status_code == 400
        assert response.json() == {"message": "Cannot cancel this order"}

    def test_auth_error_keeps_its_status(self, client):
        response = client.get("/forbidden")
        assert response.status_code == 403
        assert response.json() == {"message": "Admin access required"}

    def test_storage_error_hides_details(self, client):
        response = client.get("/storage")
        assert response.status_code == 500
        assert response.json() == {"message": "Server error"}

    def test_database_failure_is_a_generic_storage_error(self, client):
        response = client.get("/database")
        assert response.status_code == 500
        assert response.json() == {"message": "Server error"}
        assert "postgres" not in response.text


class TestRequireFields:
    def test_complete_values_pass(self):
        require_fields({"name": "Asha", "email": "asha@example.com"}, "name", "email")

    def test_reports_every_missing_or_blank_field(self):
        with pytest.raises(ValidationError) as exc:
            require_fields({"name": "  ", "email": None}, "name", "email", "message")
        assert set(exc.value.messages) == {"name", "email", "message"}

    def test_non_string_values_count_as_present(self):
        require_fields({"quantity": 0}, "quantity")
