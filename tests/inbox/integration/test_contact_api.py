"""Integration tests for the /contact endpoints via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from inbox.api import contact_router
from inbox.contact.contact import ContactSubmission
from protean.utils.globals import current_domain
from shared.errors import register_error_handlers


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(contact_router)
    register_error_handlers(app)
    return TestClient(app)


def _submit(client, **overrides):
    body = {"name": "Priya Nair", "email": "priya@example.com", "message": "Do you ship to Kerala?"}
    body.update(overrides)
    return client.post("/contact/submit", json=body)


class TestSubmitEndpoint:
    def test_submit_is_public(self, client):
        response = _submit(client)
        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Message sent successfully! We will get back to you soon."
        assert current_domain.repository_for(ContactSubmission).get(data["contactId"]).status == "new"

    def test_missing_fields_return_400(self, client):
        response = client.post("/contact/submit", json={"name": "Priya Nair"})
        assert response.status_code == 400
        assert set(response.json()["errors"]) == {"email", "message"}

    def test_invalid_email_returns_400(self, client):
        response = _submit(client, email="nope")
        assert response.status_code == 400
        assert response.json()["errors"]["email"] == ["Please enter a valid email address"]


class TestAdminEndpoints:
    def test_list_requires_admin(self, client, buyer):
        assert client.get("/contact/admin/submissions").status_code == 401
        assert client.get("/contact/admin/submissions", headers=buyer.headers).status_code == 403

    def test_list(self, client, admin):
        _submit(client)
        response = client.get("/contact/admin/submissions", headers=admin.headers)
        assert response.status_code == 200
        assert [s["name"] for s in response.json()] == ["Priya Nair"]

    def test_update_status(self, client, admin):
        contact_id = _submit(client).json()["contactId"]
        response = client.put(
            f"/contact/admin/submissions/{contact_id}/status",
            json={"status": "replied", "adminNotes": "Shared shipping rates"},
            headers=admin.headers,
        )
        assert response.status_code == 200
        assert response.json()["message"] == "Status updated successfully"
        assert response.json()["contact"]["adminNotes"] == "Shared shipping rates"

    def test_update_with_unknown_status_returns_400(self, client, admin):
        contact_id = _submit(client).json()["contactId"]
        response = client.put(
            f"/contact/admin/submissions/{contact_id}/status",
            json={"status": "spam"},
            headers=admin.headers,
        )
        assert response.status_code == 400

    def test_delete(self, client, admin):
        contact_id = _submit(client).json()["contactId"]
        response = client.delete(f"/contact/admin/submissions/{contact_id}", headers=admin.headers)
        assert response.status_code == 200
        assert response.json() == {"message": "Contact submission deleted successfully"}
        assert client.get("/contact/admin/submissions", headers=admin.headers).json() == []

    def test_delete_unknown_returns_404(self, client, admin):
        response = client.delete("/contact/admin/submissions/missing", headers=admin.headers)
        assert response.status_code == 404
