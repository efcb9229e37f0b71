"""Application tests for the contact form and admin triage handlers."""

import pytest
from inbox.contact.contact import ContactSubmission
from inbox.contact.submission import SubmitContactMessage
from inbox.contact.triage import DeleteContactSubmission, UpdateContactStatus
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain


def _submit(**overrides):
    fields = {"name": "Priya Nair", "email": "priya@example.com", "message": "Do you ship to Kerala?"}
    fields.update(overrides)
    return current_domain.process(SubmitContactMessage(**fields), asynchronous=False)


class TestSubmitContactMessage:
    def test_submission_is_stored(self):
        submission_id = _submit()
        submission = current_domain.repository_for(ContactSubmission).get(submission_id)
        assert submission.name == "Priya Nair"
        assert submission.status == "new"

    def test_all_fields_are_required(self):
        with pytest.raises(ValidationError) as exc:
            _submit(name="", message=None)
        assert set(exc.value.messages) == {"name", "message"}

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            _submit(email="priya-at-example")


class TestTriage:
    def test_update_status_with_notes(self):
        submission_id = _submit()
        current_domain.process(
            UpdateContactStatus(submission_id=submission_id, status="replied", admin_notes="Called back"),
            asynchronous=False,
        )
        submission = current_domain.repository_for(ContactSubmission).get(submission_id)
        assert submission.status == "replied"
        assert submission.admin_notes == "Called back"

    def test_update_unknown_submission(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(UpdateContactStatus(submission_id="missing", status="read"), asynchronous=False)

    def test_delete(self):
        submission_id = _submit()
        current_domain.process(DeleteContactSubmission(submission_id=submission_id), asynchronous=False)
        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(ContactSubmission).get(submission_id)

    def test_delete_unknown_submission(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(DeleteContactSubmission(submission_id="missing"), asynchronous=False)


def test_newest_first():
    _submit(name="First")
    _submit(name="Second")
    submissions = current_domain.repository_for(ContactSubmission).newest_first()
    stamps = [s.created_at for s in submissions]
    assert stamps == sorted(stamps, reverse=True)
    assert {s.name for s in submissions} == {"First", "Second"}
