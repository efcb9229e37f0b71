"""ContactSubmission aggregate: one message sent through the contact form."""

import re
from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, String, Text

from inbox.contact.events import ContactMessageReceived, ContactStatusChanged
from inbox.domain import inbox
from shared.serialization import document_header

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class ContactStatus(Enum):
    NEW = "new"
    READ = "read"
    REPLIED = "replied"
    CLOSED = "closed"


@inbox.aggregate
class ContactSubmission:
    name: String(required=True, max_length=150)
    email: String(required=True, max_length=254)
    message: Text(required=True)
    status: String(choices=ContactStatus, default=ContactStatus.NEW.value)
    admin_notes: Text(default="")
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def receive(cls, name, email, message):
        email = email.strip()
        if not EMAIL_PATTERN.match(email):
            raise ValidationError({"email": ["Please enter a valid email address"]})

        now = datetime.now(UTC)
        submission = cls(
            name=name.strip(),
            email=email,
            message=message.strip(),
            status=ContactStatus.NEW.value,
            admin_notes="",
            created_at=now,
            updated_at=now,
        )
        submission.raise_(ContactMessageReceived(submission_id=str(submission.id), email=email, received_at=now))
        return submission

    def triage(self, status, notes=None):
        """Set the triage status. Notes only overwrite when non-empty."""
        if status not in {s.value for s in ContactStatus}:
            raise ValidationError({"status": [f"Invalid status: {status}"]})

        previous = self.status
        self.status = status
        if notes:
            self.admin_notes = notes
        self.updated_at = datetime.now(UTC)
        self.raise_(ContactStatusChanged(submission_id=str(self.id), previous_status=previous, status=status))

    def to_document(self) -> dict:
        return {
            **document_header(self),
            "name": self.name,
            "email": self.email,
            "message": self.message,
            "status": self.status,
            "adminNotes": self.admin_notes,
        }
