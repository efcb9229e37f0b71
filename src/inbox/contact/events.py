"""Domain events for the ContactSubmission aggregate."""

from protean.fields import DateTime, Identifier, String

from inbox.domain import inbox


@inbox.event(part_of="ContactSubmission")
class ContactMessageReceived:
    """A visitor sent a message through the contact form."""

    submission_id: Identifier(required=True)
    email: String(required=True)
    received_at: DateTime(required=True)


@inbox.event(part_of="ContactSubmission")
class ContactStatusChanged:
    """An admin moved a message along the triage workflow."""

    submission_id: Identifier(required=True)
    previous_status: String(required=True)
    status: String(required=True)
