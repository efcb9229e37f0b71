"""SubmitContactMessage: a visitor writes in through the contact form."""

from protean.fields import String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from inbox.contact.contact import ContactSubmission
from inbox.domain import inbox, logger
from shared.validation import require_fields


@inbox.command(part_of="ContactSubmission")
class SubmitContactMessage:
    name = String(max_length=150)
    email = String(max_length=254)
    message = Text()


@inbox.command_handler(part_of=ContactSubmission)
class SubmitContactMessageHandler:
    @handle(SubmitContactMessage)
    def submit_contact_message(self, command):
        require_fields(
            {"name": command.name, "email": command.email, "message": command.message},
            "name",
            "email",
            "message",
        )

        submission = ContactSubmission.receive(command.name, command.email, command.message)
        current_domain.repository_for(ContactSubmission).add(submission)

        logger.info("contact_message_received", submission_id=str(submission.id))
        return str(submission.id)
