"""Admin triage of contact messages: status updates and deletion."""

from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from inbox.contact.contact import ContactSubmission
from inbox.domain import inbox, logger


@inbox.command(part_of="ContactSubmission")
class UpdateContactStatus:
    submission_id = Identifier(required=True)
    status = String(required=True, max_length=20)
    admin_notes = Text()


@inbox.command(part_of="ContactSubmission")
class DeleteContactSubmission:
    submission_id = Identifier(required=True)


@inbox.command_handler(part_of=ContactSubmission)
class TriageHandler:
    @handle(UpdateContactStatus)
    def update_status(self, command):
        repo = current_domain.repository_for(ContactSubmission)
        submission = repo.get(command.submission_id)
        submission.triage(command.status, notes=command.admin_notes)
        repo.add(submission)

        logger.info("contact_status_changed", submission_id=str(submission.id), status=submission.status)
        return str(submission.id)

    @handle(DeleteContactSubmission)
    def delete_submission(self, command):
        repo = current_domain.repository_for(ContactSubmission)
        submission = repo.get(command.submission_id)
        repo._dao.delete(submission)

        logger.info("contact_submission_deleted", submission_id=str(command.submission_id))
