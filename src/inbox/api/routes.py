"""FastAPI routes for the Inbox domain: the public contact form and admin triage."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from inbox.api.schemas import (
    ContactReceivedResponse,
    ContactRequest,
    ContactResponse,
    ContactStatusRequest,
    StatusResponse,
)
from inbox.contact.contact import ContactSubmission
from inbox.contact.submission import SubmitContactMessage
from inbox.contact.triage import DeleteContactSubmission, UpdateContactStatus
from shared.auth import require_admin

contact_router = APIRouter(prefix="/contact", tags=["contact"])


@contact_router.post("/submit", status_code=201, response_model=ContactReceivedResponse)
async def submit_contact(body: ContactRequest) -> ContactReceivedResponse:
    command = SubmitContactMessage(name=body.name, email=body.email, message=body.message)
    submission_id = current_domain.process(command, asynchronous=False)
    return ContactReceivedResponse(
        message="Message sent successfully! We will get back to you soon.",
        contactId=submission_id,
    )


@contact_router.get("/admin/submissions", dependencies=[Depends(require_admin)])
async def list_submissions() -> list[dict]:
    submissions = current_domain.repository_for(ContactSubmission).newest_first()
    return [submission.to_document() for submission in submissions]


@contact_router.put(
    "/admin/submissions/{submission_id}/status",
    response_model=ContactResponse,
    dependencies=[Depends(require_admin)],
)
async def update_submission_status(submission_id: str, body: ContactStatusRequest) -> ContactResponse:
    command = UpdateContactStatus(
        submission_id=submission_id,
        status=body.status,
        admin_notes=body.admin_notes,
    )
    current_domain.process(command, asynchronous=False)
    submission = current_domain.repository_for(ContactSubmission).get(submission_id)
    return ContactResponse(message="Status updated successfully", contact=submission.to_document())


@contact_router.delete(
    "/admin/submissions/{submission_id}",
    response_model=StatusResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_submission(submission_id: str) -> StatusResponse:
    current_domain.process(DeleteContactSubmission(submission_id=submission_id), asynchronous=False)
    return StatusResponse(message="Contact submission deleted successfully")
