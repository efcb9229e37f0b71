from inbox.contact.contact import ContactSubmission
from inbox.domain import inbox


@inbox.repository(part_of=ContactSubmission)
class ContactSubmissionRepository:
    def newest_first(self) -> list[ContactSubmission]:
        submissions = self._dao.query.all().items
        return sorted(submissions, key=lambda s: s.created_at, reverse=True)
