"""Read-only user lookups for other contexts.

Callers may sit in any domain context; the identity context is pushed for
the duration of each lookup.
"""

from dataclasses import dataclass

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from identity.domain import identity
from identity.user.authentication import user_for_token
from identity.user.user import User


@dataclass(frozen=True)
class Principal:
    """The authenticated caller of a request."""

    id: str
    username: str
    email: str
    role: str


def principal_for_token(token: str) -> Principal:
    with identity.domain_context():
        user = user_for_token(token)
        return Principal(id=str(user.id), username=user.username, email=user.email, role=user.role)


def contact_details(user_ids) -> dict[str, dict]:
    """Map each known user id to its ``username`` and ``email``."""
    details = {}
    with identity.domain_context():
        repo = current_domain.repository_for(User)
        for user_id in set(user_ids):
            try:
                user = repo.get(user_id)
            except ObjectNotFoundError:
                continue
            details[user_id] = {"_id": user_id, "username": user.username, "email": user.email}
    return details
