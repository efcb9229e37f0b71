"""User aggregate: a marketplace account with a role.

Buyers and sellers share the ``user`` role; moderators carry ``admin``.
Only the management CLI grants ``admin``.
"""

import re
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from identity.domain import identity
from identity.user.events import UserPromoted, UserRegistered

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class Role(Enum):
    USER = "user"
    ADMIN = "admin"


@identity.aggregate
class User:
    username = String(required=True, max_length=100)
    email = String(required=True, max_length=254, unique=True)
    phone = String(max_length=20)
    password_hash = String(required=True, max_length=255)
    role = String(choices=Role, default=Role.USER.value)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def email_must_look_like_an_address(self):
        if self.email and not EMAIL_PATTERN.match(self.email):
            raise ValidationError({"email": ["Please enter a valid email address"]})

    @classmethod
    def register(cls, username, email, password_hash, phone=None):
        now = datetime.now(UTC)
        user = cls(
            username=username,
            email=email.strip().lower(),
            phone=phone,
            password_hash=password_hash,
            role=Role.USER.value,
            created_at=now,
            updated_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                username=user.username,
                email=user.email,
                registered_at=now,
            )
        )
        return user

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value

    def promote(self):
        """Grant the admin role. Promoting an admin again changes nothing."""
        if self.is_admin:
            return

        self.role = Role.ADMIN.value
        self.updated_at = datetime.now(UTC)
        self.raise_(UserPromoted(user_id=str(self.id), role=self.role))

    def to_public_dict(self) -> dict:
        return {
            "id": str(self.id),
            "username": self.username,
            "email": self.email,
            "phone": self.phone,
            "role": self.role,
        }
