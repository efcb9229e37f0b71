"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String

from identity.domain import identity


@identity.event(part_of="User")
class UserRegistered:
    """A new marketplace account was created."""

    user_id: Identifier(required=True)
    username: String(required=True)
    email: String(required=True)
    registered_at: DateTime(required=True)


@identity.event(part_of="User")
class UserPromoted:
    """A user was granted administrative rights."""

    user_id: Identifier(required=True)
    role: String(required=True)
