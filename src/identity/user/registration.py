"""User registration and promotion: commands and handlers."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from identity.domain import identity, logger
from identity.user.passwords import hash_password
from identity.user.user import User


@identity.command(part_of="User")
class RegisterUser:
    """Create a new marketplace account."""

    username: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    phone: String(max_length=20)
    password: String(required=True, min_length=6, max_length=128)


@identity.command(part_of="User")
class PromoteUser:
    """Grant the admin role to an existing account."""

    user_id: Identifier(required=True)


@identity.command_handler(part_of=User)
class UserAccountHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise ValidationError({"email": ["User already exists"]})

        user = User.register(
            username=command.username,
            email=command.email,
            phone=command.phone,
            password_hash=hash_password(command.password),
        )
        repo.add(user)

        logger.info("user_registered", user_id=str(user.id))
        return str(user.id)

    @handle(PromoteUser)
    def promote_user(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.promote()
        repo.add(user)

        logger.info("user_promoted", user_id=str(user.id))
        return str(user.id)
