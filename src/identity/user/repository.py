from identity.domain import identity
from identity.user.user import User


@identity.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email: str) -> User | None:
        users = self._dao.query.filter(email=email.strip().lower()).all().items
        return users[0] if users else None
