"""Request-scoped authorization guard.

Every protected route declares the role it needs once::

    @router.get("/pending")
    async def pending(principal: Principal = Depends(Guard(Role.ADMIN))): ...

The guard resolves the bearer token to a user in the identity context and
compares roles before any route code runs.
"""

from fastapi import Header

from identity.user.directory import Principal, principal_for_token
from identity.user.user import Role
from shared.errors import AuthError
from shared.logging import bind_user

_ROLE_RANK = {Role.USER.value: 0, Role.ADMIN.value: 1}


class Guard:
    def __init__(self, role: Role = Role.USER):
        self.role = role

    async def __call__(self, authorization: str | None = Header(default=None)) -> Principal:
        token = _bearer_token(authorization)
        if not token:
            raise AuthError("Access token required", status_code=401)

        principal = principal_for_token(token)
        if _ROLE_RANK.get(principal.role, -1) < _ROLE_RANK[self.role.value]:
            raise AuthError(f"{self.role.value.capitalize()} access required", status_code=403)

        bind_user(principal.id, principal.role)
        return principal


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    parts = authorization.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1].strip() or None


require_user = Guard(Role.USER)
require_admin = Guard(Role.ADMIN)
