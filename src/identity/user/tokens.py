"""Bearer token issue and verification.

Tokens are HS256 JWTs whose ``sub`` claim is the user id. Expiry is
enforced by PyJWT during decoding.
"""

from datetime import UTC, datetime, timedelta

import jwt

from shared.errors import AuthError
from shared.settings import get_settings


def issue_token(user_id: str) -> str:
    settings = get_settings()
    now = datetime.now(UTC)
    payload = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + timedelta(seconds=settings.token_ttl_seconds),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> str:
    """Return the user id carried by ``token``."""
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.PyJWTError as exc:
        raise AuthError("Invalid or expired token", status_code=403) from exc

    return payload["sub"]
