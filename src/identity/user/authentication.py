"""Credential checks and user lookup for bearer tokens."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from identity.domain import logger
from identity.user.passwords import verify_password
from identity.user.tokens import decode_token, issue_token
from identity.user.user import User
from shared.errors import AuthError


def login(email: str, password: str) -> dict:
    """Exchange an email and password for a token and the public profile."""
    user = current_domain.repository_for(User).find_by_email(email)
    if user is None or not verify_password(user.password_hash, password):
        logger.info("login_failed", email=email)
        raise AuthError("Invalid credentials", status_code=401)

    logger.info("login_succeeded", user_id=str(user.id))
    return {"token": issue_token(str(user.id)), "user": user.to_public_dict()}


def user_for_token(token: str) -> User:
    """Resolve the user a token was issued to."""
    user_id = decode_token(token)
    try:
        return current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError as exc:
        raise AuthError("Invalid token", status_code=401) from exc
