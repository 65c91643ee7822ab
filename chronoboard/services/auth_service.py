# File: chronoboard/services/auth_service.py

"""
Authentication service.

Looks users up by username or email, verifies password hashes and issues
access tokens.
"""

from datetime import timedelta
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from chronoboard.core.config import settings
from chronoboard.core.exceptions import AuthenticationError
from chronoboard.core.logging_config import get_logger
from chronoboard.core.rbac import Role
from chronoboard.core.security import create_access_token, decode_token, verify_password
from chronoboard.models.user import User
from chronoboard.schemas.user import UserCreate
from chronoboard.services import user_service

logger = get_logger(__name__)


def authenticate_user(
    db: Session,
    *,
    login: str,
    password: str,
) -> Optional[User]:
    """
    Return the user matching ``login`` (username or email) and ``password``.

    Returns None when either part does not match.
    """
    user = user_service.get_by_username(db, login)
    if user is None and "@" in login:
        user = user_service.get_by_email(db, login)

    if user is None or not verify_password(password, user.password_hash):
        logger.warning("Login failed for %s", login, extra={"event_type": "auth"})
        return None

    logger.info("Login succeeded for %s", user.username, extra={"event_type": "auth"})
    return user


def register_user(db: Session, payload: UserCreate) -> User:
    """Self-service sign up. New accounts are unverified plain users."""
    return user_service.create_user(
        db,
        username=payload.username,
        email=payload.email,
        password=payload.password,
        first_name=payload.first_name,
        last_name=payload.last_name,
        role=Role.USER,
        is_verified=False,
    )


def issue_token(user: User, *, remember: bool = False) -> Tuple[str, int]:
    """Return ``(token, lifetime_in_seconds)`` for ``user``."""
    if remember:
        lifetime = timedelta(days=settings.remember_me_days)
    else:
        lifetime = timedelta(minutes=settings.access_token_expire_minutes)
    token = create_access_token({"sub": str(user.id), "role": user.role}, expires_delta=lifetime)
    return token, int(lifetime.total_seconds())


def user_from_token(db: Session, token: str) -> User:
    payload = decode_token(token)
    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise AuthenticationError("Invalid token subject")

    user = db.get(User, user_id)
    if user is None:
        raise AuthenticationError("User no longer exists")
    return user
