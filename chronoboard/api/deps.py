# File: chronoboard/api/deps.py

from collections.abc import Callable, Generator
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from chronoboard.core.config import settings
from chronoboard.core.exceptions import AuthenticationError, AuthorizationError
from chronoboard.core.rbac import Permission, has_permission
from chronoboard.db.session import SessionLocal
from chronoboard.models.user import User
from chronoboard.services.auth_service import user_from_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _token_from_request(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[str]:
    # Bearer header wins over the login cookie
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.auth_cookie_name)


def get_optional_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> Optional[User]:
    """Current user, or None for guests and stale/invalid tokens."""
    token = _token_from_request(request, credentials)
    if not token:
        return None
    try:
        return user_from_token(db, token)
    except AuthenticationError:
        return None


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    token = _token_from_request(request, credentials)
    if not token:
        raise AuthenticationError("Not authenticated")
    return user_from_token(db, token)


def require_permission(permission: Permission) -> Callable[..., User]:
    """
    Dependency factory: the current user, provided their role grants
    ``permission``.

        user: User = Depends(require_permission(Permission.USERS_LIST))
    """

    def checker(user: User = Depends(get_current_user)) -> User:
        if not has_permission(user.role, permission):
            raise AuthorizationError(f"Permission {permission.value} required")
        return user

    return checker
