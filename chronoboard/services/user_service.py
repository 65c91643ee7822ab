# File: chronoboard/services/user_service.py

"""
User persistence and the rules around it.

Routes and the CLI both go through these functions, so uniqueness and the
"keep at least one admin" rule are enforced in one place.
"""

from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from chronoboard.core.exceptions import AuthorizationError, ConflictError, NotFoundError
from chronoboard.core.logging_config import get_logger
from chronoboard.core.rbac import Role
from chronoboard.core.security import get_password_hash
from chronoboard.models.user import User

logger = get_logger(__name__)

# fields only an account manager may change
PRIVILEGED_FIELDS = ("role", "is_verified")
# fields that stay unchanged when sent as null
REQUIRED_FIELDS = ("email", "password", "role", "is_verified")


def get_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    return user


def get_by_username(db: Session, username: str) -> Optional[User]:
    return db.scalars(select(User).where(User.username == username)).first()


def get_by_email(db: Session, email: str) -> Optional[User]:
    return db.scalars(select(User).where(User.email == email.lower())).first()


def list_users(
    db: Session,
    *,
    skip: int = 0,
    limit: int = 50,
    role: Optional[Role] = None,
) -> Tuple[List[User], int]:
    query = select(User)
    count_query = select(func.count()).select_from(User)
    if role is not None:
        query = query.where(User.role == role.value)
        count_query = count_query.where(User.role == role.value)

    total = db.scalar(count_query) or 0
    items = list(db.scalars(query.order_by(User.id).offset(skip).limit(limit)))
    return items, total


def _count_admins(db: Session) -> int:
    return db.scalar(select(func.count()).select_from(User).where(User.role == Role.ADMIN.value)) or 0


def create_user(
    db: Session,
    *,
    username: str,
    email: str,
    password: str,
    role: Role = Role.USER,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    is_verified: bool = False,
) -> User:
    if get_by_username(db, username) is not None:
        raise ConflictError(f"Username {username} is already taken")
    if get_by_email(db, email) is not None:
        raise ConflictError(f"Email {email} is already registered")

    user = User(
        username=username,
        email=email.lower(),
        first_name=first_name,
        last_name=last_name,
        role=Role(role).value,
        is_verified=is_verified,
        password_hash=get_password_hash(password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Created user %s with role %s", user.username, user.role)
    return user


def update_user(
    db: Session,
    user: User,
    changes: Dict[str, Any],
    *,
    allow_privileged: bool = False,
) -> User:
    """
    Apply ``changes`` (already stripped of unset fields) to ``user``.

    ``allow_privileged`` gates role and verification changes.
    """
    changes = {k: v for k, v in changes.items() if v is not None or k not in REQUIRED_FIELDS}

    if not allow_privileged and any(field in changes for field in PRIVILEGED_FIELDS):
        raise AuthorizationError("Changing role or verification requires users:assign-role")

    if "email" in changes:
        email = changes["email"].lower()
        existing = get_by_email(db, email)
        if existing is not None and existing.id != user.id:
            raise ConflictError(f"Email {email} is already registered")
        user.email = email

    if "role" in changes:
        new_role = Role(changes["role"]).value
        if user.role == Role.ADMIN.value and new_role != Role.ADMIN.value and _count_admins(db) <= 1:
            raise ConflictError("Cannot demote the last administrator")
        if new_role != user.role:
            logger.info("Role of %s changed from %s to %s", user.username, user.role, new_role)
        user.role = new_role

    if "is_verified" in changes:
        user.is_verified = bool(changes["is_verified"])

    for field in ("first_name", "last_name"):
        if field in changes:
            setattr(user, field, changes[field])

    if "password" in changes:
        user.password_hash = get_password_hash(changes["password"])

    db.commit()
    db.refresh(user)
    return user


def delete_user(db: Session, user: User) -> None:
    if user.role == Role.ADMIN.value and _count_admins(db) <= 1:
        raise ConflictError("Cannot delete the last administrator")
    db.delete(user)
    db.commit()
    logger.info("Deleted user %s", user.username)
