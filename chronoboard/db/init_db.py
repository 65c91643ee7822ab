"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata
before ``create_all`` runs.
"""

from typing import Optional

from sqlalchemy.orm import Session

from chronoboard.core.logging_config import get_logger
from chronoboard.core.rbac import Role
from chronoboard.db.session import engine
from chronoboard.models.base import Base
from chronoboard.models import user  # noqa: F401
from chronoboard.models.user import User
from chronoboard.schemas.user import UserAdminCreate
from chronoboard.services import user_service

logger = get_logger(__name__)


def init_db() -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ensured")


def seed_initial_data(
    db: Session,
    *,
    username: str,
    email: str,
    password: str,
) -> Optional[User]:
    """
    Create the first administrator account.

    Does nothing (returns None) when a user with that username already
    exists, so it is safe to run on every deploy. Credentials go through
    the same rules as the API and raise ``pydantic.ValidationError`` when
    they break them.
    """
    payload = UserAdminCreate(
        username=username,
        email=email,
        password=password,
        role=Role.ADMIN,
        is_verified=True,
    )
    if user_service.get_by_username(db, username) is not None:
        logger.info("Admin user %s already present, skipping seed", username)
        return None

    admin = user_service.create_user(db, **payload.model_dump())
    logger.info("Seeded admin user %s", username)
    return admin
