# File: tests/conftest.py

"""
Shared fixtures.

Environment is set before the app is imported: in-memory sqlite, cheap
bcrypt rounds and a throwaway mail directory.
"""

import os
import re
import tempfile

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only"
os.environ["MAIL_FILE_TRANSPORT"] = "true"
os.environ["MAIL_DIR"] = tempfile.mkdtemp(prefix="chronoboard-mail-")
os.environ["ENVIRONMENT"] = "testing"
os.environ["WEB_ROOT"] = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "web")
os.environ.pop("SEED_ADMIN_PASSWORD", None)

import pytest
from fastapi.testclient import TestClient

from chronoboard.core.rbac import Role
from chronoboard.db.session import SessionLocal, engine
from chronoboard.main import app
from chronoboard.models.base import Base
from chronoboard.models.user import User
from chronoboard.services import user_service
from chronoboard.services.auth_service import issue_token

PASSWORD = "password123"

_CSRF_RE = re.compile(r'name="_csrf" value="([^"]+)"')


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def password() -> str:
    return PASSWORD


@pytest.fixture
def make_user(db):
    def _make(username: str, role: Role = Role.USER, **kwargs) -> User:
        return user_service.create_user(
            db,
            username=username,
            email=kwargs.pop("email", f"{username}@example.com"),
            password=kwargs.pop("password", PASSWORD),
            role=role,
            **kwargs,
        )

    return _make


@pytest.fixture
def auth_headers():
    def _headers(user: User) -> dict:
        token, _ = issue_token(user)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def csrf_from():
    def _extract(html: str) -> str:
        match = _CSRF_RE.search(html)
        assert match, "no CSRF field in page"
        return match.group(1)

    return _extract


@pytest.fixture
def alice(make_user) -> User:
    return make_user("alice", first_name="Alice", last_name="Liddell")


@pytest.fixture
def manager(make_user) -> User:
    return make_user("martha", Role.MANAGER)


@pytest.fixture
def admin(make_user) -> User:
    return make_user("root", Role.ADMIN, is_verified=True)
