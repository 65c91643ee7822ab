# File: tests/test_init_db.py

import pytest
from pydantic import ValidationError

from chronoboard.cli import create_parser, main
from chronoboard.core.security import verify_password
from chronoboard.db.init_db import seed_initial_data
from chronoboard.services import user_service


def test_seed_creates_verified_admin_once(db):
    admin = seed_initial_data(db, username="admin", email="admin@example.com", password="s3cret-pass")
    assert admin is not None
    assert admin.role == "admin"
    assert admin.is_verified
    assert verify_password("s3cret-pass", admin.password_hash)

    again = seed_initial_data(db, username="admin", email="admin@example.com", password="other-pass")
    assert again is None
    assert user_service.list_users(db)[1] == 1


def test_cli_create_user(db, capsys):
    code = main(["create-user", "--username", "carol", "--email", "carol@example.com",
                 "--password", "password123", "--role", "manager"])
    assert code == 0
    assert "Created manager carol" in capsys.readouterr().out

    carol = user_service.get_by_username(db, "carol")
    assert carol is not None and carol.role == "manager"


def test_seed_rejects_invalid_username(db):
    with pytest.raises(ValidationError):
        seed_initial_data(db, username="x y", email="xy@example.com", password="s3cret-pass")
    assert user_service.list_users(db)[1] == 0


def test_cli_create_user_duplicate(db, make_user, capsys):
    make_user("carol")
    code = main(["create-user", "--username", "carol", "--email", "c2@example.com", "--password", "password123"])
    assert code == 1
    assert "already taken" in capsys.readouterr().err


def test_cli_serve_arguments():
    args = create_parser().parse_args(["serve", "--port", "9000", "--web-root", "public"])
    assert args.host == "localhost"
    assert args.port == 9000
    assert args.web_root == "public"
    assert not args.reload


@pytest.mark.parametrize("username,email,password,field", [
    ("x y", "xy@example.com", "password123", "username"),
    ("carol", "not-an-email", "password123", "email"),
    ("carol", "carol@example.com", "pw", "password"),
])
def test_cli_create_user_rejects_invalid_input(db, capsys, username, email, password, field):
    code = main(["create-user", "--username", username, "--email", email, "--password", password])
    assert code == 1
    assert f"error: {field}:" in capsys.readouterr().err
    assert user_service.list_users(db)[1] == 0


def test_cli_created_user_is_served_by_api(client, db, auth_headers):
    assert main(["create-user", "--username", "dave", "--email", "dave@example.com", "--password", "password123"]) == 0
    dave = user_service.get_by_username(db, "dave")

    resp = client.get("/api/v1/auth/me", headers=auth_headers(dave))
    assert resp.status_code == 200
    assert resp.json()["username"] == "dave"
