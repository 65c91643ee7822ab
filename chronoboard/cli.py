# File: chronoboard/cli.py

"""
Command line entry point.

    chronoboard serve --host localhost --port 8080 --web-root web
    chronoboard init-db
    chronoboard create-user --username admin --email admin@example.com --password ... --role admin
"""

import argparse
import os
import sys
from typing import List, Optional

from chronoboard.core.logging_config import setup_logging
from chronoboard.core.rbac import Role, assignable_roles


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chronoboard",
        description="ChronoBoard web application tools",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the development server")
    serve.add_argument("--host", default="localhost")
    serve.add_argument("--port", type=int, default=8080)
    serve.add_argument("--web-root", default=None, help="Directory served for existing files (default: web)")
    serve.add_argument("--reload", action="store_true", help="Restart on code changes")

    subparsers.add_parser("init-db", help="Create database tables")

    create_user = subparsers.add_parser("create-user", help="Create a user account")
    create_user.add_argument("--username", required=True)
    create_user.add_argument("--email", required=True)
    create_user.add_argument("--password", required=True)
    create_user.add_argument("--role", choices=assignable_roles(), default=Role.USER.value)
    create_user.add_argument("--verified", action="store_true")

    return parser


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    if args.web_root:
        # read by Settings when the app module is imported
        os.environ["WEB_ROOT"] = args.web_root
    uvicorn.run("chronoboard.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def _init_db(args: argparse.Namespace) -> int:
    from chronoboard.db.init_db import init_db

    init_db()
    return 0


def _create_user(args: argparse.Namespace) -> int:
    from pydantic import ValidationError

    from chronoboard.core.exceptions import ConflictError
    from chronoboard.db.init_db import init_db
    from chronoboard.db.session import SessionLocal
    from chronoboard.schemas.user import UserAdminCreate
    from chronoboard.services import user_service

    try:
        payload = UserAdminCreate(
            username=args.username,
            email=args.email,
            password=args.password,
            role=args.role,
            is_verified=args.verified,
        )
    except ValidationError as exc:
        for err in exc.errors():
            field = ".".join(str(part) for part in err["loc"])
            print(f"error: {field}: {err['msg']}", file=sys.stderr)
        return 1

    init_db()
    db = SessionLocal()
    try:
        user = user_service.create_user(db, **payload.model_dump())
    except ConflictError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return 1
    finally:
        db.close()

    print(f"Created {user.role} {user.username} (id {user.id})")
    return 0


COMMANDS = {
    "serve": _serve,
    "init-db": _init_db,
    "create-user": _create_user,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = create_parser().parse_args(argv)
    setup_logging()
    return COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
