# File: chronoboard/core/csrf.py

"""
Session-backed CSRF tokens for the HTML forms.

The token is stored in the signed session cookie. Forms post it back as
``_csrf``; the layout also exposes it in ``<meta name="csrf-token">``.
"""

import secrets
from typing import Optional

from starlette.requests import Request

from chronoboard.core.exceptions import CsrfError

CSRF_PARAM = "_csrf"
_SESSION_KEY = "_csrf"


def csrf_token(request: Request) -> str:
    token = request.session.get(_SESSION_KEY)
    if not token:
        token = secrets.token_urlsafe(32)
        request.session[_SESSION_KEY] = token
    return token


def validate_csrf(request: Request, submitted: Optional[str]) -> None:
    expected = request.session.get(_SESSION_KEY)
    if not expected or not submitted or not secrets.compare_digest(expected, submitted):
        raise CsrfError()
