# File: chronoboard/views/alerts.py

"""
Session flash messages, shown once by the layout's alert block.
"""

from typing import Dict, List

from starlette.requests import Request

from chronoboard.views.theme import ALERT_KINDS

_SESSION_KEY = "_flashes"

ALERT_TITLES = {
    "success": "Success!",
    "info": "Information",
    "warning": "Warning",
    "error": "Error",
}

_ALIASES = {"danger": "error"}


def normalize_kind(kind: str) -> str:
    kind = _ALIASES.get(kind, kind)
    return kind if kind in ALERT_KINDS else "info"


def flash(request: Request, kind: str, message: str) -> None:
    flashes = list(request.session.get(_SESSION_KEY, []))
    flashes.append({"kind": normalize_kind(kind), "message": message})
    request.session[_SESSION_KEY] = flashes


def pop_flashes(request: Request) -> List[Dict[str, str]]:
    """Return pending alerts (with titles) and clear them."""
    flashes = request.session.pop(_SESSION_KEY, [])
    return [
        {"kind": f["kind"], "title": ALERT_TITLES[f["kind"]], "body": f["message"]}
        for f in flashes
    ]
