# File: chronoboard/views/navigation.py

"""
Navbar and breadcrumb models for the main layout.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from chronoboard.models.user import User

HOME_URL = "/"

# (label, url) in navbar order
MENU: Sequence[Tuple[str, str]] = (
    ("Home", "/site/index"),
    ("About", "/site/about"),
    ("Mood Board", "/site/mood-board"),
    ("Contact", "/site/contact"),
)

LOGIN_URL = "/site/login"
LOGOUT_URL = "/site/logout"


@dataclass(frozen=True)
class NavItem:
    label: str
    url: str
    active: bool = False
    # "link" or "logout" (rendered as a POST form button)
    kind: str = "link"


@dataclass(frozen=True)
class Crumb:
    label: str
    url: Optional[str] = None


def _is_active(path: str, url: str) -> bool:
    if url == "/site/index":
        return path in ("/", "/site/index")
    return path == url


def build_nav_items(path: str, user: Optional[User]) -> List[NavItem]:
    """
    Menu entries for ``path``, ending with Login for guests or
    ``Logout (<username>)`` for signed-in users.
    """
    items = [NavItem(label, url, _is_active(path, url)) for label, url in MENU]
    if user is None:
        items.append(NavItem("Login", LOGIN_URL, _is_active(path, LOGIN_URL)))
    else:
        items.append(NavItem(f"Logout ({user.username})", LOGOUT_URL, kind="logout"))
    return items


BreadcrumbLink = Union[str, Tuple[str, str]]


def build_breadcrumbs(links: Iterable[BreadcrumbLink]) -> List[Crumb]:
    """
    Home first, then ``links``; plain strings are rendered as the
    current (unlinked) page. Empty input gives an empty trail.
    """
    crumbs = []
    for link in links:
        if isinstance(link, str):
            crumbs.append(Crumb(link))
        else:
            label, url = link
            crumbs.append(Crumb(label, url))
    if not crumbs:
        return []
    return [Crumb("Home", HOME_URL)] + crumbs
