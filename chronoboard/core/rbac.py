# File: chronoboard/core/rbac.py

"""
Role-based access control.

Roles form a small hierarchy: a role owns its own permissions plus the
permissions of every role it inherits from. The ``users.role`` column holds
the role name; anything not listed in ``Role`` grants nothing.
"""

from enum import Enum
from functools import lru_cache
from typing import Dict, FrozenSet, Iterable, List, Union

from chronoboard.core.logging_config import get_logger

logger = get_logger(__name__)


class Role(str, Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    USER = "user"


class Permission(str, Enum):
    PROFILE_VIEW = "profile:view"
    PROFILE_UPDATE = "profile:update"
    USERS_LIST = "users:list"
    USERS_VIEW = "users:view"
    USERS_CREATE = "users:create"
    USERS_UPDATE = "users:update"
    USERS_DELETE = "users:delete"
    USERS_ASSIGN_ROLE = "users:assign-role"


# role -> roles it inherits from
ROLE_HIERARCHY: Dict[Role, List[Role]] = {
    Role.ADMIN: [Role.MANAGER],
    Role.MANAGER: [Role.USER],
    Role.USER: [],
}

# permissions granted directly to each role
ROLE_PERMISSIONS: Dict[Role, FrozenSet[Permission]] = {
    Role.USER: frozenset({Permission.PROFILE_VIEW, Permission.PROFILE_UPDATE}),
    Role.MANAGER: frozenset({Permission.USERS_LIST, Permission.USERS_VIEW}),
    Role.ADMIN: frozenset({
        Permission.USERS_CREATE,
        Permission.USERS_UPDATE,
        Permission.USERS_DELETE,
        Permission.USERS_ASSIGN_ROLE,
    }),
}


def parse_role(value: Union[str, Role, None]) -> Union[Role, None]:
    if isinstance(value, Role):
        return value
    try:
        return Role(value)
    except ValueError:
        return None


@lru_cache(maxsize=None)
def _effective_permissions(role: Role) -> FrozenSet[Permission]:
    granted = set()
    seen = set()
    pending = [role]
    while pending:
        current = pending.pop()
        if current in seen:
            continue
        seen.add(current)
        granted.update(ROLE_PERMISSIONS.get(current, ()))
        pending.extend(ROLE_HIERARCHY.get(current, ()))
    return frozenset(granted)


def permissions_for(role: Union[str, Role, None]) -> FrozenSet[Permission]:
    """All permissions a role holds, inherited ones included."""
    parsed = parse_role(role)
    if parsed is None:
        logger.warning("Unknown role %r has no permissions", role)
        return frozenset()
    return _effective_permissions(parsed)


def has_permission(role: Union[str, Role, None], permission: Permission) -> bool:
    return permission in permissions_for(role)


def inherited_roles(role: Role) -> List[Role]:
    return list(ROLE_HIERARCHY.get(role, ()))


def assignable_roles() -> List[str]:
    return [role.value for role in Role]


def sorted_permissions(permissions: Iterable[Permission]) -> List[str]:
    return sorted(p.value for p in permissions)
