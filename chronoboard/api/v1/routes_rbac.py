# File: chronoboard/api/v1/routes_rbac.py

"""
Read-only view of the role hierarchy, handy for building admin UIs.
"""

from fastapi import APIRouter, Depends

from chronoboard.api.deps import get_current_user
from chronoboard.core.rbac import Role, inherited_roles, permissions_for, sorted_permissions
from chronoboard.models.user import User
from chronoboard.schemas.auth import CurrentPermissions, RoleRead

router = APIRouter()


@router.get("/roles", response_model=list[RoleRead])
def list_roles(_: User = Depends(get_current_user)):
    return [
        RoleRead(
            name=role.value,
            inherits=[r.value for r in inherited_roles(role)],
            permissions=sorted_permissions(permissions_for(role)),
        )
        for role in Role
    ]


@router.get("/me", response_model=CurrentPermissions)
def my_permissions(user: User = Depends(get_current_user)):
    return CurrentPermissions(
        username=user.username,
        role=user.role,
        permissions=sorted_permissions(permissions_for(user.role)),
    )
