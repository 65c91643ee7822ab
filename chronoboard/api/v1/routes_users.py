# File: chronoboard/api/v1/routes_users.py

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from chronoboard.api.deps import get_current_user, get_db, require_permission
from chronoboard.core.exceptions import AuthorizationError, ConflictError
from chronoboard.core.rbac import Permission, Role, has_permission
from chronoboard.models.user import User
from chronoboard.schemas.user import UserAdminCreate, UserListResponse, UserRead, UserUpdate
from chronoboard.services import user_service

router = APIRouter()


@router.get(
    "/",
    response_model=UserListResponse,
    summary="List users",
)
def list_users(
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    role: Optional[Role] = None,
    db: Session = Depends(get_db),
    _: User = Depends(require_permission(Permission.USERS_LIST)),
):
    items, total = user_service.list_users(db, skip=skip, limit=limit, role=role)
    return UserListResponse(items=items, total=total)


@router.post(
    "/",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create user with any role",
)
def create_user(
    payload: UserAdminCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_permission(Permission.USERS_CREATE)),
):
    return user_service.create_user(db, **payload.model_dump())


@router.get("/{user_id}", response_model=UserRead, summary="Get one user")
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    """Users may always read their own record."""
    if current.id != user_id and not has_permission(current.role, Permission.USERS_VIEW):
        raise AuthorizationError(f"Permission {Permission.USERS_VIEW.value} required")
    return user_service.get_user(db, user_id)


@router.patch("/{user_id}", response_model=UserRead, summary="Update a user")
def update_user(
    user_id: int,
    payload: UserUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    """
    Profile fields: the user themselves or ``users:update``.
    Role and verification: ``users:assign-role`` only.
    """
    if current.id == user_id:
        if not has_permission(current.role, Permission.PROFILE_UPDATE):
            raise AuthorizationError(f"Permission {Permission.PROFILE_UPDATE.value} required")
    elif not has_permission(current.role, Permission.USERS_UPDATE):
        raise AuthorizationError(f"Permission {Permission.USERS_UPDATE.value} required")

    user = user_service.get_user(db, user_id)
    return user_service.update_user(
        db,
        user,
        payload.model_dump(exclude_unset=True),
        allow_privileged=has_permission(current.role, Permission.USERS_ASSIGN_ROLE),
    )


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a user",
)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current: User = Depends(require_permission(Permission.USERS_DELETE)),
):
    if current.id == user_id:
        raise ConflictError("You cannot delete your own account")
    user_service.delete_user(db, user_service.get_user(db, user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
