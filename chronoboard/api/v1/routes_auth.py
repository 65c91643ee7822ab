# File: chronoboard/api/v1/routes_auth.py

"""
Auth API routes: registration, token login and the current user.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from chronoboard.api.deps import get_current_user, get_db
from chronoboard.core.exceptions import AuthenticationError
from chronoboard.models.user import User
from chronoboard.schemas.auth import LoginRequest, Token
from chronoboard.schemas.user import UserCreate, UserRead
from chronoboard.services.auth_service import authenticate_user, issue_token, register_user

router = APIRouter()


@router.post("/login", response_model=Token, summary="Exchange credentials for a token")
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    """
    ``username`` may be the account's username or its email address.
    """
    user = authenticate_user(db, login=payload.username, password=payload.password)
    if user is None:
        raise AuthenticationError("Incorrect username or password")

    token, expires_in = issue_token(user)
    return Token(access_token=token, expires_in=expires_in)


@router.post(
    "/register",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="User registration",
)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    return register_user(db, payload)


@router.get("/me", response_model=UserRead, summary="Current user")
def me(user: User = Depends(get_current_user)):
    return user
