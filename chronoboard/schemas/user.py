# File: chronoboard/schemas/user.py

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field

from chronoboard.core.rbac import Role

USERNAME_PATTERN = r"^[A-Za-z0-9_.-]+$"


class UserBase(BaseModel):
    username: str = Field(min_length=3, max_length=64, pattern=USERNAME_PATTERN)
    email: EmailStr
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)


class UserCreate(UserBase):
    password: str = Field(min_length=8, max_length=128)


class UserAdminCreate(UserCreate):
    role: Role = Role.USER
    is_verified: bool = False


class UserUpdate(BaseModel):
    """Partial update; fields left out stay unchanged."""

    email: Optional[EmailStr] = None
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    password: Optional[str] = Field(default=None, min_length=8, max_length=128)
    role: Optional[Role] = None
    is_verified: Optional[bool] = None


class UserRead(UserBase):
    id: int
    role: str
    is_verified: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True  # Pydantic v2: replaces orm_mode


class UserListResponse(BaseModel):
    items: List[UserRead]
    total: int
