# File: chronoboard/schemas/auth.py

from typing import List

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    # username or email
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class RoleRead(BaseModel):
    name: str
    inherits: List[str]
    permissions: List[str]


class CurrentPermissions(BaseModel):
    username: str
    role: str
    permissions: List[str]
