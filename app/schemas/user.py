"""Pydantic schemas for registration and login."""

from __future__ import annotations

from pydantic import BaseModel

VALID_ROLES = ("user", "admin")


class UserRegister(BaseModel):
    email: str | None = None
    password: str | None = None
    role: str = "user"


class UserLogin(BaseModel):
    email: str | None = None
    password: str | None = None


class UserPublic(BaseModel):
    email: str
    role: str

    model_config = {"from_attributes": True}


class RegisterResponse(BaseModel):
    message: str
    id: int


class LoginResponse(BaseModel):
    token: str
    user: UserPublic
