"""Pydantic schemas for JWT session tokens."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class TokenClaims(BaseModel):
    email: str
    role: str
    iat: datetime
    exp: datetime
