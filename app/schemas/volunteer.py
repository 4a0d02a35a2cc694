"""Pydantic schemas for volunteers."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class VolunteerIn(BaseModel):
    name: str | None = None
    phone: str | None = None
    email: str | None = None


class VolunteerRead(BaseModel):
    id: int
    name: str
    phone: str
    email: str | None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
