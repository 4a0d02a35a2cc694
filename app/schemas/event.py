"""Pydantic schemas for events.

Input fields are all optional: missing values reach the business rules,
which report them precisely. Only type coercion (dates, ints) and the
volunteer id range are checked here.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from app.schemas.common import RowId


class EventIn(BaseModel):
    title: str | None = None
    description: str | None = None
    location: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    volunteer_ids: list[RowId] | None = None


class EventRead(BaseModel):
    id: int
    title: str
    description: str | None
    location: str | None
    start_date: datetime
    end_date: datetime | None
    created_at: datetime | None = None
    volunteers: str = ""
    volunteer_ids: list[int] = []
