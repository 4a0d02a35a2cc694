"""
Volunteer model.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String

from app.db.base import Base

NAME_LENGTH = 200
PHONE_LENGTH = 30
EMAIL_LENGTH = 320


class Volunteer(Base):
    __tablename__ = "volunteers"

    id: int = Column(Integer, primary_key=True, index=True)  # type: ignore[assignment]
    name: str = Column(String(NAME_LENGTH), nullable=False)  # type: ignore[assignment]
    phone: str = Column(String(PHONE_LENGTH), nullable=False)  # type: ignore[assignment]
    email: str | None = Column(String(EMAIL_LENGTH), nullable=True)  # type: ignore[assignment]
    created_at: datetime = Column(  # type: ignore[assignment]
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )
