"""
Event model & the event <-> volunteer association table.

Association rows are written through the ``event_volunteers`` table
directly; the ``volunteers`` relationship is read-only.  Deleting an event
(or a volunteer) drops its association rows through the FK cascade.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import (Column, DateTime, ForeignKey, Index, Integer, String,
                        Table, Text)
from sqlalchemy.orm import relationship

from app.db.base import Base

TITLE_LENGTH = 200
LOCATION_LENGTH = 255

event_volunteers = Table(
    "event_volunteers",
    Base.metadata,
    Column(
        "event_id",
        Integer,
        ForeignKey("events.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "volunteer_id",
        Integer,
        ForeignKey("volunteers.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Event(Base):
    __tablename__ = "events"
    __table_args__ = (Index("ix_events_start_date", "start_date"),)

    id: int = Column(Integer, primary_key=True, index=True)  # type: ignore[assignment]
    title: str = Column(String(TITLE_LENGTH), nullable=False)  # type: ignore[assignment]
    description: str | None = Column(Text, nullable=True)  # type: ignore[assignment]
    location: str | None = Column(String(LOCATION_LENGTH), nullable=True)  # type: ignore[assignment]
    start_date: datetime = Column(DateTime(timezone=True), nullable=False)  # type: ignore[assignment]
    end_date: datetime | None = Column(DateTime(timezone=True), nullable=True)  # type: ignore[assignment]
    created_at: datetime = Column(  # type: ignore[assignment]
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )

    volunteers = relationship(
        "Volunteer",
        secondary=event_volunteers,
        order_by="Volunteer.id",
        viewonly=True,
    )
