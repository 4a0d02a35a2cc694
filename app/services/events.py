"""
Event business rules.

- Title, start and end dates are required; start must be strictly before end.
- Every event has between 1 and 3 distinct, existing volunteers.
- On update the association rows are replaced wholesale (delete + insert)
  inside the same transaction as the row update.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.exceptions import EventNotFound, ValidationError, VolunteersNotFound
from app.models.event import LOCATION_LENGTH, TITLE_LENGTH, Event, event_volunteers
from app.models.volunteer import Volunteer
from app.schemas.event import EventIn, EventRead

logger = logging.getLogger(__name__)

MIN_VOLUNTEERS = 1
MAX_VOLUNTEERS = 3


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _project(event: Event) -> EventRead:
    volunteers = sorted(event.volunteers, key=lambda v: v.id)
    return EventRead(
        id=event.id,
        title=event.title,
        description=event.description,
        location=event.location,
        start_date=event.start_date,
        end_date=event.end_date,
        created_at=event.created_at,
        volunteers=", ".join(v.name for v in volunteers),
        volunteer_ids=[v.id for v in volunteers],
    )


async def _load(db: AsyncSession, event_id: int) -> Event | None:
    result = await db.execute(
        select(Event)
        .options(selectinload(Event.volunteers))
        .where(Event.id == event_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def _validate(db: AsyncSession, data: EventIn) -> tuple[dict[str, Any], list[int]]:
    """Apply the event rules; return the column values and volunteer ids."""
    title = (data.title or "").strip()
    if not title or data.start_date is None or data.end_date is None:
        raise ValidationError("Title, start_date and end_date are required")
    if len(title) > TITLE_LENGTH:
        raise ValidationError(f"Title must be at most {TITLE_LENGTH} characters")
    if data.location is not None and len(data.location) > LOCATION_LENGTH:
        raise ValidationError(f"Location must be at most {LOCATION_LENGTH} characters")

    start = _as_utc(data.start_date)
    end = _as_utc(data.end_date)
    if start >= end:
        raise ValidationError("start_date must be earlier than end_date")

    volunteer_ids = list(data.volunteer_ids or [])
    if len(volunteer_ids) < MIN_VOLUNTEERS:
        raise ValidationError(f"An event needs at least {MIN_VOLUNTEERS} volunteer")
    if len(volunteer_ids) > MAX_VOLUNTEERS:
        raise ValidationError(f"An event can have at most {MAX_VOLUNTEERS} volunteers")
    if len(set(volunteer_ids)) != len(volunteer_ids):
        raise ValidationError("Volunteer ids must not repeat")

    result = await db.execute(select(Volunteer.id).where(Volunteer.id.in_(volunteer_ids)))
    missing = set(volunteer_ids) - set(result.scalars().all())
    if missing:
        raise VolunteersNotFound(list(missing))

    fields = {
        "title": title,
        "description": data.description,
        "location": data.location,
        "start_date": start,
        "end_date": end,
    }
    return fields, volunteer_ids


async def _insert_associations(db: AsyncSession, event_id: int, volunteer_ids: list[int]) -> None:
    await db.execute(
        insert(event_volunteers),
        [{"event_id": event_id, "volunteer_id": vid} for vid in volunteer_ids],
    )


async def list_events(db: AsyncSession) -> list[EventRead]:
    result = await db.execute(
        select(Event)
        .options(selectinload(Event.volunteers))
        .order_by(Event.start_date.asc(), Event.id.asc())
    )
    return [_project(e) for e in result.scalars().all()]


async def get_event(db: AsyncSession, event_id: int) -> EventRead:
    event = await _load(db, event_id)
    if event is None:
        raise EventNotFound()
    return _project(event)


async def create_event(db: AsyncSession, data: EventIn) -> EventRead:
    fields, volunteer_ids = await _validate(db, data)

    event = Event(**fields)
    db.add(event)
    await db.flush()
    await _insert_associations(db, event.id, volunteer_ids)
    await db.commit()
    logger.info("Created event %d (%s) with volunteers %s", event.id, event.title, volunteer_ids)

    return await get_event(db, event.id)


async def update_event(db: AsyncSession, event_id: int, data: EventIn) -> EventRead:
    event = await db.get(Event, event_id)
    if event is None:
        raise EventNotFound()

    fields, volunteer_ids = await _validate(db, data)
    for field, value in fields.items():
        setattr(event, field, value)

    await db.execute(delete(event_volunteers).where(event_volunteers.c.event_id == event_id))
    await _insert_associations(db, event_id, volunteer_ids)
    await db.commit()
    logger.info("Updated event %d, volunteers now %s", event_id, volunteer_ids)

    return await get_event(db, event_id)


async def delete_event(db: AsyncSession, event_id: int) -> None:
    event = await db.get(Event, event_id)
    if event is None:
        raise EventNotFound()

    await db.delete(event)
    await db.commit()
    logger.info("Deleted event %d", event_id)
