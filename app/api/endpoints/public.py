"""
Public endpoints: no authentication.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import PathId, get_db
from app.schemas.common import MessageResponse
from app.schemas.event import EventRead
from app.services import events

router = APIRouter(tags=["public"])


@router.get("/", response_model=MessageResponse)
async def home() -> MessageResponse:
    return MessageResponse(message="Welcome to the public API!")


@router.get("/events", response_model=list[EventRead])
async def list_events(db: AsyncSession = Depends(get_db)) -> list[EventRead]:
    """All events, earliest first, with their volunteers' names."""
    return await events.list_events(db)


@router.get("/events/{event_id}", response_model=EventRead)
async def get_event(event_id: PathId, db: AsyncSession = Depends(get_db)) -> EventRead:
    return await events.get_event(db, event_id)
