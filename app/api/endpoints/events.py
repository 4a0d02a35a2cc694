"""
Event management endpoints (admin only).

Reads are public and live in ``public.py``.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import PathId, get_db, require_admin
from app.schemas.common import MessageResponse
from app.schemas.event import EventIn, EventRead
from app.schemas.token import TokenClaims
from app.services import events

router = APIRouter(prefix="/protected/events", tags=["events"])


@router.post("", response_model=EventRead, status_code=201)
async def create_event(
    body: EventIn,
    db: AsyncSession = Depends(get_db),
    _admin: TokenClaims = Depends(require_admin),
) -> EventRead:
    return await events.create_event(db, body)


@router.put("/{event_id}", response_model=EventRead)
async def update_event(
    event_id: PathId,
    body: EventIn,
    db: AsyncSession = Depends(get_db),
    _admin: TokenClaims = Depends(require_admin),
) -> EventRead:
    """Replace an event's fields and its whole volunteer list."""
    return await events.update_event(db, event_id, body)


@router.delete("/{event_id}", response_model=MessageResponse)
async def delete_event(
    event_id: PathId,
    db: AsyncSession = Depends(get_db),
    _admin: TokenClaims = Depends(require_admin),
) -> MessageResponse:
    await events.delete_event(db, event_id)
    return MessageResponse(message="Event deleted successfully")
