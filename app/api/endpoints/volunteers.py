"""
Volunteer CRUD endpoints.

- GET operations require any authenticated user.
- POST / PUT / DELETE operations require admin role.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import PathId, get_current_claims, get_db, require_admin
from app.schemas.common import MessageResponse
from app.schemas.token import TokenClaims
from app.schemas.volunteer import VolunteerIn, VolunteerRead
from app.services import volunteers

router = APIRouter(prefix="/protected/volunteers", tags=["volunteers"])


@router.get("", response_model=list[VolunteerRead])
async def list_volunteers(
    db: AsyncSession = Depends(get_db),
    _claims: TokenClaims = Depends(get_current_claims),
) -> list[VolunteerRead]:
    return await volunteers.list_volunteers(db)


@router.get("/{volunteer_id}", response_model=VolunteerRead)
async def get_volunteer(
    volunteer_id: PathId,
    db: AsyncSession = Depends(get_db),
    _claims: TokenClaims = Depends(get_current_claims),
) -> VolunteerRead:
    return await volunteers.get_volunteer(db, volunteer_id)


@router.post("", response_model=VolunteerRead, status_code=201)
async def create_volunteer(
    body: VolunteerIn,
    db: AsyncSession = Depends(get_db),
    _admin: TokenClaims = Depends(require_admin),
) -> VolunteerRead:
    return await volunteers.create_volunteer(db, body)


@router.put("/{volunteer_id}", response_model=VolunteerRead)
async def update_volunteer(
    volunteer_id: PathId,
    body: VolunteerIn,
    db: AsyncSession = Depends(get_db),
    _admin: TokenClaims = Depends(require_admin),
) -> VolunteerRead:
    return await volunteers.update_volunteer(db, volunteer_id, body)


@router.delete("/{volunteer_id}", response_model=MessageResponse)
async def delete_volunteer(
    volunteer_id: PathId,
    db: AsyncSession = Depends(get_db),
    _admin: TokenClaims = Depends(require_admin),
) -> MessageResponse:
    await volunteers.delete_volunteer(db, volunteer_id)
    return MessageResponse(message="Volunteer deleted successfully")
