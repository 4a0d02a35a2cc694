"""
Volunteer business rules: validation and CRUD.
"""

from __future__ import annotations

import logging
import re

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ValidationError, VolunteerNotFound
from app.models.volunteer import EMAIL_LENGTH, NAME_LENGTH, PHONE_LENGTH, Volunteer
from app.schemas.volunteer import VolunteerIn, VolunteerRead

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_PHONE_RE = re.compile(r"^[\d\s\-()]+$")


def _clean(data: VolunteerIn) -> dict[str, str | None]:
    """Validate a volunteer payload and return normalised column values."""
    name = (data.name or "").strip()
    phone = (data.phone or "").strip()
    email = (data.email or "").strip() or None

    if not name or not phone:
        raise ValidationError("Name and phone are required")
    if len(name) > NAME_LENGTH:
        raise ValidationError(f"Name must be at most {NAME_LENGTH} characters")
    if len(phone) > PHONE_LENGTH:
        raise ValidationError(f"Phone must be at most {PHONE_LENGTH} characters")
    if email is not None and len(email) > EMAIL_LENGTH:
        raise ValidationError(f"Email must be at most {EMAIL_LENGTH} characters")
    if not _PHONE_RE.match(phone):
        raise ValidationError("Invalid phone number")
    if email is not None and not _EMAIL_RE.match(email):
        raise ValidationError("Invalid email")
    return {"name": name, "phone": phone, "email": email}


async def _get_or_404(db: AsyncSession, volunteer_id: int) -> Volunteer:
    volunteer = await db.get(Volunteer, volunteer_id)
    if volunteer is None:
        raise VolunteerNotFound()
    return volunteer


async def list_volunteers(db: AsyncSession) -> list[VolunteerRead]:
    result = await db.execute(select(Volunteer).order_by(Volunteer.id))
    return [VolunteerRead.model_validate(v) for v in result.scalars().all()]


async def get_volunteer(db: AsyncSession, volunteer_id: int) -> VolunteerRead:
    return VolunteerRead.model_validate(await _get_or_404(db, volunteer_id))


async def create_volunteer(db: AsyncSession, data: VolunteerIn) -> VolunteerRead:
    volunteer = Volunteer(**_clean(data))
    db.add(volunteer)
    await db.commit()
    await db.refresh(volunteer)
    logger.info("Created volunteer %d (%s)", volunteer.id, volunteer.name)
    return VolunteerRead.model_validate(volunteer)


async def update_volunteer(
    db: AsyncSession, volunteer_id: int, data: VolunteerIn
) -> VolunteerRead:
    volunteer = await _get_or_404(db, volunteer_id)
    for field, value in _clean(data).items():
        setattr(volunteer, field, value)

    await db.commit()
    await db.refresh(volunteer)
    logger.info("Updated volunteer %d", volunteer_id)
    return VolunteerRead.model_validate(volunteer)


async def delete_volunteer(db: AsyncSession, volunteer_id: int) -> None:
    """Delete a volunteer; its event associations go with it (FK cascade)."""
    volunteer = await _get_or_404(db, volunteer_id)
    await db.delete(volunteer)
    await db.commit()
    logger.info("Deleted volunteer %d", volunteer_id)
