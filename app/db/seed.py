"""
Startup seed data.

The admin account is always ensured.  With ``SEED_DEMO_DATA`` a regular
user, five volunteers and three events are added, the latter only while
the events table is still empty.  Running the seed twice changes nothing.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.security import get_password_hash
from app.models.event import Event, event_volunteers
from app.models.user import User
from app.models.volunteer import Volunteer

logger = logging.getLogger(__name__)

_DEMO_VOLUNTEERS = [
    ("Voluntario 1", "(54) 99999-9991", "vol1@email.com"),
    ("Voluntario 2", "(54) 99999-9992", "vol2@email.com"),
    ("Voluntario 3", "(54) 99999-9993", None),
    ("Voluntario 4", "(54) 99999-9994", "vol4@email.com"),
    ("Voluntario 5", "(54) 99999-9995", None),
]

# event index -> volunteer indexes
_DEMO_ASSIGNMENTS = {0: (0, 1, 2), 1: (1, 3), 2: (0, 4)}


async def _ensure_user(db: AsyncSession, email: str, password: str, role: str) -> bool:
    result = await db.execute(select(User).where(User.email == email))
    if result.scalar_one_or_none() is not None:
        return False
    db.add(User(email=email, hashed_password=get_password_hash(password), role=role))
    return True


async def _seed_demo_events(db: AsyncSession) -> None:
    existing = await db.scalar(select(func.count()).select_from(Event))
    if existing:
        return

    volunteers = [Volunteer(name=n, phone=p, email=e) for n, p, e in _DEMO_VOLUNTEERS]
    db.add_all(volunteers)

    start = datetime(2025, 10, 10, 9, 0, tzinfo=timezone.utc)
    end = datetime(2025, 10, 10, 17, 0, tzinfo=timezone.utc)
    events = [
        Event(
            title=f"Evento {i}",
            description=f"Desc Evento {i}",
            location=f"Local Evento {i}",
            start_date=start,
            end_date=end,
        )
        for i in range(1, 4)
    ]
    db.add_all(events)
    await db.flush()

    rows = [
        {"event_id": events[e].id, "volunteer_id": volunteers[v].id}
        for e, vols in _DEMO_ASSIGNMENTS.items()
        for v in vols
    ]
    await db.execute(insert(event_volunteers), rows)
    logger.info("Demo data created: %d volunteers, %d events", len(volunteers), len(events))


async def seed_database(db: AsyncSession, *, include_demo: bool | None = None) -> None:
    if include_demo is None:
        include_demo = settings.SEED_DEMO_DATA

    if await _ensure_user(db, settings.FIRST_ADMIN_EMAIL, settings.FIRST_ADMIN_PASSWORD, "admin"):
        logger.info(
            "Default admin created: %s (password: <redacted>)", settings.FIRST_ADMIN_EMAIL
        )

    if include_demo:
        await _ensure_user(db, settings.DEMO_USER_EMAIL, settings.DEMO_USER_PASSWORD, "user")
        await _seed_demo_events(db)

    await db.commit()
