"""
Credential store: registration and password verification.
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import (DuplicateUser, InvalidPassword, UserNotFound,
                                 ValidationError)
from app.core.security import get_password_hash, verify_password
from app.models.user import EMAIL_LENGTH, User
from app.schemas.user import VALID_ROLES, UserPublic

logger = logging.getLogger(__name__)


async def _find_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def register(
    db: AsyncSession,
    email: str | None,
    raw_password: str | None,
    role: str = "user",
) -> int:
    """Create a user and return its id.

    Emails are matched exactly (case-sensitive).
    """
    if not email or not email.strip() or not raw_password:
        raise ValidationError("Email and password are required")
    if role not in VALID_ROLES:
        raise ValidationError(f"Role must be one of: {', '.join(VALID_ROLES)}")

    email = email.strip()
    if len(email) > EMAIL_LENGTH:
        raise ValidationError(f"Email must be at most {EMAIL_LENGTH} characters")
    if await _find_by_email(db, email) is not None:
        raise DuplicateUser()

    user = User(email=email, hashed_password=get_password_hash(raw_password), role=role)
    db.add(user)
    await db.commit()
    await db.refresh(user)
    logger.info("Registered user %s (role=%s)", user.email, user.role)
    return user.id


async def verify(db: AsyncSession, email: str | None, raw_password: str | None) -> UserPublic:
    """Check a password and return the user without its hash."""
    if not email or not raw_password:
        raise ValidationError("Email and password are required")

    user = await _find_by_email(db, email.strip())
    if user is None:
        raise UserNotFound()
    if not verify_password(raw_password, user.hashed_password):
        raise InvalidPassword()
    return UserPublic.model_validate(user)
