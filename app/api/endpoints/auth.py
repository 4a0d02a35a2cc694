"""
Auth endpoints: registration & login.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.core.security import create_access_token
from app.schemas.user import LoginResponse, RegisterResponse, UserLogin, UserRegister
from app.services import credentials

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    body: UserRegister,
    db: AsyncSession = Depends(get_db),
) -> RegisterResponse:
    """Create a new account (role ``user`` unless stated otherwise)."""
    user_id = await credentials.register(db, body.email, body.password, body.role)
    return RegisterResponse(message="User registered successfully", id=user_id)


@router.post("/login", response_model=LoginResponse)
async def login(
    body: UserLogin,
    db: AsyncSession = Depends(get_db),
) -> LoginResponse:
    """Check credentials and hand out a one-hour session token."""
    user = await credentials.verify(db, body.email, body.password)
    token = create_access_token(user.email, user.role)
    logger.info("Login succeeded for %s", user.email)
    return LoginResponse(token=token, user=user)
