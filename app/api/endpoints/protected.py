"""
Protected landing endpoints: any authenticated user / admin only.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import get_current_claims, require_admin
from app.schemas.common import MessageResponse
from app.schemas.token import TokenClaims

router = APIRouter(prefix="/protected", tags=["protected"])


@router.get("/dashboard", response_model=MessageResponse)
async def dashboard(claims: TokenClaims = Depends(get_current_claims)) -> MessageResponse:
    return MessageResponse(message=f"Welcome to the dashboard, {claims.email}")


@router.get("/admin", response_model=MessageResponse)
async def admin_area(claims: TokenClaims = Depends(require_admin)) -> MessageResponse:
    return MessageResponse(message=f"Welcome to the admin area, {claims.email}")
