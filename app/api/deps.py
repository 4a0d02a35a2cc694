"""
FastAPI dependencies: database session and the auth guard chain.

Chain for a protected route:
    bearer token present?  no  -> 401
    token verifies?        no  -> 403
    role matches (if any)? no  -> 403 "Access denied"
    -> handler
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator, Awaitable, Callable
from typing import Annotated, Optional

from fastapi import Depends, Path, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import AuthorizationError, TokenExpired, TokenInvalid, TokenMissing
from app.core.security import decode_access_token
from app.db.session import async_session_factory
from app.schemas.common import MAX_ROW_ID
from app.schemas.token import TokenClaims

logger = logging.getLogger(__name__)

# auto_error=False so a missing header becomes our own 401 body
bearer_scheme = HTTPBearer(auto_error=False)

# Path ids outside the key range fail request validation (400).
PathId = Annotated[int, Path(ge=1, le=MAX_ROW_ID)]


# ── Database session ────────────────────────────────────────────────
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


# ── Auth dependencies ───────────────────────────────────────────────
async def get_current_claims(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenClaims:
    """Verify the bearer token and attach its claims to the request."""
    token = credentials.credentials if credentials else None
    if not token:
        logger.warning("Access attempt without token on %s", request.url.path)
        raise TokenMissing()

    try:
        claims = decode_access_token(token)
    except (TokenInvalid, TokenExpired) as exc:
        logger.warning("Rejected token on %s: %s", request.url.path, exc.message)
        raise

    logger.debug("Token accepted for %s", claims.email)
    request.state.claims = claims
    return claims


def require_role(role: str) -> Callable[..., Awaitable[TokenClaims]]:
    """Build a dependency that only lets *role* through."""

    async def _require_role(
        request: Request,
        claims: TokenClaims = Depends(get_current_claims),
    ) -> TokenClaims:
        if claims.role != role:
            logger.warning(
                "Access denied on %s for %s (required role %s, has %s)",
                request.url.path,
                claims.email,
                role,
                claims.role,
            )
            raise AuthorizationError("Access denied")
        return claims

    return _require_role


require_admin = require_role("admin")
