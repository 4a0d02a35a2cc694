"""
JWT session tokens and password hashing (bcrypt).
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError as PydanticValidationError

from app.core.config import settings
from app.core.exceptions import TokenExpired, TokenInvalid, TokenMissing
from app.schemas.token import TokenClaims

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

_ALGORITHM = settings.ALGORITHM
_SECRET = settings.SECRET_KEY


# ── Passwords ───────────────────────────────────────────────────────
def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def get_password_hash(plain: str) -> str:
    return pwd_context.hash(plain)


# ── JWT tokens ──────────────────────────────────────────────────────
def create_access_token(
    email: str,
    role: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Sign a session token carrying ``email`` and ``role``.

    Tokens are stateless: expiry is the only way they stop working.
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    return jwt.encode(
        {"email": email, "role": role, "iat": now, "exp": expire},
        _SECRET,
        algorithm=_ALGORITHM,
    )


def decode_access_token(token: str | None) -> TokenClaims:
    """Verify *token* and return its claims.

    Raises ``TokenMissing``, ``TokenExpired`` or ``TokenInvalid``.  Claims
    are returned as signed; the user record is not consulted, so a role
    change only shows up after the next login.
    """
    if not token:
        raise TokenMissing()
    try:
        payload = jwt.decode(token, _SECRET, algorithms=[_ALGORITHM])
    except ExpiredSignatureError as exc:
        raise TokenExpired() from exc
    except JWTError as exc:
        raise TokenInvalid() from exc

    try:
        return TokenClaims.model_validate(payload)
    except PydanticValidationError as exc:
        raise TokenInvalid("Token is missing required claims") from exc
