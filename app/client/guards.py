"""
Route guards.

A guard returns ``None`` to let the route render, ``PENDING`` while the
session is still being restored, or a ``Redirect``.  Role checks use the
cached profile only; the server re-validates on every API call anyway.
"""

from __future__ import annotations

from typing import Final, Literal, Union

from app.client.navigation import FORBIDDEN_PATH, LOGIN_PATH, Navigator, Redirect
from app.client.session import AuthSession

PENDING: Final = "pending"

GuardResult = Union[Redirect, Literal["pending"], None]


def require_auth(session: AuthSession, location: str) -> GuardResult:
    if session.loading:
        return PENDING
    if not session.token:
        return Redirect(LOGIN_PATH, state={"from": location})
    return None


def require_role(session: AuthSession, role: str) -> GuardResult:
    if not session.user or session.role != role:
        return Redirect(FORBIDDEN_PATH)
    return None


def guard_route(
    session: AuthSession,
    navigator: Navigator,
    location: str,
    role: str | None = None,
) -> bool:
    """Run the guards for *location*; navigate away and return False if blocked."""
    result = require_auth(session, location)
    if result is None and role is not None:
        result = require_role(session, role)

    if result is None:
        navigator.navigate(location)
        return True
    if isinstance(result, Redirect):
        navigator.follow(result)
    return False
