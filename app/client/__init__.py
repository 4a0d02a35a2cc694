"""Client-side session handling for the events API."""

from app.client.guards import PENDING, guard_route, require_auth, require_role
from app.client.http import ApiClient, ApiError
from app.client.navigation import FORBIDDEN_PATH, LOGIN_PATH, Navigator, Redirect
from app.client.session import AuthSession, SessionError
from app.client.storage import ClientStorage, JsonFileStorage, MemoryStorage

__all__ = [
    "PENDING",
    "FORBIDDEN_PATH",
    "LOGIN_PATH",
    "ApiClient",
    "ApiError",
    "AuthSession",
    "ClientStorage",
    "JsonFileStorage",
    "MemoryStorage",
    "Navigator",
    "Redirect",
    "SessionError",
    "guard_route",
    "require_auth",
    "require_role",
]
