"""
Client session context: token, cached user profile, loading flag.

Lifecycle is explicit: ``restore()`` from storage at startup, then
``login()`` / ``logout()`` mutate it, and the route guards read it.  The
API client's 401/403 interceptor also clears it.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from app.client.http import ApiClient
from app.client.storage import TOKEN_KEY, USER_KEY, ClientStorage

logger = logging.getLogger(__name__)


class SessionError(Exception):
    """The login response could not start a session."""


class AuthSession:
    def __init__(self, storage: ClientStorage, client: ApiClient) -> None:
        self._storage = storage
        self._client = client
        self.token: str | None = None
        self.user: dict[str, Any] | None = None
        self.loading = True
        client.add_rejection_listener(self._clear_memory)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    @property
    def role(self) -> str | None:
        return self.user.get("role") if self.user else None

    def restore(self) -> None:
        """Load token and cached user from storage."""
        self.token = self._storage.get(TOKEN_KEY) or None

        raw_user = self._storage.get(USER_KEY)
        self.user = None
        if raw_user:
            try:
                user = json.loads(raw_user)
            except json.JSONDecodeError:
                user = None
            if isinstance(user, dict):
                self.user = user
            else:
                logger.warning("Dropping malformed cached user profile")
                self._storage.remove(USER_KEY)

        self.loading = False

    async def login(self, email: str, password: str) -> None:
        """Authenticate against ``/auth/login`` and store the session.

        Server-side failures surface as ``ApiError``.
        """
        data = await self._client.post("/auth/login", json={"email": email, "password": password})

        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            raise SessionError("Token missing from login response")

        self._storage.set(TOKEN_KEY, token)
        self.token = token

        user = data.get("user")
        if user:
            self._storage.set(USER_KEY, json.dumps(user))
            self.user = user
        else:
            self._storage.remove(USER_KEY)
            self.user = None

    def logout(self) -> None:
        self._storage.remove(TOKEN_KEY)
        self._storage.remove(USER_KEY)
        self._clear_memory()

    def _clear_memory(self) -> None:
        self.token = None
        self.user = None
