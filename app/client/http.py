"""
HTTP client for the API with the global auth interceptor.

Every request carries ``Authorization: Bearer <token>`` when a token is
stored.  Any 401/403 response wipes the stored session, tells the
registered listeners, and sends the user to the login view (unless already
there).  Expired tokens are discovered this way, on use.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import httpx

from app.client.navigation import LOGIN_PATH, Navigator
from app.client.storage import TOKEN_KEY, USER_KEY, ClientStorage

logger = logging.getLogger(__name__)

_REJECTED_STATUSES = {401, 403}


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiError":
        message = response.reason_phrase or "Request failed"
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            message = str(body["message"])
        return cls(response.status_code, message)


class ApiClient:
    """Async API client sharing one storage and navigator with the session."""

    def __init__(
        self,
        base_url: str,
        storage: ClientStorage,
        navigator: Navigator,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
    ) -> None:
        self._storage = storage
        self._navigator = navigator
        self._rejection_listeners: list[Callable[[], None]] = []
        self._client = httpx.AsyncClient(
            base_url=base_url,
            transport=transport,
            timeout=timeout,
            event_hooks={
                "request": [self._attach_token],
                "response": [self._handle_rejection],
            },
        )

    def add_rejection_listener(self, listener: Callable[[], None]) -> None:
        self._rejection_listeners.append(listener)

    async def _attach_token(self, request: httpx.Request) -> None:
        token = self._storage.get(TOKEN_KEY)
        if token:
            request.headers["Authorization"] = f"Bearer {token}"

    async def _handle_rejection(self, response: httpx.Response) -> None:
        if response.status_code not in _REJECTED_STATUSES:
            return

        logger.info(
            "Session rejected (%d on %s), clearing stored credentials",
            response.status_code,
            response.request.url.path,
        )
        self._storage.remove(TOKEN_KEY)
        self._storage.remove(USER_KEY)
        for listener in self._rejection_listeners:
            listener()

        if self._navigator.path != LOGIN_PATH:
            self._navigator.navigate(LOGIN_PATH)

    async def request(self, method: str, url: str, **kwargs: Any) -> Any:
        response = await self._client.request(method, url, **kwargs)
        if response.is_error:
            raise ApiError.from_response(response)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(response.status_code, "Response body is not valid JSON") from exc

    async def get(self, url: str, **kwargs: Any) -> Any:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> Any:
        return await self.request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> Any:
        return await self.request("PUT", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> Any:
        return await self.request("DELETE", url, **kwargs)

    async def aclose(self) -> None:
        await self._client.aclose()
