"""Tests for the bearer-token / role dependency chain on protected routes."""

from datetime import timedelta

import pytest
from httpx import AsyncClient

from app.core.security import create_access_token

PROTECTED_ROUTES = [
    ("GET", "/protected/dashboard"),
    ("GET", "/protected/admin"),
    ("POST", "/protected/events"),
    ("PUT", "/protected/events/1"),
    ("DELETE", "/protected/events/1"),
    ("GET", "/protected/volunteers"),
    ("GET", "/protected/volunteers/1"),
    ("POST", "/protected/volunteers"),
    ("PUT", "/protected/volunteers/1"),
    ("DELETE", "/protected/volunteers/1"),
]

ADMIN_ONLY_ROUTES = [
    ("GET", "/protected/admin"),
    ("POST", "/protected/events"),
    ("PUT", "/protected/events/1"),
    ("DELETE", "/protected/events/1"),
    ("POST", "/protected/volunteers"),
    ("PUT", "/protected/volunteers/1"),
    ("DELETE", "/protected/volunteers/1"),
]


@pytest.mark.asyncio
@pytest.mark.parametrize("method,path", PROTECTED_ROUTES)
async def test_missing_token_is_401(async_client: AsyncClient, method, path):
    resp = await async_client.request(method, path)
    assert resp.status_code == 401
    assert resp.json()["message"] == "Token not provided"


@pytest.mark.asyncio
async def test_non_bearer_scheme_is_401(async_client: AsyncClient):
    resp = await async_client.get(
        "/protected/dashboard", headers={"Authorization": "Basic dXNlcjpwdw=="}
    )
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_garbage_token_is_403(async_client: AsyncClient):
    resp = await async_client.get(
        "/protected/dashboard", headers={"Authorization": "Bearer not.a.token"}
    )
    assert resp.status_code == 403
    assert resp.json()["message"] == "Invalid token"


@pytest.mark.asyncio
async def test_expired_token_is_403(async_client: AsyncClient):
    token = create_access_token("late@example.com", "admin", expires_delta=timedelta(seconds=-1))
    resp = await async_client.get(
        "/protected/dashboard", headers={"Authorization": f"Bearer {token}"}
    )
    assert resp.status_code == 403
    assert resp.json()["message"] == "Token expired"


@pytest.mark.asyncio
@pytest.mark.parametrize("method,path", ADMIN_ONLY_ROUTES)
async def test_user_role_denied_on_admin_routes(
    async_client: AsyncClient, user_headers, method, path
):
    resp = await async_client.request(method, path, headers=user_headers, json={})
    assert resp.status_code == 403
    assert resp.json()["message"] == "Access denied"


@pytest.mark.asyncio
async def test_dashboard_open_to_any_authenticated_user(async_client: AsyncClient, user_headers):
    resp = await async_client.get("/protected/dashboard", headers=user_headers)
    assert resp.status_code == 200
    assert "usuario@ifrs.edu.br" in resp.json()["message"]


@pytest.mark.asyncio
async def test_admin_area_for_admin(async_client: AsyncClient, admin_headers):
    resp = await async_client.get("/protected/admin", headers=admin_headers)
    assert resp.status_code == 200
    assert "admin@ifrs.edu.br" in resp.json()["message"]


@pytest.mark.asyncio
async def test_user_can_read_volunteers(async_client: AsyncClient, user_headers, volunteer_ids):
    resp = await async_client.get("/protected/volunteers", headers=user_headers)
    assert resp.status_code == 200
    assert [v["id"] for v in resp.json()] == volunteer_ids


@pytest.mark.asyncio
async def test_claims_are_trusted_without_user_lookup(async_client: AsyncClient):
    """A validly signed token is honoured even with no matching account."""
    token = create_access_token("nobody@example.com", "admin")
    resp = await async_client.get("/protected/admin", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_public_routes_need_no_token(async_client: AsyncClient):
    assert (await async_client.get("/")).status_code == 200
    assert (await async_client.get("/events")).status_code == 200
