"""
HTTP-level tests for login, /me, health checks and admin-only routes.
"""

from unittest.mock import AsyncMock, patch

import pytest

from auth import security
from conftest import auth_header
from core import db
from daycares import schemas as daycare_schemas


@pytest.mark.asyncio
async def test_healthz(client):
    response = await client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_readyz_without_pool(client, monkeypatch):
    monkeypatch.setattr(db, "_pool", None)
    response = await client.get("/readyz")
    assert response.status_code == 503


@pytest.mark.asyncio
async def test_request_id_is_echoed(client):
    response = await client.get("/healthz", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


@pytest.mark.asyncio
async def test_login_returns_token_with_roles(client):
    user = {"user_id": "om-1", "email": "om@example.com", "password": security.hash_password("secret1")}
    with patch("auth.service.repository.get_user_by_email", new=AsyncMock(return_value=user)), \
         patch("auth.service.repository.get_user_roles", new=AsyncMock(return_value=["officemanager"])), \
         patch("auth.service.repository.get_user_daycare_id", new=AsyncMock(return_value="daycare-1")):
        response = await client.post("/auth/login", json={"email": "OM@example.com", "password": "secret1"})

    assert response.status_code == 200
    payload = security.decode_access_token(response.json()["token"])
    assert payload["userId"] == "om-1"
    assert payload["roles"] == ["officemanager"]
    assert payload["daycareId"] == "daycare-1"


@pytest.mark.asyncio
async def test_login_with_wrong_password_fails(client):
    user = {"user_id": "om-1", "email": "om@example.com", "password": security.hash_password("secret1")}
    with patch("auth.service.repository.get_user_by_email", new=AsyncMock(return_value=user)):
        response = await client.post("/auth/login", json={"email": "om@example.com", "password": "nope"})

    assert response.status_code == 401
    assert response.json()["detail"] == "login failed"


@pytest.mark.asyncio
async def test_login_unknown_user_fails(client):
    with patch("auth.service.repository.get_user_by_email", new=AsyncMock(return_value=None)):
        response = await client.post("/auth/login", json={"email": "ghost@example.com", "password": "secret1"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_me_reflects_token(client):
    response = await client.get("/api/v1/me", headers=auth_header(["adult"], user_id="adult-1"))
    assert response.status_code == 200
    assert response.json() == {
        "id": "adult-1",
        "email": "user@example.com",
        "roles": ["adult"],
        "daycareId": "daycare-1",
    }


@pytest.mark.asyncio
async def test_daycares_are_admin_only(client):
    response = await client.get("/api/v1/daycares", headers=auth_header(["officemanager"]))
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_admin_creates_daycare(client):
    created = daycare_schemas.DaycareResponse(id="dc-1", name="Little Bears", address_1="1 Main St")
    with patch("daycares.service.add_daycare", new=AsyncMock(return_value=created)):
        response = await client.post(
            "/api/v1/daycares",
            json={"name": "Little Bears", "address_1": "1 Main St"},
            headers=auth_header(["admin"], daycare_id=None),
        )

    assert response.status_code == 201
    assert response.json()["address_1"] == "1 Main St"


@pytest.mark.asyncio
async def test_public_daycare_cannot_be_deleted(client):
    with patch("daycares.service.repository.delete_daycare", new=AsyncMock(return_value=True)) as delete:
        response = await client.delete("/api/v1/daycares/PUBLIC", headers=auth_header(["admin"], daycare_id=None))

    assert response.status_code == 403
    delete.assert_not_awaited()


@pytest.mark.asyncio
async def test_office_manager_with_bad_email_is_422(client):
    response = await client.post(
        "/api/v1/office-managers",
        json={"email": "not-an-email", "password": "secret1", "daycareId": "dc-1"},
        headers=auth_header(["admin"], daycare_id=None),
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_adults_forbidden_for_teachers(client):
    response = await client.get("/api/v1/adults", headers=auth_header(["teacher"]))
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_classes_readable_by_adults(client):
    with patch("classes.service.list_classes", new=AsyncMock(return_value=[])):
        response = await client.get("/api/v1/classes", headers=auth_header(["adult"]))
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_age_ranges_closed_to_adults(client):
    response = await client.get("/api/v1/age-ranges", headers=auth_header(["adult"]))
    assert response.status_code == 403
