"""
Office manager and adult account creation: user, profile and role rows are
written together or not at all.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi import HTTPException

from adults import schemas as adult_schemas
from adults import service as adult_service
from auth import service as auth_service
from core.errors import ConflictError, ForbiddenError, ValidationError
from office_managers import schemas as om_schemas
from office_managers import service as om_service

OM_ROW = {
    "office_manager_id": "user-9",
    "email": "om@example.com",
    "daycare_id": "daycare-1",
    "first_name": "Ana",
    "last_name": "Diaz",
    "phone": None,
}

ADULT_ROW = {
    "responsible_id": "user-9",
    "email": "dad@example.com",
    "daycare_id": "daycare-1",
    "first_name": "Leo",
    "last_name": "Diaz",
}


@pytest.fixture
def accounts():
    with patch.object(auth_service.repository, "create_user", new=AsyncMock()) as create_user, \
         patch.object(auth_service.repository, "add_role", new=AsyncMock()) as add_role, \
         patch("daycares.repository.get_daycare", new=AsyncMock(return_value={"daycare_id": "daycare-1"})) as get_daycare:
        create_user.return_value = {"user_id": "user-9", "email": "om@example.com"}
        yield {"create_user": create_user, "add_role": add_role, "get_daycare": get_daycare}


def test_short_password_is_rejected():
    with pytest.raises(ValidationError, match="password must be at least 6 characters long"):
        auth_service.validate_password("12345")


@pytest.mark.asyncio
async def test_office_manager_created_with_role(accounts, fake_transaction):
    request = om_schemas.AddOfficeManagerRequest.model_validate(
        {"email": "om@example.com", "password": "secret1", "daycareId": "daycare-1", "firstName": "Ana"}
    )
    with patch.object(om_service.repository, "add_office_manager", new=AsyncMock()) as add_profile, \
         patch.object(om_service.repository, "get_office_manager", new=AsyncMock(return_value=OM_ROW)):
        result = await om_service.add_office_manager(request)

    assert result.id == "user-9"
    assert accounts["add_role"].await_args.args == ("user-9", "officemanager")
    assert add_profile.await_args.kwargs["profile"]["first_name"] == "Ana"
    password_hash = accounts["create_user"].await_args.kwargs["password_hash"]
    assert password_hash != "secret1" and password_hash.startswith("$2")
    assert fake_transaction.committed


@pytest.mark.asyncio
async def test_duplicate_email_rolls_back_with_409(accounts, fake_transaction):
    accounts["create_user"].side_effect = ConflictError("email is already registered")
    request = om_schemas.AddOfficeManagerRequest.model_validate(
        {"email": "om@example.com", "password": "secret1", "daycareId": "daycare-1"}
    )
    with patch.object(om_service.repository, "add_office_manager", new=AsyncMock()) as add_profile:
        with pytest.raises(HTTPException) as excinfo:
            await om_service.add_office_manager(request)

    assert excinfo.value.status_code == 409
    assert excinfo.value.detail == "failed to add office manager: email is already registered"
    add_profile.assert_not_awaited()
    assert fake_transaction.rolled_back


@pytest.mark.asyncio
async def test_office_manager_needs_existing_daycare(accounts, fake_transaction):
    accounts["get_daycare"].return_value = None
    request = om_schemas.AddOfficeManagerRequest.model_validate(
        {"email": "om@example.com", "password": "secret1", "daycareId": "nowhere"}
    )

    with pytest.raises(HTTPException) as excinfo:
        await om_service.add_office_manager(request)

    assert excinfo.value.status_code == 404
    accounts["create_user"].assert_not_awaited()


@pytest.mark.asyncio
async def test_office_manager_adds_adult_to_own_daycare(accounts, fake_transaction, office_manager):
    request = adult_schemas.AddAdultRequest.model_validate(
        {"email": "dad@example.com", "password": "secret1", "firstName": "Leo", "address_1": "2 Elm St"}
    )
    with patch.object(adult_service.repository, "add_adult", new=AsyncMock()) as add_profile, \
         patch.object(adult_service.repository, "get_adult", new=AsyncMock(return_value=ADULT_ROW)):
        result = await adult_service.add_adult(request, current=office_manager)

    assert result.daycare_id == "daycare-1"
    assert add_profile.await_args.kwargs["daycare_id"] == "daycare-1"
    assert add_profile.await_args.kwargs["profile"]["address_1"] == "2 Elm St"
    assert accounts["add_role"].await_args.args == ("user-9", "adult")
    assert fake_transaction.committed


@pytest.mark.asyncio
async def test_office_manager_cannot_add_adult_elsewhere(accounts, fake_transaction, office_manager):
    request = adult_schemas.AddAdultRequest.model_validate(
        {"email": "dad@example.com", "password": "secret1", "daycareId": "daycare-2"}
    )

    with pytest.raises(ForbiddenError):
        await adult_service.add_adult(request, current=office_manager)
    assert fake_transaction.entered == 0


@pytest.mark.asyncio
async def test_admin_must_name_daycare_for_adult(accounts, fake_transaction, admin):
    request = adult_schemas.AddAdultRequest.model_validate({"email": "dad@example.com", "password": "secret1"})

    with pytest.raises(ValidationError, match="as an admin, you must specify a daycareId"):
        await adult_service.add_adult(request, current=admin)


@pytest.mark.asyncio
async def test_adult_lookup_is_scoped_to_daycare(office_manager):
    with patch.object(adult_service.repository, "get_adult", new=AsyncMock(return_value=None)) as get_adult:
        with pytest.raises(HTTPException) as excinfo:
            await adult_service.get_adult("user-9", current=office_manager)

    assert excinfo.value.status_code == 404
    assert get_adult.await_args.kwargs["daycare_id"] == "daycare-1"
