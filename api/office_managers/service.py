"""
Office manager business logic.

Creating an office manager writes three rows (user, office manager, role) in
one transaction.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from auth import claims
from auth import repository as auth_repository
from auth import service as auth_service
from core import db, errors
from daycares import repository as daycare_repository

from . import repository, schemas

logger = logging.getLogger(__name__)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="office manager not found")


async def add_office_manager(request: schemas.AddOfficeManagerRequest) -> schemas.OfficeManagerResponse:
    auth_service.validate_password(request.password)

    try:
        async with db.transaction() as conn:
            if await daycare_repository.get_daycare(request.daycare_id, conn=conn) is None:
                raise errors.NotFoundError("daycare not found")

            user_row = await auth_service.create_account(
                email=str(request.email),
                password=request.password,
                role=claims.ROLE_OFFICE_MANAGER,
                conn=conn,
            )
            office_manager_id = str(user_row["user_id"])
            await repository.add_office_manager(
                office_manager_id=office_manager_id,
                daycare_id=request.daycare_id,
                profile=request.changes(),
                conn=conn,
            )
            row = await repository.get_office_manager(office_manager_id, conn=conn)
    except Exception as exc:
        logger.warning("office_manager_add_rolled_back email=%s err=%s", request.email, exc)
        raise errors.wrap(exc, "failed to add office manager") from exc

    logger.info("office_manager_created office_manager_id=%s daycare_id=%s", office_manager_id, request.daycare_id)
    return schemas.OfficeManagerResponse.from_row(row)


async def get_office_manager(office_manager_id: str) -> schemas.OfficeManagerResponse:
    row = await repository.get_office_manager(office_manager_id)
    if row is None:
        raise _not_found()
    return schemas.OfficeManagerResponse.from_row(row)


async def list_office_managers(*, daycare_id: str | None = None) -> list[schemas.OfficeManagerResponse]:
    rows = await repository.list_office_managers(daycare_id=daycare_id)
    return [schemas.OfficeManagerResponse.from_row(row) for row in rows]


async def update_office_manager(
    office_manager_id: str,
    request: schemas.UpdateOfficeManagerRequest,
) -> schemas.OfficeManagerResponse:
    changes = request.changes(exclude={"email"})

    try:
        async with db.transaction() as conn:
            if await repository.get_office_manager(office_manager_id, conn=conn) is None:
                raise errors.NotFoundError("office manager not found")
            if "daycare_id" in changes and await daycare_repository.get_daycare(changes["daycare_id"], conn=conn) is None:
                raise errors.NotFoundError("daycare not found")
            if request.email is not None:
                await auth_repository.update_user_email(office_manager_id, str(request.email), conn=conn)
            await repository.update_office_manager(office_manager_id, changes, conn=conn)
            row = await repository.get_office_manager(office_manager_id, conn=conn)
    except Exception as exc:
        raise errors.wrap(exc, "failed to update office manager") from exc

    return schemas.OfficeManagerResponse.from_row(row)


async def delete_office_manager(office_manager_id: str) -> None:
    if await repository.get_office_manager(office_manager_id) is None:
        raise _not_found()
    await auth_repository.delete_user(office_manager_id)
    logger.info("office_manager_deleted office_manager_id=%s", office_manager_id)
