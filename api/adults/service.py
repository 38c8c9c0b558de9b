"""
Adult responsible business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from auth import claims as claims_module
from auth import repository as auth_repository
from auth import service as auth_service
from core import db, errors
from daycares import repository as daycare_repository

from . import repository, schemas

logger = logging.getLogger(__name__)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="adult not found")


async def add_adult(request: schemas.AddAdultRequest, *, current: claims_module.Claims) -> schemas.AdultResponse:
    auth_service.validate_password(request.password)
    daycare_id = current.resolve_daycare_id(
        request.daycare_id,
        message="you can't add an adult to a different daycare of you",
    )

    try:
        async with db.transaction() as conn:
            if await daycare_repository.get_daycare(daycare_id, conn=conn) is None:
                raise errors.NotFoundError("daycare not found")

            user_row = await auth_service.create_account(
                email=str(request.email),
                password=request.password,
                role=claims_module.ROLE_ADULT,
                conn=conn,
            )
            responsible_id = str(user_row["user_id"])
            await repository.add_adult(
                responsible_id=responsible_id,
                daycare_id=daycare_id,
                profile=request.changes(),
                conn=conn,
            )
            row = await repository.get_adult(responsible_id, conn=conn)
    except Exception as exc:
        logger.warning("adult_add_rolled_back email=%s err=%s", request.email, exc)
        raise errors.wrap(exc, "failed to add adult") from exc

    logger.info("adult_created responsible_id=%s daycare_id=%s", responsible_id, daycare_id)
    return schemas.AdultResponse.from_row(row)


async def get_adult(responsible_id: str, *, current: claims_module.Claims) -> schemas.AdultResponse:
    row = await repository.get_adult(responsible_id, daycare_id=current.search_options().daycare_id)
    if row is None:
        raise _not_found()
    return schemas.AdultResponse.from_row(row)


async def list_adults(*, current: claims_module.Claims) -> list[schemas.AdultResponse]:
    rows = await repository.list_adults(daycare_id=current.search_options().daycare_id)
    return [schemas.AdultResponse.from_row(row) for row in rows]


async def update_adult(
    responsible_id: str,
    request: schemas.UpdateAdultRequest,
    *,
    current: claims_module.Claims,
) -> schemas.AdultResponse:
    daycare_id = current.search_options().daycare_id

    try:
        async with db.transaction() as conn:
            if await repository.get_adult(responsible_id, daycare_id=daycare_id, conn=conn) is None:
                raise errors.NotFoundError("adult not found")
            if request.email is not None:
                await auth_repository.update_user_email(responsible_id, str(request.email), conn=conn)
            await repository.update_adult(responsible_id, request.changes(exclude={"email"}), conn=conn)
            row = await repository.get_adult(responsible_id, conn=conn)
    except Exception as exc:
        raise errors.wrap(exc, "failed to update adult") from exc

    return schemas.AdultResponse.from_row(row)


async def delete_adult(responsible_id: str, *, current: claims_module.Claims) -> None:
    if await repository.get_adult(responsible_id, daycare_id=current.search_options().daycare_id) is None:
        raise _not_found()
    await auth_repository.delete_user(responsible_id)
    logger.info("adult_deleted responsible_id=%s", responsible_id)
