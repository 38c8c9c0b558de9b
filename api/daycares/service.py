"""
Daycare business logic.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import HTTPException, status

from core import config

from . import repository, schemas

logger = logging.getLogger(__name__)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="daycare not found")


async def add_daycare(request: schemas.AddDaycareRequest) -> schemas.DaycareResponse:
    row = await repository.add_daycare(request.changes())
    logger.info("daycare_created daycare_id=%s", row["daycare_id"])
    return schemas.DaycareResponse.from_row(row)


async def get_daycare(daycare_id: str) -> schemas.DaycareResponse:
    row = await repository.get_daycare(daycare_id)
    if row is None:
        raise _not_found()
    return schemas.DaycareResponse.from_row(row)


async def list_daycares() -> list[schemas.DaycareResponse]:
    rows = await repository.list_daycares()
    return [schemas.DaycareResponse.from_row(row) for row in rows]


async def update_daycare(daycare_id: str, request: schemas.UpdateDaycareRequest) -> schemas.DaycareResponse:
    changes = request.changes()
    if "name" in changes and not changes["name"]:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="daycare name cannot be empty")

    row = await repository.update_daycare(daycare_id, changes)
    if row is None:
        raise _not_found()
    return schemas.DaycareResponse.from_row(row)


async def delete_daycare(daycare_id: str) -> None:
    if daycare_id == config.public_daycare_id():
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="the public daycare cannot be deleted")
    try:
        deleted = await repository.delete_daycare(daycare_id)
    except asyncpg.ForeignKeyViolationError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="daycare still has users") from exc
    if not deleted:
        raise _not_found()
    logger.info("daycare_deleted daycare_id=%s", daycare_id)


async def ensure_daycare_exists(daycare_id: str) -> None:
    if await repository.get_daycare(daycare_id) is None:
        raise _not_found()
