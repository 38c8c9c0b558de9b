"""
Age range business logic.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import HTTPException, status

from auth.claims import Claims
from daycares import service as daycare_service

from . import repository, schemas

logger = logging.getLogger(__name__)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="age range not found")


async def add_age_range(request: schemas.AddAgeRangeRequest, *, current: Claims) -> schemas.AgeRangeResponse:
    daycare_id = current.resolve_daycare_id(
        request.daycare_id,
        message="you can't add an age range to a different daycare of you",
    )
    await daycare_service.ensure_daycare_exists(daycare_id)

    row = await repository.add_age_range(daycare_id=daycare_id, fields=request.model_dump())
    logger.info("age_range_created age_range_id=%s daycare_id=%s", row["age_range_id"], daycare_id)
    return schemas.AgeRangeResponse.from_row(row)


async def get_age_range(age_range_id: str, *, current: Claims) -> schemas.AgeRangeResponse:
    row = await repository.get_age_range(age_range_id, daycare_id=current.search_options().daycare_id)
    if row is None:
        raise _not_found()
    return schemas.AgeRangeResponse.from_row(row)


async def list_age_ranges(*, current: Claims) -> list[schemas.AgeRangeResponse]:
    rows = await repository.list_age_ranges(daycare_id=current.search_options().daycare_id)
    return [schemas.AgeRangeResponse.from_row(row) for row in rows]


async def update_age_range(
    age_range_id: str,
    request: schemas.UpdateAgeRangeRequest,
    *,
    current: Claims,
) -> schemas.AgeRangeResponse:
    existing = await repository.get_age_range(age_range_id, daycare_id=current.search_options().daycare_id)
    if existing is None:
        raise _not_found()

    changes = {k: v for k, v in request.changes().items() if v is not None}
    merged = {**existing, **changes}
    if not schemas.bounds_ok(merged["min"], merged["min_unit"], merged["max"], merged["max_unit"]):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=schemas.MIN_ABOVE_MAX)

    row = await repository.update_age_range(age_range_id, changes)
    if row is None:
        raise _not_found()
    return schemas.AgeRangeResponse.from_row(row)


async def delete_age_range(age_range_id: str, *, current: Claims) -> None:
    if await repository.get_age_range(age_range_id, daycare_id=current.search_options().daycare_id) is None:
        raise _not_found()
    try:
        await repository.delete_age_range(age_range_id)
    except asyncpg.ForeignKeyViolationError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="age range is still used by a class",
        ) from exc
    logger.info("age_range_deleted age_range_id=%s", age_range_id)
