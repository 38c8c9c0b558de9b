"""
Class business logic.

A class always points at an age range of its own daycare. Callers either
reference an existing range by id or describe a new one inline, in which case
the range and the class are written in the same transaction.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, status

from ageranges import repository as age_range_repository
from ageranges.schemas import AgeRangeRef
from auth.claims import Claims
from core import db, errors
from daycares import repository as daycare_repository

from . import repository, schemas

logger = logging.getLogger(__name__)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="class not found")


async def _resolve_age_range(ref: AgeRangeRef, *, daycare_id: str, conn: Any) -> str:
    if ref.id:
        existing = await age_range_repository.get_age_range(ref.id, daycare_id=daycare_id, conn=conn)
        if existing is None:
            raise errors.NotFoundError("age range not found in this daycare")
        return str(existing["age_range_id"])

    created = await age_range_repository.add_age_range(
        daycare_id=daycare_id,
        fields=ref.model_dump(exclude={"id"}),
        conn=conn,
    )
    logger.info("age_range_created age_range_id=%s daycare_id=%s", created["age_range_id"], daycare_id)
    return str(created["age_range_id"])


async def add_class(request: schemas.AddClassRequest, *, current: Claims) -> schemas.ClassResponse:
    daycare_id = current.resolve_daycare_id(
        request.daycare_id,
        message="you can't add a class to a different daycare of you",
    )
    if request.age_range is None or request.age_range.is_empty():
        raise errors.ValidationError("please specify an age range")

    class_id = db.new_id()
    try:
        async with db.transaction() as conn:
            if await daycare_repository.get_daycare(daycare_id, conn=conn) is None:
                raise errors.NotFoundError("daycare not found")
            if await repository.class_name_exists(daycare_id, request.name, conn=conn):
                raise errors.ConflictError("class name already exists")

            age_range_id = await _resolve_age_range(request.age_range, daycare_id=daycare_id, conn=conn)
            await repository.add_class(
                class_id=class_id,
                daycare_id=daycare_id,
                age_range_id=age_range_id,
                name=request.name,
                description=request.description,
                conn=conn,
            )
            row = await repository.get_class(class_id, conn=conn)
    except Exception as exc:
        logger.warning("class_add_rolled_back daycare_id=%s name=%s err=%s", daycare_id, request.name, exc)
        raise errors.wrap(exc, "failed to add class") from exc

    logger.info("class_created class_id=%s daycare_id=%s", class_id, daycare_id)
    return schemas.ClassResponse.from_row(row)


async def get_class(class_id: str, *, current: Claims) -> schemas.ClassResponse:
    row = await repository.get_class(class_id, daycare_id=current.search_options().daycare_id)
    if row is None:
        raise _not_found()
    return schemas.ClassResponse.from_row(row)


async def list_classes(*, current: Claims) -> list[schemas.ClassResponse]:
    rows = await repository.list_classes(daycare_id=current.search_options().daycare_id)
    return [schemas.ClassResponse.from_row(row) for row in rows]


async def update_class(
    class_id: str,
    request: schemas.UpdateClassRequest,
    *,
    current: Claims,
) -> schemas.ClassResponse:
    scope = current.search_options().daycare_id
    if "name" in request.model_fields_set and not request.name:
        raise errors.ValidationError("class name cannot be empty")

    try:
        async with db.transaction() as conn:
            existing = await repository.get_class(class_id, daycare_id=scope, conn=conn)
            if existing is None:
                raise errors.NotFoundError("class not found")
            daycare_id = str(existing["daycare_id"])

            changes = request.changes(exclude={"age_range"})
            if request.name is not None and await repository.class_name_exists(
                daycare_id,
                request.name,
                exclude_class_id=class_id,
                conn=conn,
            ):
                raise errors.ConflictError("class name already exists")
            if request.age_range is not None and not request.age_range.is_empty():
                changes["age_range_id"] = await _resolve_age_range(
                    request.age_range,
                    daycare_id=daycare_id,
                    conn=conn,
                )

            await repository.update_class(class_id, changes, conn=conn)
            row = await repository.get_class(class_id, conn=conn)
    except Exception as exc:
        raise errors.wrap(exc, "failed to update class") from exc

    return schemas.ClassResponse.from_row(row)


async def delete_class(class_id: str, *, current: Claims) -> None:
    if await repository.get_class(class_id, daycare_id=current.search_options().daycare_id) is None:
        raise _not_found()
    await repository.delete_class(class_id)
    logger.info("class_deleted class_id=%s", class_id)
