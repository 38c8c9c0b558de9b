"""
Schedule business logic.

A schedule belongs to exactly one child or one teacher, through the owner's
`schedule_id`. Every operation first checks that the owner is visible to the
caller and that the schedule is the one the owner points at.
"""

from __future__ import annotations

import logging
from typing import Any

from auth.claims import Claims
from children import repository as child_repository
from core import db, errors
from teachers import repository as teacher_repository

from . import repository, schemas

logger = logging.getLogger(__name__)

OWNER_CHILD = "child"
OWNER_TEACHER = "teacher"


async def _get_owner(kind: str, owner_id: str, current: Claims, *, conn: Any = None) -> dict:
    options = current.search_options()
    if kind == OWNER_CHILD:
        row = await child_repository.get_child(owner_id, options=options, conn=conn)
    else:
        row = await teacher_repository.get_teacher(owner_id, daycare_id=options.daycare_id, conn=conn)
    if row is None:
        raise errors.NotFoundError(f"{kind} not found")
    return row


async def _set_owner_schedule(kind: str, owner_id: str, schedule_id: str | None, *, conn: Any) -> None:
    if kind == OWNER_CHILD:
        await child_repository.set_child_schedule(owner_id, schedule_id, conn=conn)
    else:
        await teacher_repository.set_teacher_schedule(owner_id, schedule_id, conn=conn)


async def _owned_schedule(kind: str, owner_id: str, schedule_id: str, current: Claims, *, conn: Any = None) -> dict:
    if not schedule_id.strip():
        raise errors.ValidationError("scheduleId cannot be empty")
    owner = await _get_owner(kind, owner_id, current, conn=conn)
    if str(owner.get("schedule_id") or "") != schedule_id:
        raise errors.NotFoundError("schedule not found")
    row = await repository.get_schedule(schedule_id, conn=conn)
    if row is None:
        raise errors.NotFoundError("schedule not found")
    return row


def _changes(request: schemas.ScheduleRequest) -> dict[str, Any]:
    changes = request.changes()
    if changes.get("walk_in") is None:
        changes.pop("walk_in", None)
    return changes


async def add_schedule(
    kind: str,
    owner_id: str,
    request: schemas.ScheduleRequest,
    *,
    current: Claims,
) -> schemas.ScheduleResponse:
    try:
        request.check_times()
    except errors.ValidationError as exc:
        raise errors.wrap(exc, "failed to validate request") from exc

    schedule_id = db.new_id()
    try:
        async with db.transaction() as conn:
            owner = await _get_owner(kind, owner_id, current, conn=conn)
            previous = owner.get("schedule_id")
            await repository.add_schedule(
                schedule_id=schedule_id,
                daycare_id=str(owner["daycare_id"]),
                fields=_changes(request),
                conn=conn,
            )
            await _set_owner_schedule(kind, owner_id, schedule_id, conn=conn)
            if previous:
                await repository.delete_schedule(str(previous), conn=conn)
            row = await repository.get_schedule(schedule_id, conn=conn)
    except Exception as exc:
        logger.warning("schedule_add_rolled_back owner=%s owner_id=%s err=%s", kind, owner_id, exc)
        raise errors.wrap(exc, "failed to add schedule") from exc

    logger.info("schedule_created schedule_id=%s owner=%s owner_id=%s", schedule_id, kind, owner_id)
    return schemas.ScheduleResponse.from_row(row)


async def get_schedule(kind: str, owner_id: str, schedule_id: str, *, current: Claims) -> schemas.ScheduleResponse:
    try:
        row = await _owned_schedule(kind, owner_id, schedule_id, current)
    except errors.DomainError as exc:
        raise errors.wrap(exc, "failed to get schedule") from exc
    return schemas.ScheduleResponse.from_row(row)


async def update_schedule(
    kind: str,
    owner_id: str,
    schedule_id: str,
    request: schemas.ScheduleRequest,
    *,
    current: Claims,
) -> schemas.ScheduleResponse:
    try:
        request.check_times()
    except errors.ValidationError as exc:
        raise errors.wrap(exc, "failed to validate request") from exc

    try:
        async with db.transaction() as conn:
            await _owned_schedule(kind, owner_id, schedule_id, current, conn=conn)
            await repository.update_schedule(schedule_id, _changes(request), conn=conn)
            row = await repository.get_schedule(schedule_id, conn=conn)
    except Exception as exc:
        raise errors.wrap(exc, "failed to update schedule") from exc

    return schemas.ScheduleResponse.from_row(row)


async def delete_schedule(kind: str, owner_id: str, schedule_id: str, *, current: Claims) -> None:
    try:
        async with db.transaction() as conn:
            await _owned_schedule(kind, owner_id, schedule_id, current, conn=conn)
            # The owner's schedule_id is cleared by ON DELETE SET NULL.
            await repository.delete_schedule(schedule_id, conn=conn)
    except Exception as exc:
        raise errors.wrap(exc, "failed to delete schedule") from exc

    logger.info("schedule_deleted schedule_id=%s owner=%s owner_id=%s", schedule_id, kind, owner_id)
