"""
Teacher business logic.

Creating a teacher writes the user account and its profile in one
transaction. Class assignments decide which children a teacher can read.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from auth import claims as claims_module
from auth import repository as auth_repository
from auth import service as auth_service
from classes import repository as class_repository
from core import db, errors
from daycares import repository as daycare_repository

from . import repository, schemas

logger = logging.getLogger(__name__)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="teacher not found")


async def _with_classes(rows: list[dict], *, conn=None) -> list[schemas.TeacherResponse]:
    class_ids = await repository.class_ids_by_teacher([str(r["teacher_id"]) for r in rows], conn=conn)
    return [
        schemas.TeacherResponse.from_row(row, class_ids=class_ids.get(str(row["teacher_id"])))
        for row in rows
    ]


async def add_teacher(request: schemas.AddTeacherRequest, *, current: claims_module.Claims) -> schemas.TeacherResponse:
    auth_service.validate_password(request.password)
    daycare_id = current.resolve_daycare_id(
        request.daycare_id,
        message="cannot create user for another daycare",
    )

    try:
        async with db.transaction() as conn:
            if await daycare_repository.get_daycare(daycare_id, conn=conn) is None:
                raise errors.NotFoundError("daycare not found")

            user_row = await auth_service.create_account(
                email=str(request.email),
                password=request.password,
                role=claims_module.ROLE_TEACHER,
                conn=conn,
            )
            teacher_id = str(user_row["user_id"])
            await repository.add_teacher(
                teacher_id=teacher_id,
                daycare_id=daycare_id,
                profile=request.changes(),
                conn=conn,
            )
            row = await repository.get_teacher(teacher_id, conn=conn)
    except Exception as exc:
        logger.warning("teacher_add_rolled_back email=%s err=%s", request.email, exc)
        raise errors.wrap(exc, "failed to add teacher") from exc

    logger.info("teacher_created teacher_id=%s daycare_id=%s", teacher_id, daycare_id)
    return schemas.TeacherResponse.from_row(row)


async def get_teacher(teacher_id: str, *, current: claims_module.Claims) -> schemas.TeacherResponse:
    row = await repository.get_teacher(teacher_id, daycare_id=current.search_options().daycare_id)
    if row is None:
        raise _not_found()
    return (await _with_classes([row]))[0]


async def list_teachers(*, current: claims_module.Claims) -> list[schemas.TeacherResponse]:
    rows = await repository.list_teachers(daycare_id=current.search_options().daycare_id)
    return await _with_classes(rows)


async def update_teacher(
    teacher_id: str,
    request: schemas.UpdateTeacherRequest,
    *,
    current: claims_module.Claims,
) -> schemas.TeacherResponse:
    daycare_id = current.search_options().daycare_id

    try:
        async with db.transaction() as conn:
            if await repository.get_teacher(teacher_id, daycare_id=daycare_id, conn=conn) is None:
                raise errors.NotFoundError("teacher not found")
            if request.email is not None:
                await auth_repository.update_user_email(teacher_id, str(request.email), conn=conn)
            await repository.update_teacher(teacher_id, request.changes(exclude={"email"}), conn=conn)
            row = await repository.get_teacher(teacher_id, conn=conn)
            response = (await _with_classes([row], conn=conn))[0]
    except Exception as exc:
        raise errors.wrap(exc, "failed to update teacher") from exc

    return response


async def delete_teacher(teacher_id: str, *, current: claims_module.Claims) -> None:
    if await repository.get_teacher(teacher_id, daycare_id=current.search_options().daycare_id) is None:
        raise _not_found()
    await auth_repository.delete_user(teacher_id)
    logger.info("teacher_deleted teacher_id=%s", teacher_id)


async def set_teacher_class(
    teacher_id: str,
    request: schemas.SetTeacherClassRequest,
    *,
    current: claims_module.Claims,
) -> schemas.TeacherResponse:
    scope = current.search_options().daycare_id

    try:
        async with db.transaction() as conn:
            teacher = await repository.get_teacher(teacher_id, daycare_id=scope, conn=conn)
            if teacher is None:
                raise errors.NotFoundError("teacher not found")
            klass = await class_repository.get_class(request.class_id, daycare_id=scope, conn=conn)
            if klass is None:
                raise errors.NotFoundError("class not found")
            if str(klass["daycare_id"]) != str(teacher["daycare_id"]):
                raise errors.ValidationError("teacher and class must belong to the same daycare")

            await repository.add_teacher_class(teacher_id, request.class_id, conn=conn)
            response = (await _with_classes([teacher], conn=conn))[0]
    except Exception as exc:
        raise errors.wrap(exc, "failed to set teacher class") from exc

    logger.info("teacher_class_set teacher_id=%s class_id=%s", teacher_id, request.class_id)
    return response
