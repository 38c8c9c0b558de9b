"""
Child business logic.

Enrolling a child writes several rows (the child, its responsible link, its
allergies and special instructions). They are written in one transaction so a
failure at any step leaves nothing behind.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any

from fastapi import HTTPException, status

from allergies import repository as allergy_repository
from auth.claims import Claims
from classes import repository as class_repository
from core import db, errors
from responsible_of import repository as responsible_repository
from responsible_of import service as responsible_service
from special_instructions import repository as instruction_repository

from . import dates, repository, schemas

logger = logging.getLogger(__name__)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="child not found")


def _group_by_child(rows: list[dict]) -> dict[str, list[dict]]:
    grouped: dict[str, list[dict]] = defaultdict(list)
    for row in rows:
        grouped[str(row["child_id"])].append(row)
    return grouped


async def _to_responses(rows: list[dict], *, conn: Any = None) -> list[schemas.ChildResponse]:
    child_ids = [str(row["child_id"]) for row in rows]
    allergies = _group_by_child(await allergy_repository.list_allergies(child_ids, conn=conn))
    instructions = _group_by_child(await instruction_repository.list_special_instructions(child_ids, conn=conn))
    responsibles = _group_by_child(await responsible_repository.list_links(child_ids, conn=conn))
    return [
        schemas.ChildResponse.from_row(
            row,
            allergies=allergies.get(child_id),
            special_instructions=instructions.get(child_id),
            responsibles=responsibles.get(child_id),
        )
        for child_id, row in zip(child_ids, rows)
    ]


async def _check_class(class_id: str, *, daycare_id: str, conn: Any) -> None:
    row = await class_repository.get_class(class_id, conn=conn)
    if row is None:
        raise errors.NotFoundError("class not found")
    if str(row["daycare_id"]) != daycare_id:
        raise errors.ValidationError("class does not belong to this daycare")


async def _write_care_notes(
    child_id: str,
    *,
    allergies: list[Any],
    special_instructions: list[Any],
    conn: Any,
) -> None:
    for item in allergies:
        await allergy_repository.add_allergy(
            child_id=child_id,
            allergy=item.allergy,
            instruction=item.instruction,
            conn=conn,
        )
    for item in special_instructions:
        await instruction_repository.add_special_instruction(
            child_id=child_id,
            instruction=item.instruction,
            conn=conn,
        )


async def add_child(request: schemas.AddChildRequest, *, current: Claims) -> schemas.ChildResponse:
    birth_date = dates.parse_date(request.birth_date, label="birth date")
    start_date = dates.parse_optional_date(request.start_date, label="start date")

    responsible_id = (request.responsible_id or "").strip()
    if not responsible_id:
        raise errors.ValidationError("responsibleId is mandatory")

    daycare_id = current.resolve_daycare_id(
        request.daycare_id,
        message="child does not belong to this daycare",
    )
    if current.is_adult and not (current.is_admin or current.is_office_manager) and responsible_id != current.user_id:
        raise errors.ForbiddenError("adults can only register their own children")

    relationship = responsible_service.validate_relationship(request.relationship)

    child_id = db.new_id()
    fields = request.model_dump(
        include={"first_name", "last_name", "gender", "notes", "class_id"},
    )
    fields.update(birth_date=birth_date, start_date=start_date, class_id=request.class_id or None)

    step = "begin"
    try:
        async with db.transaction() as conn:
            if fields["class_id"]:
                step = "check_class"
                await _check_class(fields["class_id"], daycare_id=daycare_id, conn=conn)

            step = "insert_child"
            await repository.add_child(child_id=child_id, daycare_id=daycare_id, fields=fields, conn=conn)

            step = "link_responsible"
            await responsible_service.link_responsible(
                child_id=child_id,
                child_daycare_id=daycare_id,
                responsible_id=responsible_id,
                relationship=relationship,
                conn=conn,
            )

            step = "insert_care_notes"
            await _write_care_notes(
                child_id,
                allergies=request.allergies,
                special_instructions=request.special_instructions,
                conn=conn,
            )

            step = "reload"
            row = await repository.get_child(child_id, conn=conn)
            (response,) = await _to_responses([row], conn=conn)
    except Exception as exc:
        logger.warning("child_add_rolled_back step=%s daycare_id=%s err=%s", step, daycare_id, exc)
        raise errors.wrap(exc, "failed to add child") from exc

    logger.info("child_created child_id=%s daycare_id=%s", child_id, daycare_id)
    return response


async def get_child(child_id: str, *, current: Claims) -> schemas.ChildResponse:
    row = await repository.get_child(child_id, options=current.search_options())
    if row is None:
        raise _not_found()
    (response,) = await _to_responses([row])
    return response


async def list_children(*, current: Claims) -> list[schemas.ChildResponse]:
    rows = await repository.list_children(options=current.search_options())
    return await _to_responses(rows)


async def update_child(
    child_id: str,
    request: schemas.UpdateChildRequest,
    *,
    current: Claims,
) -> schemas.ChildResponse:
    changes = request.changes(exclude={"daycare_id", "allergies", "special_instructions"})
    if "birth_date" in changes:
        changes["birth_date"] = dates.parse_date(changes["birth_date"], label="birth date")
    if "start_date" in changes:
        changes["start_date"] = dates.parse_optional_date(changes["start_date"], label="start date")
    if "class_id" in changes:
        changes["class_id"] = changes["class_id"] or None
    for required in ("first_name", "last_name"):
        if required in changes and changes[required] is None:
            raise errors.ValidationError(f"{required} cannot be empty")

    try:
        async with db.transaction() as conn:
            existing = await repository.get_child(child_id, options=current.search_options(), conn=conn)
            if existing is None:
                raise errors.NotFoundError("child not found")
            daycare_id = str(existing["daycare_id"])
            if request.daycare_id and request.daycare_id != daycare_id:
                raise errors.ValidationError("you can't update a child daycare")

            if changes.get("class_id"):
                await _check_class(changes["class_id"], daycare_id=daycare_id, conn=conn)
            await repository.update_child(child_id, changes, conn=conn)

            if request.allergies is not None:
                await allergy_repository.delete_child_allergies(child_id, conn=conn)
            if request.special_instructions is not None:
                await instruction_repository.delete_child_special_instructions(child_id, conn=conn)
            await _write_care_notes(
                child_id,
                allergies=request.allergies or [],
                special_instructions=request.special_instructions or [],
                conn=conn,
            )

            row = await repository.get_child(child_id, conn=conn)
            (response,) = await _to_responses([row], conn=conn)
    except Exception as exc:
        logger.warning("child_update_rolled_back child_id=%s err=%s", child_id, exc)
        raise errors.wrap(exc, "failed to update child") from exc

    return response


async def delete_child(child_id: str, *, current: Claims) -> None:
    if await repository.get_child(child_id, options=current.search_options()) is None:
        raise _not_found()
    await repository.delete_child(child_id)
    logger.info("child_deleted child_id=%s", child_id)


async def set_responsible(
    child_id: str,
    request: schemas.SetResponsibleRequest,
    *,
    current: Claims,
) -> schemas.ChildResponse:
    relationship = responsible_service.validate_relationship(request.relationship)

    try:
        async with db.transaction() as conn:
            child = await repository.get_child(child_id, options=current.search_options(), conn=conn)
            if child is None:
                raise errors.NotFoundError("child not found")
            await responsible_service.link_responsible(
                child_id=child_id,
                child_daycare_id=str(child["daycare_id"]),
                responsible_id=request.responsible_id,
                relationship=relationship,
                conn=conn,
            )
            (response,) = await _to_responses([child], conn=conn)
    except Exception as exc:
        raise errors.wrap(exc, "failed to set responsible") from exc

    return response
