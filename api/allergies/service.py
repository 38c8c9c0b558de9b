"""
Allergy business logic. Allergies only exist attached to a child the caller
can see.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from auth.claims import Claims
from children import repository as child_repository

from . import repository, schemas

logger = logging.getLogger(__name__)


async def _ensure_child_visible(child_id: str, current: Claims) -> None:
    if await child_repository.get_child(child_id, options=current.search_options()) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="child not found")


async def list_allergies(child_id: str, *, current: Claims) -> list[schemas.AllergyResponse]:
    await _ensure_child_visible(child_id, current)
    rows = await repository.list_allergies([child_id])
    return [schemas.AllergyResponse.from_row(row) for row in rows]


async def add_allergy(
    child_id: str,
    request: schemas.AllergyRequest,
    *,
    current: Claims,
) -> schemas.AllergyResponse:
    await _ensure_child_visible(child_id, current)
    row = await repository.add_allergy(child_id=child_id, allergy=request.allergy, instruction=request.instruction)
    logger.info("allergy_added child_id=%s allergy_id=%s", child_id, row["allergy_id"])
    return schemas.AllergyResponse.from_row(row)


async def delete_allergy(child_id: str, allergy_id: str, *, current: Claims) -> None:
    await _ensure_child_visible(child_id, current)
    if not await repository.delete_allergy(allergy_id, child_id=child_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="allergy not found")
