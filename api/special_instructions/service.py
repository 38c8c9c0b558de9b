"""
Special instruction business logic.
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


async def list_special_instructions(child_id: str, *, current: Claims) -> list[schemas.SpecialInstructionResponse]:
    await _ensure_child_visible(child_id, current)
    rows = await repository.list_special_instructions([child_id])
    return [schemas.SpecialInstructionResponse.from_row(row) for row in rows]


async def add_special_instruction(
    child_id: str,
    request: schemas.SpecialInstructionRequest,
    *,
    current: Claims,
) -> schemas.SpecialInstructionResponse:
    await _ensure_child_visible(child_id, current)
    row = await repository.add_special_instruction(child_id=child_id, instruction=request.instruction)
    logger.info(
        "special_instruction_added child_id=%s special_instruction_id=%s",
        child_id,
        row["special_instruction_id"],
    )
    return schemas.SpecialInstructionResponse.from_row(row)


async def delete_special_instruction(child_id: str, special_instruction_id: str, *, current: Claims) -> None:
    await _ensure_child_visible(child_id, current)
    if not await repository.delete_special_instruction(special_instruction_id, child_id=child_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="special instruction not found")
