"""
Special instruction API endpoints (nested under a child).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from auth import claims, dependencies

from . import schemas, service

router = APIRouter(prefix="/api/v1/children/{child_id}/special-instructions")

writers = dependencies.require_roles(claims.ROLE_ADMIN, claims.ROLE_OFFICE_MANAGER, claims.ROLE_ADULT)
readers = dependencies.require_roles(*claims.ALL_ROLES)


@router.get("", response_model=list[schemas.SpecialInstructionResponse])
async def list_special_instructions(
    child_id: str,
    current: claims.Claims = Depends(readers),
) -> list[schemas.SpecialInstructionResponse]:
    return await service.list_special_instructions(child_id, current=current)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=schemas.SpecialInstructionResponse)
async def add_special_instruction(
    child_id: str,
    request: schemas.SpecialInstructionRequest,
    current: claims.Claims = Depends(writers),
) -> schemas.SpecialInstructionResponse:
    return await service.add_special_instruction(child_id, request, current=current)


@router.delete("/{special_instruction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_special_instruction(
    child_id: str,
    special_instruction_id: str,
    current: claims.Claims = Depends(writers),
) -> Response:
    await service.delete_special_instruction(child_id, special_instruction_id, current=current)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
