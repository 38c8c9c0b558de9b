"""
Allergy API endpoints (nested under a child).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from auth import claims, dependencies

from . import schemas, service

router = APIRouter(prefix="/api/v1/children/{child_id}/allergies")

writers = dependencies.require_roles(claims.ROLE_ADMIN, claims.ROLE_OFFICE_MANAGER, claims.ROLE_ADULT)
readers = dependencies.require_roles(*claims.ALL_ROLES)


@router.get("", response_model=list[schemas.AllergyResponse])
async def list_allergies(
    child_id: str,
    current: claims.Claims = Depends(readers),
) -> list[schemas.AllergyResponse]:
    return await service.list_allergies(child_id, current=current)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=schemas.AllergyResponse)
async def add_allergy(
    child_id: str,
    request: schemas.AllergyRequest,
    current: claims.Claims = Depends(writers),
) -> schemas.AllergyResponse:
    return await service.add_allergy(child_id, request, current=current)


@router.delete("/{allergy_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_allergy(
    child_id: str,
    allergy_id: str,
    current: claims.Claims = Depends(writers),
) -> Response:
    await service.delete_allergy(child_id, allergy_id, current=current)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
