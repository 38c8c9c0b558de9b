"""
Age range API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from auth import claims, dependencies

from . import schemas, service

router = APIRouter(prefix="/api/v1/age-ranges")

managers = dependencies.require_roles(claims.ROLE_ADMIN, claims.ROLE_OFFICE_MANAGER)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=schemas.AgeRangeResponse)
async def add_age_range(
    request: schemas.AddAgeRangeRequest,
    current: claims.Claims = Depends(managers),
) -> schemas.AgeRangeResponse:
    return await service.add_age_range(request, current=current)


@router.get("", response_model=list[schemas.AgeRangeResponse])
async def list_age_ranges(
    current: claims.Claims = Depends(managers),
) -> list[schemas.AgeRangeResponse]:
    return await service.list_age_ranges(current=current)


@router.get("/{age_range_id}", response_model=schemas.AgeRangeResponse)
async def get_age_range(
    age_range_id: str,
    current: claims.Claims = Depends(managers),
) -> schemas.AgeRangeResponse:
    return await service.get_age_range(age_range_id, current=current)


@router.patch("/{age_range_id}", response_model=schemas.AgeRangeResponse)
async def update_age_range(
    age_range_id: str,
    request: schemas.UpdateAgeRangeRequest,
    current: claims.Claims = Depends(managers),
) -> schemas.AgeRangeResponse:
    return await service.update_age_range(age_range_id, request, current=current)


@router.delete("/{age_range_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_age_range(
    age_range_id: str,
    current: claims.Claims = Depends(managers),
) -> Response:
    await service.delete_age_range(age_range_id, current=current)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
