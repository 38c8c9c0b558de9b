"""
Adult responsible API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from auth import claims, dependencies

from . import schemas, service

router = APIRouter(prefix="/api/v1/adults")

managers = dependencies.require_roles(claims.ROLE_ADMIN, claims.ROLE_OFFICE_MANAGER)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=schemas.AdultResponse)
async def add_adult(
    request: schemas.AddAdultRequest,
    current: claims.Claims = Depends(managers),
) -> schemas.AdultResponse:
    return await service.add_adult(request, current=current)


@router.get("", response_model=list[schemas.AdultResponse])
async def list_adults(
    current: claims.Claims = Depends(managers),
) -> list[schemas.AdultResponse]:
    return await service.list_adults(current=current)


@router.get("/{responsible_id}", response_model=schemas.AdultResponse)
async def get_adult(
    responsible_id: str,
    current: claims.Claims = Depends(managers),
) -> schemas.AdultResponse:
    return await service.get_adult(responsible_id, current=current)


@router.patch("/{responsible_id}", response_model=schemas.AdultResponse)
async def update_adult(
    responsible_id: str,
    request: schemas.UpdateAdultRequest,
    current: claims.Claims = Depends(managers),
) -> schemas.AdultResponse:
    return await service.update_adult(responsible_id, request, current=current)


@router.delete("/{responsible_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_adult(
    responsible_id: str,
    current: claims.Claims = Depends(managers),
) -> Response:
    await service.delete_adult(responsible_id, current=current)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
