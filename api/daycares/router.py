"""
Daycare API endpoints (admin only).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from auth import claims, dependencies

from . import schemas, service

router = APIRouter(prefix="/api/v1/daycares")

admin_only = dependencies.require_roles(claims.ROLE_ADMIN)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=schemas.DaycareResponse)
async def add_daycare(
    request: schemas.AddDaycareRequest,
    _: claims.Claims = Depends(admin_only),
) -> schemas.DaycareResponse:
    return await service.add_daycare(request)


@router.get("", response_model=list[schemas.DaycareResponse])
async def list_daycares(
    _: claims.Claims = Depends(admin_only),
) -> list[schemas.DaycareResponse]:
    return await service.list_daycares()


@router.get("/{daycare_id}", response_model=schemas.DaycareResponse)
async def get_daycare(
    daycare_id: str,
    _: claims.Claims = Depends(admin_only),
) -> schemas.DaycareResponse:
    return await service.get_daycare(daycare_id)


@router.patch("/{daycare_id}", response_model=schemas.DaycareResponse)
async def update_daycare(
    daycare_id: str,
    request: schemas.UpdateDaycareRequest,
    _: claims.Claims = Depends(admin_only),
) -> schemas.DaycareResponse:
    return await service.update_daycare(daycare_id, request)


@router.delete("/{daycare_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_daycare(
    daycare_id: str,
    _: claims.Claims = Depends(admin_only),
) -> Response:
    await service.delete_daycare(daycare_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
