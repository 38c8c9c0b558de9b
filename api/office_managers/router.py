"""
Office manager API endpoints (admin only).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from auth import claims, dependencies

from . import schemas, service

router = APIRouter(prefix="/api/v1/office-managers")

admin_only = dependencies.require_roles(claims.ROLE_ADMIN)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=schemas.OfficeManagerResponse)
async def add_office_manager(
    request: schemas.AddOfficeManagerRequest,
    _: claims.Claims = Depends(admin_only),
) -> schemas.OfficeManagerResponse:
    return await service.add_office_manager(request)


@router.get("", response_model=list[schemas.OfficeManagerResponse])
async def list_office_managers(
    daycare_id: str | None = Query(default=None, alias="daycareId"),
    _: claims.Claims = Depends(admin_only),
) -> list[schemas.OfficeManagerResponse]:
    return await service.list_office_managers(daycare_id=daycare_id)


@router.get("/{office_manager_id}", response_model=schemas.OfficeManagerResponse)
async def get_office_manager(
    office_manager_id: str,
    _: claims.Claims = Depends(admin_only),
) -> schemas.OfficeManagerResponse:
    return await service.get_office_manager(office_manager_id)


@router.patch("/{office_manager_id}", response_model=schemas.OfficeManagerResponse)
async def update_office_manager(
    office_manager_id: str,
    request: schemas.UpdateOfficeManagerRequest,
    _: claims.Claims = Depends(admin_only),
) -> schemas.OfficeManagerResponse:
    return await service.update_office_manager(office_manager_id, request)


@router.delete("/{office_manager_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_office_manager(
    office_manager_id: str,
    _: claims.Claims = Depends(admin_only),
) -> Response:
    await service.delete_office_manager(office_manager_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
