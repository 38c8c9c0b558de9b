"""
Child API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from auth import claims, dependencies

from . import schemas, service

router = APIRouter(prefix="/api/v1/children")

writers = dependencies.require_roles(claims.ROLE_ADMIN, claims.ROLE_OFFICE_MANAGER, claims.ROLE_ADULT)
readers = dependencies.require_roles(
    claims.ROLE_ADMIN,
    claims.ROLE_OFFICE_MANAGER,
    claims.ROLE_ADULT,
    claims.ROLE_TEACHER,
)
removers = dependencies.require_roles(claims.ROLE_ADMIN, claims.ROLE_OFFICE_MANAGER)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=schemas.ChildResponse)
async def add_child(
    request: schemas.AddChildRequest,
    current: claims.Claims = Depends(writers),
) -> schemas.ChildResponse:
    return await service.add_child(request, current=current)


@router.get("", response_model=list[schemas.ChildResponse])
async def list_children(
    current: claims.Claims = Depends(readers),
) -> list[schemas.ChildResponse]:
    return await service.list_children(current=current)


@router.get("/{child_id}", response_model=schemas.ChildResponse)
async def get_child(
    child_id: str,
    current: claims.Claims = Depends(readers),
) -> schemas.ChildResponse:
    return await service.get_child(child_id, current=current)


@router.patch("/{child_id}", response_model=schemas.ChildResponse)
async def update_child(
    child_id: str,
    request: schemas.UpdateChildRequest,
    current: claims.Claims = Depends(writers),
) -> schemas.ChildResponse:
    return await service.update_child(child_id, request, current=current)


@router.delete("/{child_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_child(
    child_id: str,
    current: claims.Claims = Depends(removers),
) -> Response:
    await service.delete_child(child_id, current=current)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{child_id}/responsibles", response_model=schemas.ChildResponse)
async def set_responsible(
    child_id: str,
    request: schemas.SetResponsibleRequest,
    current: claims.Claims = Depends(writers),
) -> schemas.ChildResponse:
    return await service.set_responsible(child_id, request, current=current)
