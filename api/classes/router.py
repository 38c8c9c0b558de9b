"""
Class API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from auth import claims, dependencies

from . import schemas, service

router = APIRouter(prefix="/api/v1/classes")

writers = dependencies.require_roles(claims.ROLE_ADMIN, claims.ROLE_OFFICE_MANAGER)
readers = dependencies.require_roles(
    claims.ROLE_ADMIN,
    claims.ROLE_OFFICE_MANAGER,
    claims.ROLE_ADULT,
    claims.ROLE_TEACHER,
)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=schemas.ClassResponse)
async def add_class(
    request: schemas.AddClassRequest,
    current: claims.Claims = Depends(writers),
) -> schemas.ClassResponse:
    return await service.add_class(request, current=current)


@router.get("", response_model=list[schemas.ClassResponse])
async def list_classes(
    current: claims.Claims = Depends(readers),
) -> list[schemas.ClassResponse]:
    return await service.list_classes(current=current)


@router.get("/{class_id}", response_model=schemas.ClassResponse)
async def get_class(
    class_id: str,
    current: claims.Claims = Depends(readers),
) -> schemas.ClassResponse:
    return await service.get_class(class_id, current=current)


@router.patch("/{class_id}", response_model=schemas.ClassResponse)
async def update_class(
    class_id: str,
    request: schemas.UpdateClassRequest,
    current: claims.Claims = Depends(writers),
) -> schemas.ClassResponse:
    return await service.update_class(class_id, request, current=current)


@router.delete("/{class_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_class(
    class_id: str,
    current: claims.Claims = Depends(writers),
) -> Response:
    await service.delete_class(class_id, current=current)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
