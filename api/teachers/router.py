"""
Teacher API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from auth import claims, dependencies

from . import schemas, service

router = APIRouter(prefix="/api/v1/teachers")

managers = dependencies.require_roles(claims.ROLE_ADMIN, claims.ROLE_OFFICE_MANAGER)
readers = dependencies.require_roles(claims.ROLE_ADMIN, claims.ROLE_OFFICE_MANAGER, claims.ROLE_ADULT)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=schemas.TeacherResponse)
async def add_teacher(
    request: schemas.AddTeacherRequest,
    current: claims.Claims = Depends(managers),
) -> schemas.TeacherResponse:
    return await service.add_teacher(request, current=current)


@router.get("", response_model=list[schemas.TeacherResponse])
async def list_teachers(
    current: claims.Claims = Depends(readers),
) -> list[schemas.TeacherResponse]:
    return await service.list_teachers(current=current)


@router.get("/{teacher_id}", response_model=schemas.TeacherResponse)
async def get_teacher(
    teacher_id: str,
    current: claims.Claims = Depends(managers),
) -> schemas.TeacherResponse:
    return await service.get_teacher(teacher_id, current=current)


@router.patch("/{teacher_id}", response_model=schemas.TeacherResponse)
async def update_teacher(
    teacher_id: str,
    request: schemas.UpdateTeacherRequest,
    current: claims.Claims = Depends(managers),
) -> schemas.TeacherResponse:
    return await service.update_teacher(teacher_id, request, current=current)


@router.delete("/{teacher_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_teacher(
    teacher_id: str,
    current: claims.Claims = Depends(managers),
) -> Response:
    await service.delete_teacher(teacher_id, current=current)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{teacher_id}/classes", response_model=schemas.TeacherResponse)
async def set_teacher_class(
    teacher_id: str,
    request: schemas.SetTeacherClassRequest,
    current: claims.Claims = Depends(managers),
) -> schemas.TeacherResponse:
    return await service.set_teacher_class(teacher_id, request, current=current)
