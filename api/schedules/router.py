"""
Schedule API endpoints, nested under the child or teacher that owns them.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from auth import claims, dependencies

from . import schemas, service

router = APIRouter(prefix="/api/v1")

managers = dependencies.require_roles(claims.ROLE_ADMIN, claims.ROLE_OFFICE_MANAGER)


@router.post(
    "/children/{child_id}/schedules",
    status_code=status.HTTP_201_CREATED,
    response_model=schemas.ScheduleResponse,
)
async def add_child_schedule(
    child_id: str,
    request: schemas.ScheduleRequest,
    current: claims.Claims = Depends(managers),
) -> schemas.ScheduleResponse:
    return await service.add_schedule(service.OWNER_CHILD, child_id, request, current=current)


@router.get("/children/{child_id}/schedules/{schedule_id}", response_model=schemas.ScheduleResponse)
async def get_child_schedule(
    child_id: str,
    schedule_id: str,
    current: claims.Claims = Depends(managers),
) -> schemas.ScheduleResponse:
    return await service.get_schedule(service.OWNER_CHILD, child_id, schedule_id, current=current)


@router.patch("/children/{child_id}/schedules/{schedule_id}", response_model=schemas.ScheduleResponse)
async def update_child_schedule(
    child_id: str,
    schedule_id: str,
    request: schemas.ScheduleRequest,
    current: claims.Claims = Depends(managers),
) -> schemas.ScheduleResponse:
    return await service.update_schedule(service.OWNER_CHILD, child_id, schedule_id, request, current=current)


@router.delete("/children/{child_id}/schedules/{schedule_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_child_schedule(
    child_id: str,
    schedule_id: str,
    current: claims.Claims = Depends(managers),
) -> Response:
    await service.delete_schedule(service.OWNER_CHILD, child_id, schedule_id, current=current)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/teachers/{teacher_id}/schedules",
    status_code=status.HTTP_201_CREATED,
    response_model=schemas.ScheduleResponse,
)
async def add_teacher_schedule(
    teacher_id: str,
    request: schemas.ScheduleRequest,
    current: claims.Claims = Depends(managers),
) -> schemas.ScheduleResponse:
    return await service.add_schedule(service.OWNER_TEACHER, teacher_id, request, current=current)


@router.get("/teachers/{teacher_id}/schedules/{schedule_id}", response_model=schemas.ScheduleResponse)
async def get_teacher_schedule(
    teacher_id: str,
    schedule_id: str,
    current: claims.Claims = Depends(managers),
) -> schemas.ScheduleResponse:
    return await service.get_schedule(service.OWNER_TEACHER, teacher_id, schedule_id, current=current)


@router.patch("/teachers/{teacher_id}/schedules/{schedule_id}", response_model=schemas.ScheduleResponse)
async def update_teacher_schedule(
    teacher_id: str,
    schedule_id: str,
    request: schemas.ScheduleRequest,
    current: claims.Claims = Depends(managers),
) -> schemas.ScheduleResponse:
    return await service.update_schedule(service.OWNER_TEACHER, teacher_id, schedule_id, request, current=current)


@router.delete("/teachers/{teacher_id}/schedules/{schedule_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_teacher_schedule(
    teacher_id: str,
    schedule_id: str,
    current: claims.Claims = Depends(managers),
) -> Response:
    await service.delete_schedule(service.OWNER_TEACHER, teacher_id, schedule_id, current=current)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
