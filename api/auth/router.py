"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from . import claims, dependencies, schemas, service

router = APIRouter()

ANY_ROLE = claims.ALL_ROLES


@router.post("/auth/login", response_model=schemas.TokenResponse)
async def login(request: schemas.LoginRequest) -> schemas.TokenResponse:
    return await service.login(request)


@router.get("/api/v1/me", response_model=schemas.MeResponse)
async def me(
    current: claims.Claims = Depends(dependencies.require_roles(*ANY_ROLE)),
) -> schemas.MeResponse:
    return service.me(current)
