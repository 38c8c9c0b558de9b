"""
Auth API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import Field

from core.schemas import CamelModel


class LoginRequest(CamelModel):
    email: str = Field(..., min_length=3, max_length=320)
    password: str = Field(..., min_length=1, max_length=128)


class TokenResponse(CamelModel):
    token: str
    token_type: str = "bearer"


class MeResponse(CamelModel):
    id: str
    email: str
    roles: list[str]
    daycare_id: str | None = None
