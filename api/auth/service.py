"""
Auth business logic.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, status

from core import config, db
from core.errors import ValidationError

from . import claims as claims_module
from . import repository, schemas, security

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def validate_password(password: str) -> None:
    if len(password or "") < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"password must be at least {MIN_PASSWORD_LENGTH} characters long")


async def create_account(*, email: str, password: str, role: str, conn: Any) -> dict:
    """
    Insert a user row and grant it `role`.

    Must run inside the caller's transaction (`conn`) so the profile row the
    caller writes next is committed or rolled back together with the user.
    """
    validate_password(password)
    user_row = await repository.create_user(
        email=email,
        password_hash=security.hash_password(password),
        conn=conn,
    )
    await repository.add_role(str(user_row["user_id"]), role, conn=conn)
    return user_row


async def login(payload: schemas.LoginRequest) -> schemas.TokenResponse:
    user_row = await repository.get_user_by_email(payload.email)
    if user_row is None or not security.verify_password(payload.password, str(user_row.get("password") or "")):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="login failed",
        )

    user_id = str(user_row["user_id"])
    roles = await repository.get_user_roles(user_id)
    daycare_id = await repository.get_user_daycare_id(user_id)

    token = security.build_access_token(
        user_id=user_id,
        email=str(user_row["email"]),
        roles=roles,
        daycare_id=daycare_id,
    )
    logger.info("login_ok user_id=%s roles=%s", user_id, ",".join(roles))
    return schemas.TokenResponse(token=token)


def claims_from_access_token(access_token: str) -> claims_module.Claims:
    try:
        payload = security.decode_access_token(access_token)
    except security.AuthSecurityError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc
    return claims_module.Claims.from_payload(payload)


def me(current: claims_module.Claims) -> schemas.MeResponse:
    return schemas.MeResponse(
        id=current.user_id,
        email=current.email,
        roles=list(current.roles),
        daycare_id=current.daycare_id,
    )


async def bootstrap_admin() -> None:
    """
    Create the admin account named by ADMIN_EMAIL / ADMIN_PASSWORD once.
    """
    credentials = config.bootstrap_admin()
    if credentials is None:
        return
    email, password = credentials

    if await repository.get_user_by_email(email) is not None:
        return

    async with db.transaction() as conn:
        user_row = await create_account(
            email=email,
            password=password,
            role=claims_module.ROLE_ADMIN,
            conn=conn,
        )
    logger.info("admin_bootstrapped user_id=%s", user_row["user_id"])
