"""
Auth security helpers.
"""

from __future__ import annotations

import time
from typing import Any, Iterable

import bcrypt
import jwt

from core import config


class AuthSecurityError(RuntimeError):
    pass


def jwt_secret() -> str:
    # Local default keeps development simple.
    # In production, set JWT_SECRET in environment.
    return config.env_str("JWT_SECRET", "dev-change-this-secret")


def jwt_algorithm() -> str:
    return config.env_str("JWT_ALG", "HS256")


def access_token_expire_minutes() -> int:
    # 6 hours
    return config.env_int("ACCESS_TOKEN_EXPIRE_MIN", 360)


def now_epoch_s() -> int:
    return int(time.time())


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise AuthSecurityError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


def build_access_token(
    *,
    user_id: str,
    email: str,
    roles: Iterable[str],
    daycare_id: str | None = None,
) -> str:
    issued_at = now_epoch_s()
    expires_at = issued_at + (access_token_expire_minutes() * 60)

    payload: dict[str, Any] = {
        "sub": user_id,
        "userId": user_id,
        "email": email,
        "roles": sorted(set(roles)),
        "iat": issued_at,
        "exp": expires_at,
    }
    if daycare_id:
        payload["daycareId"] = daycare_id
    return jwt.encode(payload, jwt_secret(), algorithm=jwt_algorithm())


def decode_access_token(token: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    try:
        payload = jwt.decode(raw, jwt_secret(), algorithms=[jwt_algorithm()])
    except jwt.ExpiredSignatureError as exc:
        raise AuthSecurityError("Access token is expired.") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc

    if not str(payload.get("userId") or "").strip():
        raise AuthSecurityError("Access token has no userId claim.")
    if not isinstance(payload.get("roles"), list):
        raise AuthSecurityError("Access token has no roles claim.")

    return payload
