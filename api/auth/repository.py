"""
Auth persistence helpers (users and roles).
"""

from __future__ import annotations

from typing import Any

from core import db
from core.errors import ConflictError, ValidationError

from . import claims


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


async def create_user(*, email: str, password_hash: str, conn: Any = None) -> dict:
    existing = await get_user_by_email(email, conn=conn)
    if existing is not None:
        raise ConflictError("email is already registered")

    row = await db.fetch_one(
        """
        INSERT INTO users (user_id, email, password)
        VALUES ($1, $2, $3)
        RETURNING user_id, email, created_at
        """,
        db.new_id(),
        normalize_email(email),
        password_hash,
        conn=conn,
    )
    if row is None:
        raise RuntimeError("Failed to create user.")
    return row


async def get_user_by_email(email: str, *, conn: Any = None) -> dict | None:
    return await db.fetch_one(
        """
        SELECT user_id, email, password, created_at
        FROM users
        WHERE lower(email) = lower($1)
        """,
        normalize_email(email),
        conn=conn,
    )


async def update_user_email(user_id: str, email: str, *, conn: Any = None) -> bool:
    status = await db.execute(
        """
        UPDATE users
        SET email = $2
        WHERE user_id = $1
        """,
        user_id,
        normalize_email(email),
        conn=conn,
    )
    return db.affected_rows(status) > 0


async def delete_user(user_id: str, *, conn: Any = None) -> bool:
    """
    Delete a user. Profile rows, roles and responsible links cascade.
    """
    status = await db.execute("DELETE FROM users WHERE user_id = $1", user_id, conn=conn)
    return db.affected_rows(status) > 0


async def add_role(user_id: str, role: str, *, conn: Any = None) -> dict:
    if not claims.is_role_valid(role):
        raise ValidationError(f"role is not valid, must be one of [{' '.join(claims.ALL_ROLES)}]")

    row = await db.fetch_one(
        """
        INSERT INTO roles (user_id, role)
        VALUES ($1, $2)
        ON CONFLICT (user_id, role) DO UPDATE SET role = EXCLUDED.role
        RETURNING user_id, role
        """,
        user_id,
        role,
        conn=conn,
    )
    if row is None:
        raise RuntimeError("Failed to add role.")
    return row


async def get_user_roles(user_id: str, *, conn: Any = None) -> list[str]:
    rows = await db.fetch_all(
        "SELECT role FROM roles WHERE user_id = $1 ORDER BY role",
        user_id,
        conn=conn,
    )
    return [str(r["role"]) for r in rows]


async def get_user_daycare_id(user_id: str, *, conn: Any = None) -> str | None:
    row = await db.fetch_one(
        """
        SELECT COALESCE(om.daycare_id, ar.daycare_id, t.daycare_id) AS daycare_id
        FROM users u
        LEFT JOIN office_managers om ON om.office_manager_id = u.user_id
        LEFT JOIN adult_responsibles ar ON ar.responsible_id = u.user_id
        LEFT JOIN teachers t ON t.teacher_id = u.user_id
        WHERE u.user_id = $1
        """,
        user_id,
        conn=conn,
    )
    if row is None or row.get("daycare_id") is None:
        return None
    return str(row["daycare_id"])
