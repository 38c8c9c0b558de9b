"""
Adult responsible persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

PROFILE_COLUMNS = (
    "first_name",
    "last_name",
    "gender",
    "phone",
    "address_1",
    "address_2",
    "city",
    "state",
    "zip",
)

_SELECT = """
    SELECT ar.responsible_id, u.email, ar.daycare_id, ar.first_name, ar.last_name, ar.gender,
           ar.phone, ar.address_1, ar.address_2, ar.city, ar.state, ar.zip
    FROM adult_responsibles ar
    JOIN users u ON u.user_id = ar.responsible_id
"""


async def add_adult(
    *,
    responsible_id: str,
    daycare_id: str,
    profile: dict[str, Any],
    conn: Any = None,
) -> None:
    await db.execute(
        """
        INSERT INTO adult_responsibles (
            responsible_id, daycare_id, first_name, last_name, gender,
            phone, address_1, address_2, city, state, zip
        )
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11)
        """,
        responsible_id,
        daycare_id,
        *(profile.get(c) for c in PROFILE_COLUMNS),
        conn=conn,
    )


async def get_adult(responsible_id: str, *, daycare_id: str | None = None, conn: Any = None) -> dict | None:
    if daycare_id is not None:
        return await db.fetch_one(
            _SELECT + " WHERE ar.responsible_id = $1 AND ar.daycare_id = $2",
            responsible_id,
            daycare_id,
            conn=conn,
        )
    return await db.fetch_one(_SELECT + " WHERE ar.responsible_id = $1", responsible_id, conn=conn)


async def list_adults(*, daycare_id: str | None = None, conn: Any = None) -> list[dict]:
    if daycare_id is not None:
        return await db.fetch_all(
            _SELECT + " WHERE ar.daycare_id = $1 ORDER BY ar.last_name, ar.first_name",
            daycare_id,
            conn=conn,
        )
    return await db.fetch_all(_SELECT + " ORDER BY ar.last_name, ar.first_name", conn=conn)


async def update_adult(responsible_id: str, changes: dict[str, Any], *, conn: Any = None) -> bool:
    assignments, args = db.set_clause(changes, PROFILE_COLUMNS)
    if not assignments:
        return True
    status = await db.execute(
        f"UPDATE adult_responsibles SET {assignments} WHERE responsible_id = $1",
        responsible_id,
        *args,
        conn=conn,
    )
    return db.affected_rows(status) > 0
