"""
Office manager persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

PROFILE_COLUMNS = ("first_name", "last_name", "phone")

_SELECT = """
    SELECT om.office_manager_id, u.email, om.daycare_id, om.first_name, om.last_name, om.phone
    FROM office_managers om
    JOIN users u ON u.user_id = om.office_manager_id
"""


async def add_office_manager(
    *,
    office_manager_id: str,
    daycare_id: str,
    profile: dict[str, Any],
    conn: Any = None,
) -> None:
    await db.execute(
        """
        INSERT INTO office_managers (office_manager_id, daycare_id, first_name, last_name, phone)
        VALUES ($1, $2, $3, $4, $5)
        """,
        office_manager_id,
        daycare_id,
        *(profile.get(c) for c in PROFILE_COLUMNS),
        conn=conn,
    )


async def get_office_manager(office_manager_id: str, *, conn: Any = None) -> dict | None:
    return await db.fetch_one(_SELECT + " WHERE om.office_manager_id = $1", office_manager_id, conn=conn)


async def list_office_managers(*, daycare_id: str | None = None, conn: Any = None) -> list[dict]:
    if daycare_id is not None:
        return await db.fetch_all(
            _SELECT + " WHERE om.daycare_id = $1 ORDER BY om.last_name, om.first_name",
            daycare_id,
            conn=conn,
        )
    return await db.fetch_all(_SELECT + " ORDER BY om.last_name, om.first_name", conn=conn)


async def update_office_manager(office_manager_id: str, changes: dict[str, Any], *, conn: Any = None) -> bool:
    assignments, args = db.set_clause(changes, PROFILE_COLUMNS + ("daycare_id",))
    if not assignments:
        return True
    status = await db.execute(
        f"UPDATE office_managers SET {assignments} WHERE office_manager_id = $1",
        office_manager_id,
        *args,
        conn=conn,
    )
    return db.affected_rows(status) > 0
