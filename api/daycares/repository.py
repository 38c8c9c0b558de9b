"""
Daycare persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

COLUMNS = ("name", "address_1", "address_2", "city", "state", "zip")

_SELECT = """
    SELECT daycare_id, name, address_1, address_2, city, state, zip
    FROM daycares
"""


async def add_daycare(fields: dict[str, Any], *, conn: Any = None) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO daycares (daycare_id, name, address_1, address_2, city, state, zip)
        VALUES ($1, $2, $3, $4, $5, $6, $7)
        RETURNING daycare_id, name, address_1, address_2, city, state, zip
        """,
        db.new_id(),
        *(fields.get(c) for c in COLUMNS),
        conn=conn,
    )
    if row is None:
        raise RuntimeError("Failed to insert daycare.")
    return row


async def get_daycare(daycare_id: str, *, conn: Any = None) -> dict | None:
    return await db.fetch_one(_SELECT + " WHERE daycare_id = $1", daycare_id, conn=conn)


async def list_daycares(*, conn: Any = None) -> list[dict]:
    return await db.fetch_all(_SELECT + " ORDER BY name, daycare_id", conn=conn)


async def update_daycare(daycare_id: str, changes: dict[str, Any], *, conn: Any = None) -> dict | None:
    assignments, args = db.set_clause(changes, COLUMNS)
    if not assignments:
        return await get_daycare(daycare_id, conn=conn)
    return await db.fetch_one(
        f"""
        UPDATE daycares
        SET {assignments}
        WHERE daycare_id = $1
        RETURNING daycare_id, name, address_1, address_2, city, state, zip
        """,
        daycare_id,
        *args,
        conn=conn,
    )


async def delete_daycare(daycare_id: str, *, conn: Any = None) -> bool:
    status = await db.execute("DELETE FROM daycares WHERE daycare_id = $1", daycare_id, conn=conn)
    return db.affected_rows(status) > 0
