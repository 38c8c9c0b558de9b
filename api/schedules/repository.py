"""
Schedule persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

from .schemas import TIME_COLUMNS

COLUMNS = ("walk_in", *TIME_COLUMNS)

_SELECT = "SELECT schedule_id, daycare_id, " + ", ".join(COLUMNS) + " FROM schedules"


async def add_schedule(*, schedule_id: str, daycare_id: str, fields: dict[str, Any], conn: Any = None) -> None:
    placeholders = ", ".join(f"${i}" for i in range(3, len(COLUMNS) + 3))
    await db.execute(
        f"INSERT INTO schedules (schedule_id, daycare_id, {', '.join(COLUMNS)}) VALUES ($1, $2, {placeholders})",
        schedule_id,
        daycare_id,
        bool(fields.get("walk_in")),
        *(fields.get(c) for c in TIME_COLUMNS),
        conn=conn,
    )


async def get_schedule(schedule_id: str, *, conn: Any = None) -> dict | None:
    return await db.fetch_one(_SELECT + " WHERE schedule_id = $1", schedule_id, conn=conn)


async def update_schedule(schedule_id: str, changes: dict[str, Any], *, conn: Any = None) -> bool:
    assignments, args = db.set_clause(changes, COLUMNS)
    if not assignments:
        return True
    status = await db.execute(
        f"UPDATE schedules SET {assignments} WHERE schedule_id = $1",
        schedule_id,
        *args,
        conn=conn,
    )
    return db.affected_rows(status) > 0


async def delete_schedule(schedule_id: str, *, conn: Any = None) -> bool:
    status = await db.execute("DELETE FROM schedules WHERE schedule_id = $1", schedule_id, conn=conn)
    return db.affected_rows(status) > 0
