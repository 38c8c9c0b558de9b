"""
Age range persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

COLUMNS = ("stage", "min", "min_unit", "max", "max_unit")

_SELECT = """
    SELECT age_range_id, daycare_id, stage, min, min_unit, max, max_unit
    FROM age_ranges
"""


async def add_age_range(*, daycare_id: str, fields: dict[str, Any], conn: Any = None) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO age_ranges (age_range_id, daycare_id, stage, min, min_unit, max, max_unit)
        VALUES ($1, $2, $3, $4, $5, $6, $7)
        RETURNING age_range_id, daycare_id, stage, min, min_unit, max, max_unit
        """,
        db.new_id(),
        daycare_id,
        fields.get("stage"),
        fields.get("min", 0),
        fields.get("min_unit", "M"),
        fields.get("max", 0),
        fields.get("max_unit", "M"),
        conn=conn,
    )
    if row is None:
        raise RuntimeError("Failed to insert age range.")
    return row


async def get_age_range(age_range_id: str, *, daycare_id: str | None = None, conn: Any = None) -> dict | None:
    if daycare_id is not None:
        return await db.fetch_one(
            _SELECT + " WHERE age_range_id = $1 AND daycare_id = $2",
            age_range_id,
            daycare_id,
            conn=conn,
        )
    return await db.fetch_one(_SELECT + " WHERE age_range_id = $1", age_range_id, conn=conn)


async def list_age_ranges(*, daycare_id: str | None = None, conn: Any = None) -> list[dict]:
    if daycare_id is not None:
        return await db.fetch_all(_SELECT + " WHERE daycare_id = $1 ORDER BY stage", daycare_id, conn=conn)
    return await db.fetch_all(_SELECT + " ORDER BY daycare_id, stage", conn=conn)


async def update_age_range(age_range_id: str, changes: dict[str, Any], *, conn: Any = None) -> dict | None:
    assignments, args = db.set_clause(changes, COLUMNS)
    if not assignments:
        return await get_age_range(age_range_id, conn=conn)
    return await db.fetch_one(
        f"""
        UPDATE age_ranges
        SET {assignments}
        WHERE age_range_id = $1
        RETURNING age_range_id, daycare_id, stage, min, min_unit, max, max_unit
        """,
        age_range_id,
        *args,
        conn=conn,
    )


async def delete_age_range(age_range_id: str, *, conn: Any = None) -> bool:
    status = await db.execute("DELETE FROM age_ranges WHERE age_range_id = $1", age_range_id, conn=conn)
    return db.affected_rows(status) > 0
