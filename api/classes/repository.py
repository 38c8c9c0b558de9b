"""
Class persistence (raw SQL). Reads embed the class's age range.
"""

from __future__ import annotations

from typing import Any

from core import db

COLUMNS = ("name", "description", "age_range_id")

_SELECT = """
    SELECT c.class_id, c.daycare_id, c.name, c.description, c.age_range_id,
           ar.stage, ar.min, ar.min_unit, ar.max, ar.max_unit
    FROM classes c
    JOIN age_ranges ar ON ar.age_range_id = c.age_range_id
"""


async def add_class(
    *,
    class_id: str,
    daycare_id: str,
    age_range_id: str,
    name: str,
    description: str | None,
    conn: Any = None,
) -> None:
    await db.execute(
        """
        INSERT INTO classes (class_id, daycare_id, age_range_id, name, description)
        VALUES ($1, $2, $3, $4, $5)
        """,
        class_id,
        daycare_id,
        age_range_id,
        name,
        description,
        conn=conn,
    )


async def get_class(class_id: str, *, daycare_id: str | None = None, conn: Any = None) -> dict | None:
    if daycare_id is not None:
        return await db.fetch_one(
            _SELECT + " WHERE c.class_id = $1 AND c.daycare_id = $2",
            class_id,
            daycare_id,
            conn=conn,
        )
    return await db.fetch_one(_SELECT + " WHERE c.class_id = $1", class_id, conn=conn)


async def list_classes(*, daycare_id: str | None = None, conn: Any = None) -> list[dict]:
    if daycare_id is not None:
        return await db.fetch_all(_SELECT + " WHERE c.daycare_id = $1 ORDER BY c.name", daycare_id, conn=conn)
    return await db.fetch_all(_SELECT + " ORDER BY c.daycare_id, c.name", conn=conn)


async def class_name_exists(
    daycare_id: str,
    name: str,
    *,
    exclude_class_id: str | None = None,
    conn: Any = None,
) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS found
        FROM classes
        WHERE daycare_id = $1 AND name = $2 AND ($3::varchar IS NULL OR class_id <> $3)
        """,
        daycare_id,
        name,
        exclude_class_id,
        conn=conn,
    )
    return row is not None


async def update_class(class_id: str, changes: dict[str, Any], *, conn: Any = None) -> bool:
    assignments, args = db.set_clause(changes, COLUMNS)
    if not assignments:
        return True
    status = await db.execute(
        f"UPDATE classes SET {assignments} WHERE class_id = $1",
        class_id,
        *args,
        conn=conn,
    )
    return db.affected_rows(status) > 0


async def delete_class(class_id: str, *, conn: Any = None) -> bool:
    status = await db.execute("DELETE FROM classes WHERE class_id = $1", class_id, conn=conn)
    return db.affected_rows(status) > 0
