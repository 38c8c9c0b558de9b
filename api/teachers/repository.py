"""
Teacher persistence (raw SQL), including class assignments.
"""

from __future__ import annotations

from typing import Any

from core import db

PROFILE_COLUMNS = ("first_name", "last_name", "gender", "phone")

_SELECT = """
    SELECT t.teacher_id, u.email, t.daycare_id, t.schedule_id,
           t.first_name, t.last_name, t.gender, t.phone
    FROM teachers t
    JOIN users u ON u.user_id = t.teacher_id
"""


async def add_teacher(*, teacher_id: str, daycare_id: str, profile: dict[str, Any], conn: Any = None) -> None:
    await db.execute(
        """
        INSERT INTO teachers (teacher_id, daycare_id, first_name, last_name, gender, phone)
        VALUES ($1, $2, $3, $4, $5, $6)
        """,
        teacher_id,
        daycare_id,
        *(profile.get(c) for c in PROFILE_COLUMNS),
        conn=conn,
    )


async def get_teacher(teacher_id: str, *, daycare_id: str | None = None, conn: Any = None) -> dict | None:
    if daycare_id is not None:
        return await db.fetch_one(
            _SELECT + " WHERE t.teacher_id = $1 AND t.daycare_id = $2",
            teacher_id,
            daycare_id,
            conn=conn,
        )
    return await db.fetch_one(_SELECT + " WHERE t.teacher_id = $1", teacher_id, conn=conn)


async def list_teachers(*, daycare_id: str | None = None, conn: Any = None) -> list[dict]:
    if daycare_id is not None:
        return await db.fetch_all(
            _SELECT + " WHERE t.daycare_id = $1 ORDER BY t.last_name, t.first_name",
            daycare_id,
            conn=conn,
        )
    return await db.fetch_all(_SELECT + " ORDER BY t.last_name, t.first_name", conn=conn)


async def update_teacher(teacher_id: str, changes: dict[str, Any], *, conn: Any = None) -> bool:
    assignments, args = db.set_clause(changes, PROFILE_COLUMNS)
    if not assignments:
        return True
    status = await db.execute(
        f"UPDATE teachers SET {assignments} WHERE teacher_id = $1",
        teacher_id,
        *args,
        conn=conn,
    )
    return db.affected_rows(status) > 0


async def set_teacher_schedule(teacher_id: str, schedule_id: str | None, *, conn: Any = None) -> bool:
    status = await db.execute(
        "UPDATE teachers SET schedule_id = $2 WHERE teacher_id = $1",
        teacher_id,
        schedule_id,
        conn=conn,
    )
    return db.affected_rows(status) > 0


async def add_teacher_class(teacher_id: str, class_id: str, *, conn: Any = None) -> None:
    await db.execute(
        """
        INSERT INTO teacher_classes (teacher_id, class_id)
        VALUES ($1, $2)
        ON CONFLICT (teacher_id, class_id) DO NOTHING
        """,
        teacher_id,
        class_id,
        conn=conn,
    )


async def class_ids_by_teacher(teacher_ids: list[str], *, conn: Any = None) -> dict[str, list[str]]:
    if not teacher_ids:
        return {}
    rows = await db.fetch_all(
        """
        SELECT teacher_id, class_id
        FROM teacher_classes
        WHERE teacher_id = ANY($1::varchar[])
        ORDER BY class_id
        """,
        teacher_ids,
        conn=conn,
    )
    grouped: dict[str, list[str]] = {tid: [] for tid in teacher_ids}
    for row in rows:
        grouped.setdefault(str(row["teacher_id"]), []).append(str(row["class_id"]))
    return grouped
