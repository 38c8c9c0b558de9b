"""
Child persistence (raw SQL).

Reads take a `SearchOptions` so every query is scoped the same way: by
daycare for staff, and additionally by responsible link for adults
and by class assignment for teachers.
"""

from __future__ import annotations

from typing import Any

from auth.claims import SearchOptions
from core import db

COLUMNS = ("first_name", "last_name", "birth_date", "gender", "start_date", "notes", "class_id")

_SELECT = """
    SELECT c.child_id, c.daycare_id, c.class_id, c.first_name, c.last_name,
           c.birth_date, c.gender, c.start_date, c.notes, c.schedule_id
    FROM children c
"""


def _scope(options: SearchOptions | None, args: list[Any]) -> list[str]:
    clauses: list[str] = []
    if options is None:
        return clauses
    if options.daycare_id is not None:
        args.append(options.daycare_id)
        clauses.append(f"c.daycare_id = ${len(args)}")
    if options.responsible_id is not None:
        args.append(options.responsible_id)
        clauses.append(
            "EXISTS (SELECT 1 FROM responsible_of ro "
            f"WHERE ro.child_id = c.child_id AND ro.responsible_id = ${len(args)})"
        )
    if options.teacher_id is not None:
        args.append(options.teacher_id)
        clauses.append(
            "EXISTS (SELECT 1 FROM teacher_classes tc "
            f"WHERE tc.class_id = c.class_id AND tc.teacher_id = ${len(args)})"
        )
    return clauses


async def add_child(*, child_id: str, daycare_id: str, fields: dict[str, Any], conn: Any = None) -> None:
    await db.execute(
        """
        INSERT INTO children (
            child_id, daycare_id, class_id, first_name, last_name,
            birth_date, gender, start_date, notes
        )
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
        """,
        child_id,
        daycare_id,
        fields.get("class_id"),
        fields.get("first_name"),
        fields.get("last_name"),
        fields.get("birth_date"),
        fields.get("gender"),
        fields.get("start_date"),
        fields.get("notes"),
        conn=conn,
    )


async def get_child(child_id: str, *, options: SearchOptions | None = None, conn: Any = None) -> dict | None:
    args: list[Any] = [child_id]
    clauses = ["c.child_id = $1", *_scope(options, args)]
    return await db.fetch_one(_SELECT + " WHERE " + " AND ".join(clauses), *args, conn=conn)


async def list_children(*, options: SearchOptions | None = None, conn: Any = None) -> list[dict]:
    args: list[Any] = []
    clauses = _scope(options, args)
    where = (" WHERE " + " AND ".join(clauses)) if clauses else ""
    return await db.fetch_all(_SELECT + where + " ORDER BY c.last_name, c.first_name", *args, conn=conn)


async def update_child(child_id: str, changes: dict[str, Any], *, conn: Any = None) -> bool:
    assignments, args = db.set_clause(changes, COLUMNS)
    if not assignments:
        return True
    status = await db.execute(
        f"UPDATE children SET {assignments} WHERE child_id = $1",
        child_id,
        *args,
        conn=conn,
    )
    return db.affected_rows(status) > 0


async def delete_child(child_id: str, *, conn: Any = None) -> bool:
    status = await db.execute("DELETE FROM children WHERE child_id = $1", child_id, conn=conn)
    return db.affected_rows(status) > 0


async def set_child_schedule(child_id: str, schedule_id: str | None, *, conn: Any = None) -> bool:
    status = await db.execute(
        "UPDATE children SET schedule_id = $2 WHERE child_id = $1",
        child_id,
        schedule_id,
        conn=conn,
    )
    return db.affected_rows(status) > 0
