"""
Allergy persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def add_allergy(*, child_id: str, allergy: str, instruction: str | None, conn: Any = None) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO allergies (allergy_id, child_id, allergy, instruction)
        VALUES ($1, $2, $3, $4)
        RETURNING allergy_id, child_id, allergy, instruction
        """,
        db.new_id(),
        child_id,
        allergy,
        instruction,
        conn=conn,
    )
    if row is None:
        raise RuntimeError("Failed to insert allergy.")
    return row


async def list_allergies(child_ids: list[str], *, conn: Any = None) -> list[dict]:
    if not child_ids:
        return []
    return await db.fetch_all(
        """
        SELECT allergy_id, child_id, allergy, instruction
        FROM allergies
        WHERE child_id = ANY($1::varchar[])
        ORDER BY child_id, allergy
        """,
        child_ids,
        conn=conn,
    )


async def delete_allergy(allergy_id: str, *, child_id: str, conn: Any = None) -> bool:
    status = await db.execute(
        "DELETE FROM allergies WHERE allergy_id = $1 AND child_id = $2",
        allergy_id,
        child_id,
        conn=conn,
    )
    return db.affected_rows(status) > 0


async def delete_child_allergies(child_id: str, *, conn: Any = None) -> int:
    status = await db.execute("DELETE FROM allergies WHERE child_id = $1", child_id, conn=conn)
    return db.affected_rows(status)
