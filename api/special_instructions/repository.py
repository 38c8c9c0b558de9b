"""
Special instruction persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def add_special_instruction(*, child_id: str, instruction: str, conn: Any = None) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO special_instructions (special_instruction_id, child_id, instruction)
        VALUES ($1, $2, $3)
        RETURNING special_instruction_id, child_id, instruction
        """,
        db.new_id(),
        child_id,
        instruction,
        conn=conn,
    )
    if row is None:
        raise RuntimeError("Failed to insert special instruction.")
    return row


async def list_special_instructions(child_ids: list[str], *, conn: Any = None) -> list[dict]:
    if not child_ids:
        return []
    return await db.fetch_all(
        """
        SELECT special_instruction_id, child_id, instruction
        FROM special_instructions
        WHERE child_id = ANY($1::varchar[])
        ORDER BY child_id, special_instruction_id
        """,
        child_ids,
        conn=conn,
    )


async def delete_special_instruction(special_instruction_id: str, *, child_id: str, conn: Any = None) -> bool:
    status = await db.execute(
        "DELETE FROM special_instructions WHERE special_instruction_id = $1 AND child_id = $2",
        special_instruction_id,
        child_id,
        conn=conn,
    )
    return db.affected_rows(status) > 0


async def delete_child_special_instructions(child_id: str, *, conn: Any = None) -> int:
    status = await db.execute("DELETE FROM special_instructions WHERE child_id = $1", child_id, conn=conn)
    return db.affected_rows(status)
