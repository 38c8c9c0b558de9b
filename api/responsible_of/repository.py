"""
Links between adult responsibles and children (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def add_link(*, responsible_id: str, child_id: str, relationship: str, conn: Any = None) -> None:
    await db.execute(
        """
        INSERT INTO responsible_of (responsible_id, child_id, relationship)
        VALUES ($1, $2, $3)
        """,
        responsible_id,
        child_id,
        relationship,
        conn=conn,
    )


async def get_link(responsible_id: str, child_id: str, *, conn: Any = None) -> dict | None:
    return await db.fetch_one(
        """
        SELECT responsible_id, child_id, relationship
        FROM responsible_of
        WHERE responsible_id = $1 AND child_id = $2
        """,
        responsible_id,
        child_id,
        conn=conn,
    )


async def list_links(child_ids: list[str], *, conn: Any = None) -> list[dict]:
    if not child_ids:
        return []
    return await db.fetch_all(
        """
        SELECT ro.responsible_id, ro.child_id, ro.relationship, ar.first_name, ar.last_name
        FROM responsible_of ro
        JOIN adult_responsibles ar ON ar.responsible_id = ro.responsible_id
        WHERE ro.child_id = ANY($1::varchar[])
        ORDER BY ro.child_id, ar.last_name, ar.first_name
        """,
        child_ids,
        conn=conn,
    )
