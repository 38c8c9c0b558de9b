"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Every helper accepts an optional `conn`. Pass the connection yielded by
`transaction()` to run a statement inside that transaction; omit it to run on
a pooled connection in autocommit mode.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit
from uuid import uuid4

import asyncpg

from . import config

_pool: asyncpg.Pool | None = None

logger = logging.getLogger(__name__)


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = config.env_str("DATABASE_URL")
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=config.env_int("DB_POOL_MIN_SIZE", 1),
        max_size=config.env_int("DB_POOL_MAX_SIZE", 5),
        command_timeout=30,
    )
    logger.info("db_pool_ready")


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


def is_ready() -> bool:
    return _pool is not None


def new_id() -> str:
    return str(uuid4())


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


@asynccontextmanager
async def transaction() -> AsyncIterator[asyncpg.Connection]:
    """
    Acquire one connection and run the block inside a transaction.

    Commits when the block exits normally, rolls back and re-raises when it
    raises. The connection goes back to the pool on every exit path.
    """
    async with pool().acquire() as conn:  # type: asyncpg.Connection
        async with conn.transaction():
            yield conn


async def fetch_one(sql: str, *args: Any, conn: Any = None) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await (conn or pool()).fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any, conn: Any = None) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await (conn or pool()).fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def execute(sql: str, *args: Any, conn: Any = None) -> str:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL) and return asyncpg's status tag
    (e.g. "DELETE 1").
    """
    return await (conn or pool()).execute(sql, *args)


def set_clause(changes: dict[str, Any], columns: tuple[str, ...], *, first_param: int = 2) -> tuple[str, list[Any]]:
    """
    Build "col_a = $2, col_b = $3" for the whitelisted columns present in
    `changes`. Returns ("", []) when nothing is left to update.
    """
    assignments: list[str] = []
    args: list[Any] = []
    for column in columns:
        if column not in changes:
            continue
        args.append(changes[column])
        assignments.append(f"{column} = ${first_param + len(args) - 1}")
    return ", ".join(assignments), args


def affected_rows(status: str) -> int:
    # "UPDATE 3" / "DELETE 0" / "INSERT 0 1"
    try:
        return int((status or "").rsplit(" ", 1)[-1])
    except ValueError:
        return 0
