"""
Async database access helpers (raw SQL) using asyncpg.

The connection pool is created by the FastAPI lifespan hook and kept on
`app.state.db_pool` (see `api/main.py`). Route handlers never touch the pool
directly: they depend on `get_connection`, which acquires one connection for
the duration of the request and hands it back afterwards.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping
from typing import Any

import asyncpg
from fastapi import Request

from . import settings

logger = logging.getLogger(__name__)


async def create_pool() -> asyncpg.Pool:
    pool = await asyncpg.create_pool(
        dsn=settings.database_url(),
        min_size=settings.db_pool_min_size(),
        max_size=settings.db_pool_max_size(),
        command_timeout=settings.db_command_timeout(),
    )
    logger.info(
        "db_pool_open min_size=%s max_size=%s",
        settings.db_pool_min_size(),
        settings.db_pool_max_size(),
    )
    return pool


async def close_pool(pool: asyncpg.Pool | None) -> None:
    if pool is None:
        return None
    await pool.close()
    logger.info("db_pool_closed")


def pool_from_request(request: Request) -> asyncpg.Pool:
    pool = getattr(request.app.state, "db_pool", None)
    if pool is None:
        raise RuntimeError("DB pool is not initialized. Create it in the app lifespan.")
    return pool


async def get_connection(request: Request) -> AsyncIterator[asyncpg.Connection]:
    """
    FastAPI dependency: one pooled connection per request.
    """
    async with pool_from_request(request).acquire() as conn:
        yield conn


def _record_to_dict(record: Mapping[str, Any]) -> dict[str, Any]:
    return dict(record)


async def fetch_one(conn: asyncpg.Connection, sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await conn.fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(conn: asyncpg.Connection, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await conn.fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


def affected_rows(status: str | None) -> int:
    """
    Parse the row count out of a command status tag.

    asyncpg returns tags like "UPDATE 1", "DELETE 0" or "INSERT 0 1";
    the count is always the last token.
    """
    if not status:
        return 0
    tail = status.rsplit(" ", 1)[-1]
    return int(tail) if tail.isdigit() else 0


async def execute(conn: asyncpg.Connection, sql: str, *args: Any) -> int:
    """
    Run a statement (INSERT/UPDATE/DELETE). Returns the affected row count.
    """
    status = await conn.execute(sql, *args)
    return affected_rows(status)


def build_set_clause(fields: Mapping[str, Any], *, start: int = 1) -> tuple[str, list[Any]]:
    """
    Build `col = $n, ...` for a partial UPDATE.

    Column names come from the caller's whitelist (schema field names), values
    are always bound. Returns the clause and the values in placeholder order.
    """
    if not fields:
        raise ValueError("build_set_clause called with no fields.")

    parts: list[str] = []
    values: list[Any] = []
    for offset, (column, value) in enumerate(fields.items()):
        parts.append(f"{column} = ${start + offset}")
        values.append(value)
    return ", ".join(parts), values
